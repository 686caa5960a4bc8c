"""CSV export of the price report."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from src.common.models import ReportRow

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ("MedianPrice", "Title", "Artist", "Year", "Url")


def write_report(rows: list[ReportRow], output_path: str | Path) -> Path:
    """Write report rows to CSV; absent prices and URLs become empty cells."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(REPORT_COLUMNS)
        for row in rows:
            writer.writerow([
                "" if row.median_price is None else row.median_price,
                row.title,
                row.artist,
                row.year,
                row.url or "",
            ])

    logger.info("Report written to %s (%d rows)", output_path, len(rows))
    return output_path
