"""Collection file loader.

The collection is a CSV with a header row ``Title,Artist,Year``; one row
per disc. Any malformed row aborts the load before network activity.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from pydantic import ValidationError

from src.common.models import CdDescription

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Title", "Artist", "Year")


class CollectionLoadError(ValueError):
    """The collection file is missing, unreadable or malformed."""


def load_descriptions(input_path: str | Path) -> list[CdDescription]:
    """Read every CD description from a collection CSV.

    Args:
        input_path: Path to the CSV file.

    Returns:
        Descriptions in file order. Duplicate rows are kept.

    Raises:
        CollectionLoadError: If the file cannot be read, a required column
            is missing, or a row has an empty cell or non-integer year.
    """
    path = Path(input_path)
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise CollectionLoadError(
                    f"{path}: missing column(s) {', '.join(missing)}"
                )
            descriptions = [_parse_row(row, reader.line_num, path) for row in reader]
    except OSError as exc:
        raise CollectionLoadError(f"Cannot read collection file {path}: {exc}") from exc
    except csv.Error as exc:
        raise CollectionLoadError(f"{path}: {exc}") from exc

    logger.info("Loaded %d CD descriptions from %s", len(descriptions), path)
    return descriptions


def _parse_row(row: dict, line_num: int, path: Path) -> CdDescription:
    title = (row.get("Title") or "").strip()
    artist = (row.get("Artist") or "").strip()
    year_text = (row.get("Year") or "").strip()

    if not title or not artist:
        raise CollectionLoadError(f"{path}:{line_num}: Title and Artist are required")
    try:
        year = int(year_text)
    except ValueError:
        raise CollectionLoadError(
            f"{path}:{line_num}: Year {year_text!r} is not an integer"
        ) from None

    try:
        return CdDescription(title=title, artist=artist, year=year)
    except ValidationError as exc:
        raise CollectionLoadError(f"{path}:{line_num}: {exc}") from exc
