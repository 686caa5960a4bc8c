"""Price report builder.

Rows for appraised CDs come first, most valuable first. Rows for CDs that
could not be appraised follow, in descending title order, with no price
and no URL. The two groups never interleave.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.common.models import Appraised, AppraisedCd, CdDescription, ReportRow, SavedRecord


def build_report(records: Iterable[SavedRecord]) -> list[ReportRow]:
    """Turn cached appraisal records into ordered report rows."""
    appraised: list[AppraisedCd] = []
    failed: list[CdDescription] = []
    for record in records:
        if isinstance(record.outcome, Appraised):
            appraised.append(record.outcome.cd)
        else:
            failed.append(record.description)

    appraised.sort(key=lambda cd: cd.prices.median, reverse=True)
    failed.sort(key=lambda cd: cd.title, reverse=True)

    rows = [
        ReportRow(
            median_price=cd.prices.median,
            title=cd.title,
            artist=cd.artist,
            year=cd.year,
            url=cd.uri,
        )
        for cd in appraised
    ]
    rows.extend(
        ReportRow(title=cd.title, artist=cd.artist, year=cd.year)
        for cd in failed
    )
    return rows
