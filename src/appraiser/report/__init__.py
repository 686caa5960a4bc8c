"""Report Module - ranked price report and its CSV export."""

from .builder import build_report
from .writer import REPORT_COLUMNS, write_report

__all__ = ["REPORT_COLUMNS", "build_report", "write_report"]
