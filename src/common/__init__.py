# Common utilities and shared modules
"""
Shared components used by every appraiser stage:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
"""

from .config import settings, PROJECT_ROOT, get_discogs_api_key
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "get_discogs_api_key",
    "setup_logging",
]
