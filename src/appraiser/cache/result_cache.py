"""Result cache: one JSON snapshot of a whole batch run.

The snapshot is written once, atomically, after every item has been
appraised. When it exists, the network stage is skipped entirely and the
snapshot is authoritative: there is no merge and no per-item refresh.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from src.common.models import SavedRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[SavedRecord])

# mkstemp creates 0600 files
CACHE_FILE_MODE = 0o644


class CacheError(Exception):
    """The cache file cannot be read, parsed or written."""


class ResultCache:
    """JSON file holding the list of (description, outcome) records."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, records: list[SavedRecord]) -> Path:
        """Write all records in one shot.

        The data goes to a temporary file next to the destination, which
        then replaces it; an interrupted save leaves no partial cache.

        Raises:
            CacheError: If the destination cannot be written.
        """
        payload = _RECORDS.dump_json(records, indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.chmod(tmp_name, CACHE_FILE_MODE)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheError(f"Cannot write cache {self.path}: {exc}") from exc

        logger.info("Saved %d records to %s", len(records), self.path)
        return self.path

    def load(self) -> list[SavedRecord]:
        """Read the records back, in the order they were saved.

        Raises:
            CacheError: If the file is missing, unreadable or corrupt.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise CacheError(f"Cannot read cache {self.path}: {exc}") from exc

        try:
            records = _RECORDS.validate_json(raw)
        except ValidationError as exc:
            raise CacheError(f"Corrupt cache {self.path}: {exc}") from exc

        logger.info("Loaded %d records from %s", len(records), self.path)
        return records
