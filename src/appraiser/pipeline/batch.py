"""Sequential batch runner.

Discogs allows 60 requests per minute and a single appraisal issues up to
three (search, release, release page). Items are therefore processed one
at a time with a fixed pause after each, which keeps the aggregate rate
under the limit whatever an individual appraisal needs.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from src.common.models import Appraised, CdDescription, Failed, SavedRecord

logger = logging.getLogger(__name__)

Appraise = Callable[[CdDescription], Appraised | Failed]


class BatchRunner:
    """Drive an appraisal function over a whole collection, in order.

    Args:
        appraise: Callable producing one outcome per description.
        delay_seconds: Pause after every item.
        sleep: Sleep function (injectable for tests).
    """

    def __init__(
        self,
        appraise: Appraise,
        delay_seconds: float = 3.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._appraise = appraise
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def run(self, descriptions: Sequence[CdDescription]) -> list[SavedRecord]:
        """Appraise every description and pair it with its outcome.

        Returns:
            One SavedRecord per description, in input order.
        """
        total = len(descriptions)
        records: list[SavedRecord] = []

        for i, cd in enumerate(descriptions, start=1):
            logger.info("Processing %s (%d of %d)...", cd.title, i, total)
            outcome = self._appraise(cd)
            if isinstance(outcome, Failed):
                logger.warning("  %s: %s", cd.title, outcome.error.describe())
            records.append(SavedRecord(description=cd, outcome=outcome))

            if self.delay_seconds > 0:
                self._sleep(self.delay_seconds)

        appraised = sum(1 for r in records if isinstance(r.outcome, Appraised))
        logger.info(
            "=== Batch Summary: %d/%d appraised, %d failed ===",
            appraised, total, total - appraised,
        )
        return records
