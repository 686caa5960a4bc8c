"""Per-CD appraisal: resolve the release, then scrape its prices."""

from __future__ import annotations

import logging

from src.common.models import (
    Appraised,
    AppraisedCd,
    CdDescription,
    Failed,
    PriceExtractionFailed,
    ReleaseInfo,
    SearchFailed,
)

from ..price_extractor.extractor import PriceExtractor
from ..release_resolver.resolver import ReleaseResolver

logger = logging.getLogger(__name__)


class CdAppraiser:
    """Compose ReleaseResolver and PriceExtractor into one appraisal.

    No retries happen at this level; the resolver's country fallback is
    the only second attempt of a run.
    """

    def __init__(self, resolver: ReleaseResolver, extractor: PriceExtractor) -> None:
        self._resolver = resolver
        self._extractor = extractor

    def appraise(self, cd: CdDescription) -> Appraised | Failed:
        release = self._resolver.resolve(cd)
        if not isinstance(release, ReleaseInfo):
            return Failed(error=SearchFailed(error=release))

        logger.info("  %s", release.uri)
        prices = self._extractor.fetch_price_statistics(release.uri)
        if isinstance(prices, PriceExtractionFailed):
            return Failed(error=prices)

        return Appraised(cd=AppraisedCd.from_release(release, prices))

    __call__ = appraise
