"""CLI entry point for the CD price appraiser.

Usage:
    # Appraise CDs.csv (or reuse data.json if present) and write Prices.csv:
    python -m src.appraiser.main

    # Custom locations:
    python -m src.appraiser.main --input my_cds.csv --cache cache.json --output prices.csv

Requires DISCOGS_API_KEY in the environment (or .env). When the cache file
already exists no request is made and the report is rebuilt from it.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Callable

from src.common.config import get_discogs_api_key
from src.common.logging import setup_logging
from src.common.models import ReportRow, SavedRecord

from .cache.result_cache import CacheError, ResultCache
from .collection.loader import load_descriptions
from .common.config import Config
from .common.http_client import HTTPClient
from .pipeline.appraiser import CdAppraiser
from .pipeline.batch import BatchRunner
from .price_extractor.extractor import PriceExtractor
from .release_resolver.resolver import ReleaseResolver
from .report.builder import build_report
from .report.writer import write_report

logger = logging.getLogger(__name__)


def collect_appraisals(
    config: Config,
    api_key: str,
    client: HTTPClient | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[SavedRecord]:
    """Load the collection and appraise every CD against Discogs."""
    descriptions = load_descriptions(config.input_abs_path)

    owns_client = client is None
    client = client or HTTPClient(config)
    try:
        appraiser = CdAppraiser(
            ReleaseResolver(api_key, client, config),
            PriceExtractor(client),
        )
        runner = BatchRunner(appraiser, config.request_delay_seconds, sleep=sleep)
        return runner.run(descriptions)
    finally:
        if owns_client:
            client.close()


def run(
    config: Config,
    api_key: str,
    client: HTTPClient | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[ReportRow]:
    """Run the full pipeline and write the report.

    Returns:
        The report rows, in the order written.
    """
    cache = ResultCache(config.cache_abs_path)
    if not cache.exists():
        logger.info("Loading data from the Discogs API")
        records = collect_appraisals(config, api_key, client=client, sleep=sleep)
        cache.save(records)
    else:
        logger.info("Loading cached data from %s", cache.path)

    records = cache.load()
    logger.info("Writing prices to %s", config.output_abs_path)
    rows = build_report(records)
    write_report(rows, config.output_abs_path)
    return rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Discogs CD Price Appraiser")
    parser.add_argument(
        "--input",
        type=str,
        help="Collection CSV with Title,Artist,Year columns (default: CDs.csv)",
    )
    parser.add_argument(
        "--cache",
        type=str,
        help="Appraisal cache JSON; reused when present (default: data.json)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Report CSV path (default: Prices.csv)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log HTTP requests",
    )

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        api_key = get_discogs_api_key()

        config = Config()
        if args.input:
            config.input_path = args.input
        if args.cache:
            config.cache_path = args.cache
        if args.output:
            config.output_path = args.output

        run(config, api_key)
    except (ValueError, CacheError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
