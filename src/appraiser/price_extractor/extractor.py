"""Discogs release page price scraper.

The API offers a price suggestion endpoint, but its numbers run far above
what discs actually sell for. Prices based on real sales are only shown on
the public release page, in the "Statistics" block:

    <div id="release-stats">
      <ul>
        <li><h4>Lowest:</h4> <span>$2.00</span></li>
        <li><h4>Median:</h4> <span>$5.49</span></li>
        <li><h4>Highest:</h4> <span>$12.00</span></li>
      </ul>
    </div>

Extraction is strict: the first missing or unparsable value fails the
whole page and no partial statistics are returned.
"""

from __future__ import annotations

import logging
import math

import requests
from bs4 import BeautifulSoup

from src.common.models import PriceExtractionFailed, PriceStatistics

from ..common.http_client import HTTPClient

logger = logging.getLogger(__name__)

STATS_SELECTOR = "#release-stats li"
PRICE_LABELS = ("Lowest", "Median", "Highest")


class PriceExtractionError(Exception):
    """A statistics entry is missing or does not hold a price."""


def parse_price(text: str) -> float | None:
    """Parse a displayed price such as ``" $1,250.00 "``.

    Returns:
        The amount, or None if the text is not a non-negative number.
    """
    cleaned = text.strip()
    if cleaned.startswith("$"):
        cleaned = cleaned[1:].strip()
    cleaned = cleaned.replace(",", "")
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _find_price(soup: BeautifulSoup, label: str, url: str) -> float:
    """Return the price in the first statistics entry mentioning ``label``."""
    entry = next(
        (li for li in soup.select(STATS_SELECTOR) if label in li.get_text()),
        None,
    )
    span = entry.find("span") if entry is not None else None
    if span is None:
        raise PriceExtractionError(f"Error finding {label} element at {url}")

    text = span.get_text()
    price = parse_price(text)
    if price is None:
        raise PriceExtractionError(
            f"Error converting {text.strip()} to number at {url}"
        )
    return price


def extract_price_statistics(html: str, url: str) -> PriceStatistics | PriceExtractionFailed:
    """Extract lowest/median/highest sale prices from release page HTML.

    Args:
        html: Page content.
        url: Page URL, quoted in diagnostics.

    Returns:
        PriceStatistics, or PriceExtractionFailed naming the first label
        that could not be read.
    """
    soup = BeautifulSoup(html, "lxml")
    try:
        lowest, median, highest = (_find_price(soup, label, url) for label in PRICE_LABELS)
    except PriceExtractionError as exc:
        logger.warning("%s", exc)
        return PriceExtractionFailed(reason=str(exc))

    stats = PriceStatistics(lowest=lowest, median=median, highest=highest)
    if not stats.is_ordered:
        logger.warning(
            "Inconsistent price statistics at %s: lowest=%.2f median=%.2f highest=%.2f",
            url, lowest, median, highest,
        )
    return stats


class PriceExtractor:
    """Fetch release pages and extract their sale price statistics."""

    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    def fetch_price_statistics(self, url: str) -> PriceStatistics | PriceExtractionFailed:
        """Download a release page and extract its price statistics."""
        try:
            html = self._client.get_text(url)
        except requests.RequestException as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            return PriceExtractionFailed(reason=f"Error parsing {url}")
        return extract_price_statistics(html, url)
