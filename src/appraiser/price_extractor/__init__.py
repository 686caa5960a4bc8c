"""Price Extractor Module - sale price statistics from Discogs release pages."""

from .extractor import (
    PriceExtractor,
    extract_price_statistics,
    parse_price,
)

__all__ = [
    "PriceExtractor",
    "extract_price_statistics",
    "parse_price",
]
