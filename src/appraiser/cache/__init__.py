"""Cache Module - JSON snapshot of appraisal results."""

from .result_cache import CacheError, ResultCache

__all__ = ["CacheError", "ResultCache"]
