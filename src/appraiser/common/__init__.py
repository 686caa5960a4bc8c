"""Common utilities shared across appraiser modules."""

from .config import Config
from .http_client import HTTPClient

__all__ = ["Config", "HTTPClient"]
