"""Collection Module - reads the CD collection file."""

from .loader import CollectionLoadError, load_descriptions

__all__ = ["CollectionLoadError", "load_descriptions"]
