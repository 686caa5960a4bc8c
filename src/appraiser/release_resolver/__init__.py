"""Release Resolver Module - Discogs database search and release lookup."""

from .resolver import ReleaseResolver, parse_release, take_first

__all__ = ["ReleaseResolver", "parse_release", "take_first"]
