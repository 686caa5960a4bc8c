"""Discogs release resolver.

Turns a free-text CD description into one canonical Discogs release:

1. Search the database for CD releases matching title/artist/year,
   restricted to the preferred country.
2. If that returns nothing, repeat the search without the country filter.
3. Pick a hit (the first one by default) and fetch the full release.

A transport or protocol failure at any step ends the resolution with a
``RequestError``; only an empty, successful search triggers the fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import requests
from pydantic import ValidationError

from src.common.models import (
    CdDescription,
    Community,
    NoResults,
    ReleaseInfo,
    RequestError,
)

from ..common.config import Config
from ..common.http_client import HTTPClient

logger = logging.getLogger(__name__)

SearchHit = dict[str, Any]
HitSelector = Callable[[Sequence[SearchHit]], SearchHit]


def take_first(hits: Sequence[SearchHit]) -> SearchHit:
    """Default disambiguation: the catalog's own ranking wins."""
    return hits[0]


def parse_release(data: dict[str, Any]) -> ReleaseInfo:
    """Map a Discogs release JSON document onto ReleaseInfo.

    Only the first credited artist is kept. The cover image is the URI of
    the first image typed ``primary``, if any.

    Raises:
        AttributeError, KeyError, IndexError, TypeError, ValidationError:
            If the document lacks a required field.
    """
    cover_image = None
    for image in data.get("images") or []:
        if image.get("type") == "primary":
            cover_image = image.get("uri")
            break

    return ReleaseInfo(
        id=data["id"],
        title=data["title"],
        artist=data["artists"][0]["name"],
        year=data["year"],
        cover_image=cover_image,
        uri=data["uri"],
        community=Community(
            want=data["community"]["want"],
            have=data["community"]["have"],
        ),
    )


class ReleaseResolver:
    """Resolve CD descriptions to Discogs releases.

    Usage:
        with HTTPClient(config) as client:
            resolver = ReleaseResolver(api_key, client, config)
            release = resolver.resolve(cd)
    """

    def __init__(
        self,
        api_key: str,
        client: HTTPClient,
        config: Config | None = None,
        select: HitSelector = take_first,
    ) -> None:
        self.config = config or client.config
        self._api_key = api_key
        self._client = client
        self._select = select

    def resolve(self, cd: CdDescription) -> ReleaseInfo | RequestError | NoResults:
        """Resolve a description to a single release.

        Returns:
            The release, or the SearchError variant explaining why none
            was found.
        """
        countries: list[str | None] = [self.config.preferred_country, None]
        if not self.config.preferred_country:
            countries = [None]

        for country in countries:
            try:
                hits = self.search(cd, country=country)
            except requests.RequestException as exc:
                logger.warning("Search failed for %s: %s", cd.title, exc)
                return RequestError(message=str(exc))

            if not hits:
                if country:
                    logger.info(
                        "No %s results for %s by %s, retrying without country filter",
                        country, cd.title, cd.artist,
                    )
                continue

            if len(hits) > 1:
                logger.warning(
                    "%s by %s released in %d returned %d results",
                    cd.title, cd.artist, cd.year, len(hits),
                )
            hit = self._select(hits)
            release_id = hit.get("id") if isinstance(hit, dict) else None
            if not isinstance(release_id, int):
                return RequestError(message=f"Search hit without a release id: {hit!r}")
            return self.get_release(release_id)

        return NoResults()

    def search(self, cd: CdDescription, country: str | None = None) -> list[SearchHit]:
        """Run one database search for CD releases.

        Args:
            cd: Description to search for.
            country: Optional country filter (e.g. "US").

        Returns:
            Search hits in catalog order.

        Raises:
            requests.RequestException: On transport failure, non-2xx status
                or a response without a result list.
        """
        params: dict[str, Any] = {
            "release_title": cd.title,
            "artist": cd.artist,
            "year": cd.year,
            "type": "release",
            "format": "CD",
            "token": self._api_key,
        }
        if country:
            params["country"] = country

        data = self._client.get_json(self.config.search_url, params=params)
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise requests.RequestException(
                f"Unexpected search response from {self.config.search_url}"
            )
        return results

    def get_release(self, release_id: int) -> ReleaseInfo | RequestError:
        """Fetch the full release record by id."""
        url = self.config.release_url(release_id)
        try:
            data = self._client.get_json(url, params={"token": self._api_key})
        except requests.RequestException as exc:
            logger.warning("Release request failed for %s: %s", release_id, exc)
            return RequestError(message=str(exc))

        try:
            return parse_release(data)
        except (AttributeError, KeyError, IndexError, TypeError, ValidationError) as exc:
            logger.warning("Malformed release %s: %r", release_id, exc)
            return RequestError(message=f"Malformed release {release_id} from {url}: {exc!r}")
