"""HTTP client shared by every Discogs request of a run."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .config import Config

logger = logging.getLogger(__name__)


class HTTPClient:
    """HTTP client wrapping a single requests session.

    Every request carries the same identifying User-Agent, which Discogs
    requires. There is no retry layer: a failed request is reported to
    the caller, which decides what the failure means.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self._session = requests.Session()
        self._session.headers["User-Agent"] = self.config.user_agent

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a GET request.

        Args:
            url: Target URL.
            params: Query parameters.
            headers: Extra headers (merged with session defaults).

        Returns:
            requests.Response object.

        Raises:
            requests.RequestException: On transport failure or non-2xx status.
        """
        logger.debug("GET %s", url)
        resp = self._session.get(
            url,
            params=params,
            headers=headers,
            timeout=self.config.request_timeout,
        )
        resp.raise_for_status()
        return resp

    def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and decode its JSON body.

        Raises:
            requests.RequestException: On transport failure, non-2xx status
                or a body that is not valid JSON.
        """
        return self.get(url, params=params).json()

    def get_text(self, url: str) -> str:
        """GET a URL and return its body as text."""
        return self.get(url).text

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
