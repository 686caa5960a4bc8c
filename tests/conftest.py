"""Shared test fixtures for the CD price appraiser."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.appraiser.common.config import Config
from src.appraiser.common.http_client import HTTPClient
from src.common.models import CdDescription


SEARCH_URL = "https://api.discogs.com/database/search"
RELEASE_URL = "https://api.discogs.com/releases/"

STATS_HTML = """<html><body>
<div id="release-stats">
  <h3>Statistics</h3>
  <ul>
    <li><h4>Have:</h4> <a href="#">512</a></li>
    <li><h4>Want:</h4> <a href="#">48</a></li>
    <li><h4>Last Sold:</h4> <a href="#">Jan 3, 2026</a></li>
    <li><h4>Lowest:</h4> <span> $2.00 </span></li>
    <li><h4>Median:</h4> <span>$5.49</span></li>
    <li><h4>Highest:</h4> <span>$1,250.00</span></li>
  </ul>
</div>
</body></html>
"""


def stats_html(lowest: str = "$2.00", median: str = "$5.49", highest: str = "$12.00") -> str:
    """Build a release page statistics block with the given price texts."""
    return f"""<html><body><div id="release-stats"><ul>
<li><h4>Lowest:</h4> <span>{lowest}</span></li>
<li><h4>Median:</h4> <span>{median}</span></li>
<li><h4>Highest:</h4> <span>{highest}</span></li>
</ul></div></body></html>"""


def release_json(release_id: int = 367084, title: str = "Nevermind", **overrides) -> dict:
    """Return a Discogs release document shaped like the API's."""
    data = {
        "id": release_id,
        "title": title,
        "artists": [{"name": "Nirvana", "id": 125246}, {"name": "Butch Vig", "id": 1}],
        "year": 1991,
        "images": [
            {"type": "secondary", "uri": "https://i.discogs.com/back.jpg"},
            {"type": "primary", "uri": "https://i.discogs.com/front.jpg"},
        ],
        "uri": f"https://www.discogs.com/release/{release_id}-Nirvana-{title}",
        "community": {"want": 1234, "have": 56789},
    }
    data.update(overrides)
    return data


class FakeDiscogs:
    """Routes HTTPClient calls to canned Discogs responses.

    Args:
        search: Maps a country filter (or None) to a list of hits, or to an
            exception to raise.
        releases: Maps release ids to release documents or exceptions.
        pages: Maps release page URLs to HTML or exceptions.
    """

    def __init__(self, search=None, releases=None, pages=None):
        self.search = search or {}
        self.releases = releases or {}
        self.pages = pages or {}
        self.calls: list[tuple[str, dict | None]] = []

    def get_json(self, url, params=None):
        self.calls.append((url, params))
        if url.startswith(SEARCH_URL):
            result = self.search.get((params or {}).get("country"), [])
            if isinstance(result, Exception):
                raise result
            return {"pagination": {"items": len(result)}, "results": result}
        release_id = int(url.rsplit("/", 1)[-1])
        result = self.releases[release_id]
        if isinstance(result, Exception):
            raise result
        return result

    def get_text(self, url):
        self.calls.append((url, None))
        result = self.pages[url]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def config(tmp_path) -> Config:
    """Provide a Config with files under a temp dir and no inter-item delay."""
    return Config(
        input_path=str(tmp_path / "CDs.csv"),
        cache_path=str(tmp_path / "data.json"),
        output_path=str(tmp_path / "Prices.csv"),
        request_delay_seconds=0,
        api_base_url="https://api.discogs.com",
        preferred_country="US",
    )


@pytest.fixture
def fake_discogs() -> FakeDiscogs:
    return FakeDiscogs()


@pytest.fixture
def mock_client(config, fake_discogs) -> MagicMock:
    """HTTPClient double whose requests are served by fake_discogs."""
    client = MagicMock(spec=HTTPClient)
    client.config = config
    client.get_json.side_effect = fake_discogs.get_json
    client.get_text.side_effect = fake_discogs.get_text
    return client


@pytest.fixture
def nevermind() -> CdDescription:
    return CdDescription(title="Nevermind", artist="Nirvana", year=1991)
