"""Tests for the JSON result cache."""

from __future__ import annotations

import json
import os

import pytest

from src.appraiser.cache.result_cache import CacheError, ResultCache
from src.common.models import (
    Appraised,
    AppraisedCd,
    CdDescription,
    Community,
    Failed,
    NoResults,
    PriceExtractionFailed,
    PriceStatistics,
    RequestError,
    SavedRecord,
    SearchFailed,
)


def _appraised(title: str, median: float, cover_image: str | None) -> SavedRecord:
    cd = AppraisedCd(
        id=len(title),
        title=title,
        artist="Artist",
        year=1990,
        cover_image=cover_image,
        uri=f"https://www.discogs.com/release/{title}",
        community=Community(want=3, have=40),
        prices=PriceStatistics(lowest=median / 2, median=median, highest=median * 2),
    )
    return SavedRecord(
        description=CdDescription(title=title, artist="Artist", year=1990),
        outcome=Appraised(cd=cd),
    )


def _failed(title: str, error) -> SavedRecord:
    return SavedRecord(
        description=CdDescription(title=title, artist="Artist", year=1990),
        outcome=Failed(error=error),
    )


@pytest.fixture
def all_branches() -> list[SavedRecord]:
    return [
        _appraised("With Cover", 12.5, "https://i.discogs.com/front.jpg"),
        _appraised("No Cover", 3.0, None),
        _failed("Timeout", SearchFailed(error=RequestError(message="read timed out"))),
        _failed("Unknown", SearchFailed(error=NoResults())),
        _failed("Bad Page", PriceExtractionFailed(reason="Error parsing https://x")),
        _appraised("No Cover", 3.0, None),
    ]


class TestResultCache:
    def test_round_trip(self, tmp_path, all_branches):
        cache = ResultCache(tmp_path / "data.json")

        cache.save(all_branches)

        assert cache.load() == all_branches

    def test_exists(self, tmp_path):
        cache = ResultCache(tmp_path / "data.json")
        assert not cache.exists()
        cache.save([])
        assert cache.exists()
        assert cache.load() == []

    def test_file_is_indented_json(self, tmp_path, all_branches):
        cache = ResultCache(tmp_path / "data.json")
        cache.save(all_branches)

        text = cache.path.read_text(encoding="utf-8")
        data = json.loads(text)

        assert "\n  " in text
        assert len(data) == len(all_branches)
        assert data[0]["outcome"]["kind"] == "appraised"
        assert data[1]["outcome"]["cd"]["cover_image"] is None
        assert data[3]["outcome"]["error"]["error"]["kind"] == "no_results"

    def test_save_overwrites_and_leaves_no_temp_files(self, tmp_path, all_branches):
        cache = ResultCache(tmp_path / "data.json")
        cache.save(all_branches)
        cache.save(all_branches[:1])

        assert cache.load() == all_branches[:1]
        assert os.listdir(tmp_path) == ["data.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_cache_file_is_world_readable(self, tmp_path):
        cache = ResultCache(tmp_path / "data.json")
        cache.save([])
        assert cache.path.stat().st_mode & 0o777 == 0o644

    def test_creates_parent_directory(self, tmp_path):
        cache = ResultCache(tmp_path / "nested" / "dir" / "data.json")
        cache.save([])
        assert cache.exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CacheError, match="Cannot read"):
            ResultCache(tmp_path / "data.json").load()

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(CacheError, match="Corrupt"):
            ResultCache(path).load()

    def test_unknown_outcome_kind(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(
            json.dumps([{
                "description": {"title": "X", "artist": "Y", "year": 1},
                "outcome": {"kind": "maybe"},
            }]),
            encoding="utf-8",
        )
        with pytest.raises(CacheError):
            ResultCache(path).load()

    def test_unwritable_destination(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        with pytest.raises(CacheError, match="Cannot write"):
            ResultCache(blocker / "data.json").save([])
