"""Shared Pydantic data models for the CD price appraiser.

These models define the data contracts between the appraisal pipeline,
the result cache and the report builder. All modules import from here.

Expected failures (no search hits, transport errors, a malformed price
block) are values, not exceptions: each tagged union below carries a
``kind`` literal so that a cached snapshot round-trips through JSON
with every branch intact.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# === Input ===

class CdDescription(_Frozen):
    """One row of the collection file."""
    title: str
    artist: str
    year: int


# === Catalog ===

class Community(_Frozen):
    """Discogs community counters for a release."""
    want: int = Field(ge=0)
    have: int = Field(ge=0)


class ReleaseInfo(_Frozen):
    """Canonical catalog release resolved from a description."""
    id: int
    title: str
    artist: str  # first credited artist only
    year: int
    cover_image: str | None = None
    uri: str
    community: Community


class PriceStatistics(_Frozen):
    """Sale price statistics scraped from a release page.

    Values are in the marketplace's native currency. Their ordering is not
    guaranteed by the source page.
    """
    lowest: float = Field(ge=0)
    median: float = Field(ge=0)
    highest: float = Field(ge=0)

    @property
    def is_ordered(self) -> bool:
        return self.lowest <= self.median <= self.highest


class AppraisedCd(ReleaseInfo):
    """A release together with its price statistics."""
    prices: PriceStatistics

    @classmethod
    def from_release(cls, release: ReleaseInfo, prices: PriceStatistics) -> AppraisedCd:
        return cls(**release.model_dump(), prices=prices)


# === Search errors ===

class RequestError(_Frozen):
    """Transport or protocol failure talking to the catalog."""
    kind: Literal["request_error"] = "request_error"
    message: str

    def describe(self) -> str:
        return f"request failed: {self.message}"


class NoResults(_Frozen):
    """The catalog returned no hits, even without the region filter."""
    kind: Literal["no_results"] = "no_results"

    def describe(self) -> str:
        return "no search results"


SearchError = Annotated[Union[RequestError, NoResults], Field(discriminator="kind")]


# === Appraisal errors ===

class SearchFailed(_Frozen):
    kind: Literal["search_failed"] = "search_failed"
    error: SearchError

    def describe(self) -> str:
        return f"search failed ({self.error.describe()})"


class PriceExtractionFailed(_Frozen):
    kind: Literal["price_extraction_failed"] = "price_extraction_failed"
    reason: str

    def describe(self) -> str:
        return f"price extraction failed ({self.reason})"


AppraiseError = Annotated[
    Union[SearchFailed, PriceExtractionFailed], Field(discriminator="kind")
]


# === Outcomes ===

class Appraised(_Frozen):
    kind: Literal["appraised"] = "appraised"
    cd: AppraisedCd


class Failed(_Frozen):
    kind: Literal["failed"] = "failed"
    error: AppraiseError


AppraiseOutcome = Annotated[Union[Appraised, Failed], Field(discriminator="kind")]


class SavedRecord(_Frozen):
    """(description, outcome) pair persisted to the result cache."""
    description: CdDescription
    outcome: AppraiseOutcome


# === Report ===

class ReportRow(_Frozen):
    """One row of the price report."""
    median_price: float | None = None
    title: str
    artist: str
    year: int
    url: str | None = None
