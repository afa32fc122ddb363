# asset_sentiment/state.py
"""
View state of the analyzer page and the reducer that drives it.

One submission cycle is Idle -> Loading -> (Success | Failure) -> Idle. Every
transition goes through `reduce`, so the page rendering is a pure projection of
the current `ViewState`.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence, Tuple, Union

from asset_sentiment.models.sentiment_schema import Article

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."

ANALYZE_LABEL = "Analyze"
ANALYZING_LABEL = "Analyzing..."


@dataclass(frozen=True)
class ViewState:
    asset: str = ""
    loading: bool = False
    error: str = ""
    articles: Tuple[Article, ...] = ()


@dataclass(frozen=True)
class AssetChanged:
    asset: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    articles: Tuple[Article, ...]

    @classmethod
    def of(cls, articles: Sequence[Article]) -> "SubmitSucceeded":
        return cls(articles=tuple(articles))


@dataclass(frozen=True)
class SubmitFailed:
    message: str


Event = Union[AssetChanged, SubmitStarted, SubmitSucceeded, SubmitFailed]


def reduce(state: ViewState, event: Event) -> ViewState:
    if isinstance(event, AssetChanged):
        return replace(state, asset=event.asset)
    if isinstance(event, SubmitStarted):
        return replace(state, loading=True, error="", articles=())
    if isinstance(event, SubmitSucceeded):
        return replace(state, loading=False, error="", articles=tuple(event.articles))
    if isinstance(event, SubmitFailed):
        return replace(state, loading=False, error=event.message or GENERIC_ERROR_MESSAGE, articles=())
    raise TypeError(f"Unknown event: {event!r}")


class Region(str, Enum):
    """The one region shown below the input row."""

    NONE = "none"
    ERROR = "error"
    PLACEHOLDER = "placeholder"
    RESULTS = "results"


def active_region(state: ViewState) -> Region:
    if state.error:
        return Region.ERROR
    if state.articles:
        return Region.RESULTS
    if not state.loading:
        return Region.PLACEHOLDER
    return Region.NONE


def submit_disabled(state: ViewState) -> bool:
    return state.loading


def submit_label(state: ViewState) -> str:
    return ANALYZING_LABEL if state.loading else ANALYZE_LABEL
