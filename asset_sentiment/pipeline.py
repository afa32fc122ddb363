# asset_sentiment/pipeline.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from asset_sentiment.chains.analyze_client import AnalysisError, analyze_asset
from asset_sentiment.models.sentiment_schema import Article
from asset_sentiment.state import (
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    ViewState,
    reduce,
)

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], List[Article]]
StateListener = Callable[[ViewState], None]


def start_submission(state: ViewState) -> ViewState:
    """Enter Loading: clears the previous error and articles."""
    return reduce(state, SubmitStarted())


def settle_submission(state: ViewState, fetch: Fetcher = analyze_asset) -> ViewState:
    """
    Issue the analyze call for `state.asset` and reduce exactly one resolution
    event into `state`. Only AnalysisError is mapped to a failure; anything else
    is a bug and propagates.
    """
    try:
        articles = fetch(state.asset)
    except AnalysisError as exc:
        logger.info("Analysis of %r failed: %s", state.asset, exc.message)
        return reduce(state, SubmitFailed(exc.message))
    return reduce(state, SubmitSucceeded.of(articles))


def submit_analysis(
    state: ViewState,
    fetch: Fetcher = analyze_asset,
    on_state: Optional[StateListener] = None,
) -> ViewState:
    """
    Run one full submission cycle: Loading, then Success or Failure.
    `on_state` sees the Loading state before the request is issued.

    This is the entry point for callers without a rerun model (scripts,
    notebooks). The Streamlit page splits the same cycle across two script
    runs with start_submission and settle_submission, so the disabled button
    is drawn before the request blocks.
    """
    loading = start_submission(state)
    if on_state:
        on_state(loading)
    return settle_submission(loading, fetch)
