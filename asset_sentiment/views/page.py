# asset_sentiment/views/page.py
from __future__ import annotations

import streamlit as st

from asset_sentiment.config import get_settings
from asset_sentiment.chains.analyze_client import analyze_asset
from asset_sentiment.pipeline import settle_submission, start_submission
from asset_sentiment.state import (
    AssetChanged,
    Region,
    SubmitFailed,
    ViewState,
    active_region,
    reduce,
    submit_disabled,
    submit_label,
)
from asset_sentiment.views.chart import create_sentiment_pie, derive_chart_data
from asset_sentiment.views.table import render_articles_table

TITLE = "Financial Sentiment Analyzer"
INPUT_PLACEHOLDER = "Enter asset name (e.g., Tesla, Bitcoin)"
PLACEHOLDER_TITLE = "Ready to uncover insights?"
PLACEHOLDER_DESCRIPTION = (
    "Enter the name of a financial asset like **Tesla** or **Bitcoin** above, "
    "and we'll dig through the latest news to analyze the sentiment for you."
)

STATE_KEY = "analyzer_state"
INPUT_KEY = "analyzer_asset"

SENTIMENT_CSS = """
<style>
.articles-table td.positive { color: #25D366; font-weight: 600; }
.articles-table td.neutral { color: #ff9800; font-weight: 600; }
.articles-table td.negative { color: #f44336; font-weight: 600; }
</style>
"""


def _get_state() -> ViewState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = ViewState()
    return st.session_state[STATE_KEY]


def _set_state(state: ViewState) -> None:
    st.session_state[STATE_KEY] = state


def _on_asset_change() -> None:
    _set_state(reduce(_get_state(), AssetChanged(st.session_state[INPUT_KEY])))


def _on_submit() -> None:
    state = reduce(_get_state(), AssetChanged(st.session_state.get(INPUT_KEY, "")))
    _set_state(start_submission(state))


def _render_placeholder() -> None:
    st.markdown("### 🔍")
    st.markdown(f"**{PLACEHOLDER_TITLE}**")
    st.markdown(PLACEHOLDER_DESCRIPTION)


def _render_results(state: ViewState) -> None:
    st.subheader("Sentiment Distribution")
    fig = create_sentiment_pie(derive_chart_data(state.articles))
    st.plotly_chart(fig)

    st.markdown(SENTIMENT_CSS, unsafe_allow_html=True)
    st.markdown(render_articles_table(state.articles), unsafe_allow_html=True)


def render_analyzer() -> None:
    """The analyzer page, mounted at the root route."""
    settings = get_settings()
    state = _get_state()

    st.title(TITLE)

    col1, col2 = st.columns([4, 1], vertical_alignment="bottom")
    with col1:
        st.text_input(
            "Asset",
            value=state.asset,
            key=INPUT_KEY,
            placeholder=INPUT_PLACEHOLDER,
            label_visibility="collapsed",
            on_change=_on_asset_change,
        )
    with col2:
        st.button(
            submit_label(state),
            disabled=submit_disabled(state),
            key="analyze_button",
            on_click=_on_submit,
        )

    region = active_region(state)
    if region is Region.ERROR:
        st.error(state.error)
    elif region is Region.PLACEHOLDER:
        _render_placeholder()
    elif region is Region.RESULTS:
        _render_results(state)

    # The Loading state has been rendered above with the button disabled; the
    # request runs in this same script run and the settled state is shown on rerun.
    if state.loading:
        try:
            with st.spinner("Analyzing…"):
                settled = settle_submission(state, lambda asset: analyze_asset(asset, settings))
        except Exception:
            # leave Loading so the next rerun does not reissue the request
            _set_state(reduce(state, SubmitFailed("")))
            raise
        _set_state(settled)
        st.rerun()
