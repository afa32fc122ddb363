# asset_sentiment/chains/analyze_client.py
from __future__ import annotations

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from asset_sentiment.config import Settings, get_settings
from asset_sentiment.models.sentiment_schema import AnalysisRequest, AnalysisResponse, Article
from asset_sentiment.state import GENERIC_ERROR_MESSAGE

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch data"
INVALID_RESPONSE_MESSAGE = "Invalid response from server"

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class AnalysisError(Exception):
    """Any failure of an analyze call, carrying the text shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _error_detail(resp: requests.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return FETCH_FAILED_MESSAGE
    detail = data.get("detail") if isinstance(data, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return FETCH_FAILED_MESSAGE


def analyze_asset(asset: str, settings: Optional[Settings] = None) -> List[Article]:
    """
    POST {"asset": asset} to the analyze endpoint and return the articles.
    Raises AnalysisError for transport failures, non-2xx replies and malformed bodies.
    """
    s = settings or get_settings()
    body = AnalysisRequest(asset=asset).model_dump()
    logger.info("Requesting sentiment analysis for %r from %s", asset, s.analyze_url)

    try:
        resp = requests.post(s.analyze_url, json=body, headers=DEFAULT_HEADERS, timeout=s.request_timeout)
    except requests.exceptions.RequestException as exc:
        logger.warning("Analyze request failed before a response: %s", exc)
        raise AnalysisError(str(exc) or GENERIC_ERROR_MESSAGE) from exc

    if not resp.ok:
        message = _error_detail(resp)
        logger.warning("Backend answered %s: %s", resp.status_code, message)
        raise AnalysisError(message)

    try:
        parsed = AnalysisResponse.model_validate(resp.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("Could not parse analyze response: %s", exc)
        raise AnalysisError(f"{INVALID_RESPONSE_MESSAGE}: {exc}") from exc

    logger.info("Received %d articles for %r", len(parsed.articles), asset)
    return parsed.articles
