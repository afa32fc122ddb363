"""Shared fixtures for the analyzer tests."""

import json

import pytest
import requests

from asset_sentiment.config import Settings
from asset_sentiment.models.sentiment_schema import Article


@pytest.fixture
def settings():
    """Settings pointing at the default local backend."""
    return Settings(
        api_url="http://127.0.0.1:8000",
        api_path="/analyze",
        request_timeout=None,
        log_level=20,
    )


@pytest.fixture
def sample_analyze_response():
    """Sample /analyze success body."""
    return {
        "articles": [
            {
                "title": "Tesla deliveries beat estimates",
                "description": "Quarterly deliveries came in above consensus.",
                "date": "2024-01-15T10:00:00Z",
                "sentiment": {"label": "Positive", "score": 0.87},
                "link": "https://example.com/tesla-deliveries",
            },
            {
                "title": "Recall announced for Model Y",
                "description": "A software recall affects thousands of vehicles.",
                "date": "2024-01-14T08:30:00Z",
                "sentiment": {"label": "negative", "score": 0.42},
                "link": "https://example.com/tesla-recall",
            },
            {
                "title": "Analysts raise price target",
                "description": "Several brokers lifted their targets.",
                "date": "not a date",
                "sentiment": {"label": "Positive", "score": 0.91},
                "link": "https://example.com/tesla-targets",
            },
        ]
    }


@pytest.fixture
def sample_articles(sample_analyze_response):
    return [Article.model_validate(a) for a in sample_analyze_response["articles"]]


def make_article(label, score=0.5, **fields):
    data = {
        "title": fields.get("title", f"{label} story"),
        "description": fields.get("description", ""),
        "date": fields.get("date", "2024-01-15"),
        "sentiment": {"label": label, "score": score},
        "link": fields.get("link", "https://example.com/story"),
    }
    return Article.model_validate(data)


def make_response(status_code, body):
    """Build a real requests.Response; `body` may be a dict or raw text."""
    resp = requests.Response()
    resp.status_code = status_code
    raw = body if isinstance(body, str) else json.dumps(body)
    resp._content = raw.encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    return resp
