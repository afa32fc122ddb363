"""Unit tests for the analyze endpoint client."""

from unittest.mock import patch

import pytest
import requests

from asset_sentiment.chains.analyze_client import (
    DEFAULT_HEADERS,
    FETCH_FAILED_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    AnalysisError,
    analyze_asset,
)
from asset_sentiment.state import GENERIC_ERROR_MESSAGE
from conftest import make_response


def test_success_returns_articles_in_order(settings, sample_analyze_response):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(200, sample_analyze_response)
        articles = analyze_asset("Tesla", settings)

    assert [a.title for a in articles] == [a["title"] for a in sample_analyze_response["articles"]]
    assert articles[0].sentiment.label == "Positive"
    assert articles[0].sentiment.score == pytest.approx(0.87)


def test_request_shape(settings):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(200, {"articles": []})
        analyze_asset("Bitcoin", settings)

    post.assert_called_once_with(
        "http://127.0.0.1:8000/analyze",
        json={"asset": "Bitcoin"},
        headers=DEFAULT_HEADERS,
        timeout=None,
    )
    assert DEFAULT_HEADERS["Content-Type"] == "application/json"


def test_empty_asset_is_sent_as_is(settings):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(200, {"articles": []})
        assert analyze_asset("", settings) == []

    assert post.call_args.kwargs["json"] == {"asset": ""}


def test_any_2xx_is_success(settings):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(201, {"articles": []})
        assert analyze_asset("Tesla", settings) == []


def test_backend_detail_surfaced_verbatim(settings):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(404, {"detail": "asset not found"})
        with pytest.raises(AnalysisError) as exc_info:
            analyze_asset("Nope", settings)

    assert exc_info.value.message == "asset not found"
    assert str(exc_info.value) == "asset not found"


@pytest.mark.parametrize(
    "body",
    [
        "<html>Internal Server Error</html>",
        "",
        {"error": "something"},
        {"detail": ""},
        {"detail": [{"loc": ["body", "asset"], "msg": "field required"}]},
        ["not", "an", "object"],
    ],
)
def test_non_2xx_without_usable_detail_uses_fallback(settings, body):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(500, body)
        with pytest.raises(AnalysisError) as exc_info:
            analyze_asset("Tesla", settings)

    assert exc_info.value.message == FETCH_FAILED_MESSAGE


def test_transport_failure(settings):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.side_effect = requests.exceptions.ConnectionError("Connection refused")
        with pytest.raises(AnalysisError) as exc_info:
            analyze_asset("Tesla", settings)

    assert exc_info.value.message == "Connection refused"


def test_transport_failure_without_message(settings):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.side_effect = requests.exceptions.Timeout()
        with pytest.raises(AnalysisError) as exc_info:
            analyze_asset("Tesla", settings)

    assert exc_info.value.message == GENERIC_ERROR_MESSAGE


@pytest.mark.parametrize("body", ["{not json", {"results": []}, {"articles": [{"title": "no sentiment"}]}])
def test_malformed_success_body(settings, body):
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(200, body)
        with pytest.raises(AnalysisError) as exc_info:
            analyze_asset("Tesla", settings)

    assert exc_info.value.message.startswith(INVALID_RESPONSE_MESSAGE)


def test_timeout_from_settings(settings):
    settings.request_timeout = 12.5
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(200, {"articles": []})
        analyze_asset("Tesla", settings)

    assert post.call_args.kwargs["timeout"] == 12.5


def test_null_article_fields_are_accepted(settings, sample_analyze_response):
    sample_analyze_response["articles"][1]["description"] = None
    sample_analyze_response["articles"][2]["link"] = None
    with patch("asset_sentiment.chains.analyze_client.requests.post") as post:
        post.return_value = make_response(200, sample_analyze_response)
        articles = analyze_asset("Tesla", settings)

    assert len(articles) == 3
    assert articles[1].description == ""
    assert articles[2].link == ""
    assert articles[0].description == "Quarterly deliveries came in above consensus."
