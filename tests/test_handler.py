"""Tests for the Lambda handler."""

import json
from unittest.mock import MagicMock, patch

import pytest

from news_search import handler
from news_search.config import ConfigurationError, ProxyConfig
from news_search.proxy import NewsProxy


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset the cached proxy before and after each test."""
    handler._proxy = None
    yield
    handler._proxy = None


def rest_event(method: str, query: dict | None) -> dict:
    """Helper to build an API Gateway REST (v1) event."""
    return {"httpMethod": method, "path": "/api/news", "queryStringParameters": query}


def http_api_event(method: str, query: dict | None) -> dict:
    """Helper to build an API Gateway HTTP API (v2) event."""
    event = {
        "version": "2.0",
        "rawPath": "/api/news",
        "requestContext": {"http": {"method": method, "path": "/api/news"}},
    }
    if query is not None:
        event["queryStringParameters"] = query
    return event


def upstream_response(status_code: int, text: str) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestLambdaHandler:
    """Test lambda_handler()."""

    @patch("news_search.handler.get_proxy_config")
    def test_forwards_rest_event(self, mock_config: MagicMock) -> None:
        """REST events should be forwarded and returned verbatim."""
        mock_config.return_value = ProxyConfig(api_key="secret")
        body = '{"status":"ok","articles":[]}'

        with patch("requests.get", return_value=upstream_response(200, body)) as mock_get:
            result = handler.lambda_handler(
                rest_event("GET", {"endpoint": "everything", "q": "foo"}), None
            )

        assert result["statusCode"] == 200
        assert result["body"] == body
        assert result["headers"]["Access-Control-Allow-Origin"] == "*"
        assert mock_get.call_args[0][0] == "https://newsapi.org/v2/everything"
        assert mock_get.call_args[1]["params"] == {"q": "foo"}

    @patch("news_search.handler.get_proxy_config")
    def test_reads_http_api_event(self, mock_config: MagicMock) -> None:
        """HTTP API (v2) events should be understood."""
        mock_config.return_value = ProxyConfig(api_key="secret")

        result = handler.lambda_handler(http_api_event("DELETE", None), None)

        assert result["statusCode"] == 405

    @patch("news_search.handler.get_proxy_config")
    def test_missing_query_string_is_unknown_endpoint(self, mock_config: MagicMock) -> None:
        """A null queryStringParameters should be treated as empty."""
        mock_config.return_value = ProxyConfig(api_key="secret")

        with patch("requests.get") as mock_get:
            result = handler.lambda_handler(rest_event("GET", None), None)

        assert result["statusCode"] == 400
        assert json.loads(result["body"])["error"] == "unknown_endpoint"
        mock_get.assert_not_called()

    @patch("news_search.handler.get_proxy_config")
    def test_missing_credential_is_configuration_error(self, mock_config: MagicMock) -> None:
        """Missing credential should return a configuration_error payload."""
        mock_config.side_effect = ConfigurationError("API key is missing")

        result = handler.lambda_handler(rest_event("GET", {"endpoint": "everything"}), None)

        assert result["statusCode"] == 500
        assert json.loads(result["body"])["error"] == "configuration_error"

    @patch("news_search.handler.get_proxy_config")
    def test_proxy_is_reused_across_invocations(self, mock_config: MagicMock) -> None:
        """The proxy should be created once per warm container."""
        mock_config.return_value = ProxyConfig(api_key="secret")

        event = rest_event("GET", {"endpoint": "top-headlines", "country": "us"})
        with patch("requests.get", return_value=upstream_response(200, "{}")):
            handler.lambda_handler(event, None)
            handler.lambda_handler(event, None)

        mock_config.assert_called_once()
        assert isinstance(handler._proxy, NewsProxy)


class TestRequestsAnsweredWithoutCredential:
    """Preflight and invalid requests should not depend on configuration."""

    @patch("news_search.handler.get_proxy_config")
    def test_options_preflight(self, mock_config: MagicMock) -> None:
        """OPTIONS should return 200 with no body even without a key."""
        mock_config.side_effect = ConfigurationError("API key is missing")

        result = handler.lambda_handler(rest_event("OPTIONS", None), None)

        assert result["statusCode"] == 200
        assert result["body"] == ""
        assert result["headers"]["Access-Control-Allow-Methods"] == "GET, OPTIONS"
        mock_config.assert_not_called()

    @patch("news_search.handler.get_proxy_config")
    def test_unknown_endpoint(self, mock_config: MagicMock) -> None:
        """An unknown endpoint should return 400 even without a key."""
        mock_config.side_effect = ConfigurationError("API key is missing")

        with patch("requests.get") as mock_get:
            result = handler.lambda_handler(
                rest_event("GET", {"endpoint": "unknown"}), None
            )

        assert result["statusCode"] == 400
        assert json.loads(result["body"])["error"] == "unknown_endpoint"
        mock_get.assert_not_called()
        mock_config.assert_not_called()

    @patch("news_search.handler.get_proxy_config")
    def test_method_not_allowed(self, mock_config: MagicMock) -> None:
        """Non-GET methods should return 405 even without a key."""
        mock_config.side_effect = ConfigurationError("API key is missing")

        result = handler.lambda_handler(http_api_event("POST", None), None)

        assert result["statusCode"] == 405
        mock_config.assert_not_called()
