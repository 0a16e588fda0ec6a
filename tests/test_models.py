"""Tests for data models."""

from news_search.models import (
    VALID_ENDPOINTS,
    ErrorResult,
    NewsApiError,
    ProxyQuery,
    SearchRequest,
    SearchResult,
)


class TestSearchRequest:
    """Tests for SearchRequest constructors."""

    def test_top_headlines_has_no_topic(self):
        """top_headlines() should create a request without a topic."""
        request = SearchRequest.top_headlines()
        assert request.mode == "top_headlines"
        assert request.topic is None

    def test_for_topic_trims_topic(self):
        """for_topic() should store the trimmed topic."""
        request = SearchRequest.for_topic("  climate change  ")
        assert request.mode == "topic"
        assert request.topic == "climate change"

    def test_for_topic_accepts_none(self):
        """for_topic(None) should not raise; validation happens later."""
        request = SearchRequest.for_topic(None)
        assert request.topic is None


class TestProxyQuery:
    """Tests for ProxyQuery parsing."""

    def test_splits_endpoint_from_params(self):
        """endpoint should be separated from passthrough parameters."""
        query = ProxyQuery.from_query_params(
            {"endpoint": "everything", "q": "foo", "pageSize": "10"}
        )
        assert query.endpoint == "everything"
        assert query.params == {"q": "foo", "pageSize": "10"}

    def test_handles_missing_query_string(self):
        """None query string should give no endpoint and no params."""
        query = ProxyQuery.from_query_params(None)
        assert query.endpoint is None
        assert query.params == {}

    def test_does_not_mutate_input(self):
        """Parsing should leave the incoming mapping untouched."""
        incoming = {"endpoint": "top-headlines", "country": "us"}
        ProxyQuery.from_query_params(incoming)
        assert incoming == {"endpoint": "top-headlines", "country": "us"}


class TestErrors:
    """Tests for NewsApiError and SearchResult."""

    def test_news_api_error_carries_result(self):
        """NewsApiError should expose its ErrorResult and kind."""
        error = NewsApiError(
            kind="upstream_error", message="API error: 500", status=500, status_text="Server Error"
        )
        assert error.kind == "upstream_error"
        assert error.result == ErrorResult(
            kind="upstream_error", message="API error: 500", status=500, status_text="Server Error"
        )
        assert str(error) == "API error: 500"

    def test_search_result_ok(self):
        """SearchResult without error should be ok, even when empty."""
        assert SearchResult().ok is True
        assert SearchResult(articles=[]).ok is True

    def test_search_result_failed(self):
        """SearchResult with an error should not be ok."""
        result = SearchResult(error=ErrorResult(kind="rate_limited", message="slow down"))
        assert result.ok is False
        assert result.articles == []

    def test_valid_endpoints(self):
        """Allow-list should contain exactly the two NewsAPI endpoints."""
        assert set(VALID_ENDPOINTS) == {"top-headlines", "everything"}
