"""News client.

This module provides the NewsClient class, which builds a query, sends it
through the configured transport and returns an explicit SearchResult.
"""

import logging

import requests

from .config import ClientConfig
from .models import ErrorResult, NewsApiError, SearchRequest, SearchResult
from .normalizer import normalize_response
from .query import build_query
from .transports import BaseTransport, create_transport

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection"


class NewsClient:
    """Searches NewsAPI.org through a transport strategy.

    Each call issues at most one request and is never retried.
    """

    def __init__(self, transport: BaseTransport) -> None:
        """Initialize NewsClient.

        Args:
            transport: DirectTransport or ProxiedTransport
        """
        self._transport = transport

    def search(self, request: SearchRequest) -> SearchResult:
        """Perform a search.

        Args:
            request: Top headlines or topic search

        Returns:
            SearchResult with articles, or with a classified error

        Raises:
            Exception: Anything unexpected (other than transport failures)
                propagates unchanged
        """
        logger.debug("search %s: validating", request.mode)
        try:
            query = build_query(request)

            logger.debug("search %s: in flight to %s", request.mode, query.endpoint)
            try:
                response = self._transport.send(query)
            except requests.RequestException as e:
                logger.warning("search %s: network failure (%s)", request.mode, type(e).__name__)
                return SearchResult(
                    error=ErrorResult(kind="network_error", message=NETWORK_ERROR_MESSAGE)
                )

            articles = normalize_response(
                response.status_code, response.reason, response.text
            )

        except NewsApiError as e:
            logger.debug("search %s: failed (%s)", request.mode, e.kind)
            return SearchResult(error=e.result)

        logger.debug("search %s: succeeded with %d articles", request.mode, len(articles))
        return SearchResult(articles=articles)

    def fetch_news(self, topic: str | None) -> SearchResult:
        """Search articles about a topic."""
        return self.search(SearchRequest.for_topic(topic))

    def fetch_top_headlines(self) -> SearchResult:
        """Fetch US top headlines."""
        return self.search(SearchRequest.top_headlines())


def create_client(config: ClientConfig) -> NewsClient:
    """Create a NewsClient using the transport selected by configuration."""
    return NewsClient(transport=create_transport(config))
