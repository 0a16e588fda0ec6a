"""Data models for News Search.

This module defines the core data structures used throughout the application:
- SearchRequest: Top headlines or topic search requested by the user
- UpstreamQuery: Outbound request descriptor (endpoint + query parameters)
- Article: Normalized news article
- ProxyQuery: Parsed incoming proxy request
- ErrorResult/NewsApiError: Classified failure information
- SearchResult: Explicit success/failure value returned to callers
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

SearchMode = Literal["top_headlines", "topic"]
Endpoint = Literal["top-headlines", "everything"]
ErrorKind = Literal[
    "validation_error",
    "invalid_credential",
    "rate_limited",
    "upstream_error",
    "network_error",
    "unknown_endpoint",
]

VALID_ENDPOINTS: tuple[str, ...] = ("top-headlines", "everything")


@dataclass(frozen=True)
class SearchRequest:
    """A single search requested by the user.

    Attributes:
        mode: Top headlines or free-text topic search
        topic: Trimmed search topic (only meaningful when mode is "topic")
    """

    mode: SearchMode
    topic: str | None = None

    @classmethod
    def top_headlines(cls) -> "SearchRequest":
        return cls(mode="top_headlines")

    @classmethod
    def for_topic(cls, topic: str | None) -> "SearchRequest":
        return cls(mode="topic", topic=topic.strip() if topic else topic)


@dataclass(frozen=True)
class UpstreamQuery:
    """Outbound request descriptor.

    Attributes:
        endpoint: Logical upstream endpoint
        params: Query parameters, unencoded
    """

    endpoint: Endpoint
    params: dict[str, str]


@dataclass
class Article:
    """Represents a single normalized news article.

    Attributes:
        title: Headline
        description: Short teaser text, None when the upstream omits it
        url: Direct link to the article
        image_url: Lead image, None when the upstream omits it
        source_name: Publisher name
        published_at: Publication time, None when missing or unparseable
    """

    title: str
    description: str | None
    url: str
    image_url: str | None
    source_name: str
    published_at: datetime | None


@dataclass
class ProxyQuery:
    """Incoming proxy request split into endpoint and passthrough parameters."""

    endpoint: str | None
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_query_params(cls, query: dict[str, str] | None) -> "ProxyQuery":
        params = dict(query or {})
        endpoint = params.pop("endpoint", None)
        return cls(endpoint=endpoint, params=params)


@dataclass
class ErrorResult:
    """Classified failure.

    Attributes:
        kind: Category of the error
        message: Human-readable error description
        status: Upstream HTTP status (upstream_error from a non-2xx status only)
        status_text: Upstream HTTP reason phrase
    """

    kind: ErrorKind
    message: str
    status: int | None = None
    status_text: str | None = None


class NewsApiError(Exception):
    """Error raised while building a query or normalizing a response.

    Attributes:
        result: The classified error
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status: int | None = None,
        status_text: str | None = None,
    ) -> None:
        self.result = ErrorResult(
            kind=kind, message=message, status=status, status_text=status_text
        )
        super().__init__(message)

    @property
    def kind(self) -> ErrorKind:
        return self.result.kind


@dataclass
class SearchResult:
    """Outcome of a search: either articles or a classified error.

    Attributes:
        articles: Normalized articles in upstream order (empty on failure)
        error: The classified error, None on success
    """

    articles: list[Article] = field(default_factory=list)
    error: ErrorResult | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
