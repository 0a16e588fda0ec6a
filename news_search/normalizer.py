"""Response classification and article normalization.

Applied identically to responses received directly from NewsAPI.org and
to responses forwarded by the proxy function.
"""

import json
from datetime import datetime
from typing import Any

from .models import Article, NewsApiError

INVALID_CREDENTIAL_MESSAGE = (
    "Invalid API key. Please check your NewsAPI.org credentials"
)
RATE_LIMITED_MESSAGE = (
    "Rate limit exceeded. Please try again later (100 requests/day limit)"
)
GENERIC_API_ERROR_MESSAGE = "An error occurred while fetching news"
MALFORMED_PAYLOAD_MESSAGE = "Malformed response from news provider"


def normalize_response(
    status_code: int, status_text: str | None, body: str
) -> list[Article]:
    """Turn a raw HTTP response into articles.

    Args:
        status_code: HTTP status code
        status_text: HTTP reason phrase
        body: Raw response body

    Returns:
        Articles in upstream order; empty when there are no results

    Raises:
        NewsApiError: invalid_credential, rate_limited or upstream_error
    """
    _raise_for_status(status_code, status_text)

    try:
        data = json.loads(body)
    except ValueError as e:
        raise NewsApiError(
            kind="upstream_error", message=MALFORMED_PAYLOAD_MESSAGE
        ) from e

    if not isinstance(data, dict):
        raise NewsApiError(kind="upstream_error", message=MALFORMED_PAYLOAD_MESSAGE)

    if data.get("status") == "error":
        raise NewsApiError(
            kind="upstream_error",
            message=data.get("message") or GENERIC_API_ERROR_MESSAGE,
        )

    articles = data.get("articles")
    if articles is None:
        return []

    if not isinstance(articles, list):
        raise NewsApiError(kind="upstream_error", message=MALFORMED_PAYLOAD_MESSAGE)

    return [parse_article(raw) for raw in articles]


def _raise_for_status(status_code: int, status_text: str | None) -> None:
    if status_code == 401:
        raise NewsApiError(kind="invalid_credential", message=INVALID_CREDENTIAL_MESSAGE)
    if status_code == 429:
        raise NewsApiError(kind="rate_limited", message=RATE_LIMITED_MESSAGE)
    if not 200 <= status_code < 300:
        raise NewsApiError(
            kind="upstream_error",
            message=f"API error: {status_code} {status_text or ''}".rstrip(),
            status=status_code,
            status_text=status_text,
        )


def parse_article(raw: Any) -> Article:
    """Map one upstream article object onto Article.

    Missing optional fields are tolerated.

    Raises:
        NewsApiError: upstream_error when the entry is not an object
    """
    if not isinstance(raw, dict):
        raise NewsApiError(kind="upstream_error", message=MALFORMED_PAYLOAD_MESSAGE)

    source = raw.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None

    return Article(
        title=raw.get("title") or "",
        description=raw.get("description") or None,
        url=raw.get("url") or "",
        image_url=raw.get("urlToImage") or None,
        source_name=source_name or "",
        published_at=_parse_timestamp(raw.get("publishedAt")),
    )


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
