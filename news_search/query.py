"""Query construction for NewsAPI.org requests."""

from .models import NewsApiError, SearchRequest, UpstreamQuery

PAGE_SIZE = 10
TOP_HEADLINES_COUNTRY = "us"
TOPIC_LANGUAGE = "en"
TOPIC_SORT_BY = "publishedAt"

EMPTY_TOPIC_MESSAGE = "Search topic cannot be empty"
TOPIC_NOT_ALLOWED_MESSAGE = "Top headlines do not take a search topic"


def validate_request(request: SearchRequest) -> None:
    """Reject requests that must never reach the network.

    A topic is required for topic searches and not allowed otherwise.

    Raises:
        NewsApiError: validation_error for a blank topic, a topic on a
            top headlines request, or an unknown mode
    """
    if request.mode == "topic":
        if not request.topic or not request.topic.strip():
            raise NewsApiError(kind="validation_error", message=EMPTY_TOPIC_MESSAGE)
        return

    if request.mode == "top_headlines":
        if request.topic is not None:
            raise NewsApiError(
                kind="validation_error",
                message=TOPIC_NOT_ALLOWED_MESSAGE,
            )
        return

    raise NewsApiError(
        kind="validation_error", message=f"Unknown search mode: {request.mode!r}"
    )


def build_query(request: SearchRequest) -> UpstreamQuery:
    """Build the upstream request descriptor for a search.

    Parameter values are left unencoded; the HTTP layer encodes them,
    so ``q`` decodes back to exactly the trimmed topic.

    Args:
        request: The search to perform

    Returns:
        UpstreamQuery for the top-headlines or everything endpoint

    Raises:
        NewsApiError: validation_error for a blank topic
    """
    validate_request(request)

    if request.mode == "top_headlines":
        return UpstreamQuery(
            endpoint="top-headlines",
            params={
                "country": TOP_HEADLINES_COUNTRY,
                "pageSize": str(PAGE_SIZE),
            },
        )

    return UpstreamQuery(
        endpoint="everything",
        params={
            "q": request.topic.strip(),
            "pageSize": str(PAGE_SIZE),
            "sortBy": TOPIC_SORT_BY,
            "language": TOPIC_LANGUAGE,
        },
    )
