"""News Search - NewsAPI.org client and credential-hiding proxy."""

from .config import ClientConfig, ConfigurationError, ProxyConfig
from .models import Article, ErrorResult, SearchRequest, SearchResult
from .news_client import NewsClient, create_client
from .proxy import NewsProxy

__all__ = [
    "Article",
    "ClientConfig",
    "ConfigurationError",
    "ErrorResult",
    "NewsClient",
    "NewsProxy",
    "ProxyConfig",
    "SearchRequest",
    "SearchResult",
    "create_client",
]
