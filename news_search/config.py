"""Configuration for News Search.

This module provides configuration for the news client and the proxy
function, supporting both local development and AWS deployment.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

import boto3
from botocore.exceptions import ClientError

TransportMode = Literal["direct", "proxy"]

DEFAULT_BASE_URL = "https://newsapi.org/v2"
API_KEY_HEADER = "X-Api-Key"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class ClientConfig:
    """News client configuration.

    Attributes:
        transport: "direct" calls NewsAPI.org, "proxy" calls the proxy function
        api_key: NewsAPI.org key (direct transport only)
        proxy_url: Proxy endpoint URL (proxy transport only)
        base_url: NewsAPI.org v2 base URL
    """

    transport: TransportMode
    api_key: str | None
    proxy_url: str | None
    base_url: str = DEFAULT_BASE_URL


@dataclass(frozen=True)
class ProxyConfig:
    """Proxy function configuration.

    Attributes:
        api_key: NewsAPI.org key, held server-side only
        upstream_base_url: NewsAPI.org v2 base URL
    """

    api_key: str
    upstream_base_url: str = DEFAULT_BASE_URL

    def __repr__(self) -> str:
        return f"ProxyConfig(api_key='***', upstream_base_url={self.upstream_base_url!r})"


@lru_cache(maxsize=10)
def _get_secret(secret_name: str) -> str | None:
    """Get secret value from AWS Secrets Manager.

    Args:
        secret_name: Name of the secret in Secrets Manager

    Returns:
        Secret value or None if not found
    """
    region = os.getenv("AWS_REGION", "")
    if not region:
        return None

    client = boto3.client("secretsmanager", region_name=region)
    try:
        response = client.get_secret_value(SecretId=secret_name)
        return response.get("SecretString")
    except ClientError:
        return None


def get_api_key() -> str | None:
    """Look up the NewsAPI.org key.

    Supports two modes:
    1. Direct environment variables (local development):
       - NEWS_API_KEY
       - VITE_NEWS_API_KEY (legacy name)
    2. Secrets Manager (Lambda deployment):
       - NEWS_API_SECRET_NAME → reads from Secrets Manager

    Returns:
        The key, or None if it is not configured anywhere
    """
    api_key = os.getenv("NEWS_API_KEY") or os.getenv("VITE_NEWS_API_KEY")

    if not api_key:
        secret_name = os.getenv("NEWS_API_SECRET_NAME")
        if secret_name:
            api_key = _get_secret(secret_name)

    return api_key or None


def get_client_config() -> ClientConfig:
    """Get news client configuration from environment variables.

    Environment Variables:
        NEWS_TRANSPORT: "direct" (default) or "proxy"
        NEWS_PROXY_URL: Proxy endpoint URL (required for "proxy")
        NEWS_API_BASE_URL: Upstream base URL override
        NEWS_API_KEY / VITE_NEWS_API_KEY / NEWS_API_SECRET_NAME:
            credential (required for "direct")

    Returns:
        ClientConfig instance

    Raises:
        ConfigurationError: If a required value is missing
    """
    transport = os.getenv("NEWS_TRANSPORT", "direct").strip().lower()
    base_url = os.getenv("NEWS_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    if transport == "direct":
        api_key = get_api_key()
        if not api_key:
            raise ConfigurationError(
                "API key is missing. Please configure NEWS_API_KEY in your .env file"
            )
        return ClientConfig(
            transport="direct", api_key=api_key, proxy_url=None, base_url=base_url
        )

    if transport == "proxy":
        proxy_url = os.getenv("NEWS_PROXY_URL")
        if not proxy_url:
            raise ConfigurationError(
                "Proxy URL is missing. Please configure NEWS_PROXY_URL"
            )
        # The credential stays on the proxy side
        return ClientConfig(
            transport="proxy", api_key=None, proxy_url=proxy_url, base_url=base_url
        )

    raise ConfigurationError(
        f"Unsupported NEWS_TRANSPORT={transport!r}, expected 'direct' or 'proxy'"
    )


def get_proxy_config() -> ProxyConfig:
    """Get proxy function configuration.

    Returns:
        ProxyConfig instance

    Raises:
        ConfigurationError: If the credential is missing
    """
    api_key = get_api_key()
    if not api_key:
        raise ConfigurationError(
            "API key is missing. Please configure NEWS_API_KEY or NEWS_API_SECRET_NAME"
        )

    return ProxyConfig(
        api_key=api_key,
        upstream_base_url=os.getenv("NEWS_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
    )
