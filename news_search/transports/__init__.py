"""Transport strategies for News Search.

This module provides the two interchangeable ways of reaching NewsAPI.org:
- DirectTransport: Calls NewsAPI.org with the credential header
- ProxiedTransport: Calls the proxy function, which attaches the credential
"""

from ..config import ClientConfig, ConfigurationError
from .base import BaseTransport
from .direct import DirectTransport
from .proxied import ProxiedTransport


def create_transport(config: ClientConfig) -> BaseTransport:
    """Create the transport selected by configuration.

    Args:
        config: Client configuration loaded at startup

    Returns:
        DirectTransport or ProxiedTransport

    Raises:
        ConfigurationError: If the selected transport is missing its settings
    """
    if config.transport == "direct":
        if not config.api_key:
            raise ConfigurationError("Direct transport requires an API key")
        return DirectTransport(api_key=config.api_key, base_url=config.base_url)

    if config.transport == "proxy":
        if not config.proxy_url:
            raise ConfigurationError("Proxy transport requires a proxy URL")
        return ProxiedTransport(proxy_url=config.proxy_url)

    raise ConfigurationError(f"Unsupported transport: {config.transport!r}")


__all__ = [
    "BaseTransport",
    "DirectTransport",
    "ProxiedTransport",
    "create_transport",
]
