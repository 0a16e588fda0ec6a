"""Proxied transport that calls the same-origin proxy function."""

import requests

from ..models import UpstreamQuery
from .base import BaseTransport


class ProxiedTransport(BaseTransport):
    """Calls the proxy function, which injects the credential server-side.

    The endpoint travels as the ``endpoint`` query parameter alongside the
    upstream parameters. No credential is sent.
    """

    def __init__(self, proxy_url: str) -> None:
        """Initialize ProxiedTransport.

        Args:
            proxy_url: Proxy endpoint URL (e.g. https://example.com/api/news)
        """
        self._proxy_url = proxy_url

    def send(self, query: UpstreamQuery) -> requests.Response:
        params = {"endpoint": query.endpoint, **query.params}
        return requests.get(self._proxy_url, params=params)
