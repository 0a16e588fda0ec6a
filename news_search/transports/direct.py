"""Direct transport that calls NewsAPI.org with the credential header."""

import requests

from ..config import API_KEY_HEADER, DEFAULT_BASE_URL
from ..models import UpstreamQuery
from .base import BaseTransport


class DirectTransport(BaseTransport):
    """Calls NewsAPI.org straight from this process.

    Only for trusted contexts where the key can be held locally.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        """Initialize DirectTransport.

        Args:
            api_key: NewsAPI.org key sent as the X-Api-Key header
            base_url: NewsAPI.org v2 base URL
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    def send(self, query: UpstreamQuery) -> requests.Response:
        return requests.get(
            f"{self._base_url}/{query.endpoint}",
            params=query.params,
            headers={API_KEY_HEADER: self._api_key},
        )
