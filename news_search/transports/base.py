"""Base transport interface for reaching NewsAPI.org."""

from abc import ABC, abstractmethod

import requests

from ..models import UpstreamQuery


class BaseTransport(ABC):
    """Abstract base class for transport strategies.

    Implementations issue exactly one HTTP request per call and never
    retry. Classifying the response is left to the caller.
    """

    @abstractmethod
    def send(self, query: UpstreamQuery) -> requests.Response:
        """Send a query and return the raw HTTP response.

        Args:
            query: Endpoint and query parameters to send

        Returns:
            The HTTP response, whatever its status

        Raises:
            requests.RequestException: If the request cannot be completed
        """
        pass
