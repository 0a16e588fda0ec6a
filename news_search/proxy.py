"""News proxy.

This module forwards client requests to NewsAPI.org while keeping the
credential server-side. It is independent of the hosting runtime; see
handler.py for the Lambda adapter.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Literal

import requests

from .config import API_KEY_HEADER, ProxyConfig
from .models import VALID_ENDPOINTS, ProxyQuery

logger = logging.getLogger(__name__)

ProxyErrorType = Literal[
    "method_not_allowed",
    "unknown_endpoint",
    "proxy_error",
    "configuration_error",
]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@dataclass
class ProxyResponse:
    """Response returned by the proxy.

    Attributes:
        status_code: HTTP status code
        body: Response body (upstream body verbatim when forwarded)
        headers: Response headers, CORS headers included
    """

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)


def error_response(
    status_code: int, error_type: ProxyErrorType, message: str
) -> ProxyResponse:
    """Build a JSON error response with CORS headers."""
    return ProxyResponse(
        status_code=status_code,
        body=json.dumps({"error": error_type, "message": message}),
        headers={**CORS_HEADERS, "Content-Type": "application/json"},
    )


def check_request(
    method: str, query_params: dict[str, str] | None
) -> ProxyResponse | None:
    """Answer requests that are never forwarded.

    Needs no configuration, so preflight and invalid requests are answered
    even when the credential is missing.

    Args:
        method: HTTP method of the incoming request
        query_params: Incoming query string parameters

    Returns:
        ProxyResponse for OPTIONS, non-GET methods and unknown endpoints;
        None when the request should be forwarded
    """
    method = (method or "").upper()

    if method == "OPTIONS":
        return ProxyResponse(status_code=200, body="", headers=dict(CORS_HEADERS))

    if method != "GET":
        return error_response(405, "method_not_allowed", "Method not allowed")

    query = ProxyQuery.from_query_params(query_params)
    if query.endpoint not in VALID_ENDPOINTS:
        logger.info("Rejected unknown endpoint")
        return error_response(400, "unknown_endpoint", "Invalid endpoint")

    return None


class NewsProxy:
    """Validates and forwards requests to NewsAPI.org.

    Only GET is forwarded. The upstream status and body are returned
    unmodified.
    """

    def __init__(self, config: ProxyConfig) -> None:
        """Initialize NewsProxy.

        Args:
            config: Proxy configuration holding the credential
        """
        self._config = config

    def handle(self, method: str, query_params: dict[str, str] | None) -> ProxyResponse:
        """Handle one incoming request.

        Args:
            method: HTTP method of the incoming request
            query_params: Incoming query string parameters

        Returns:
            ProxyResponse to send back to the caller
        """
        rejection = check_request(method, query_params)
        if rejection is not None:
            return rejection

        return self._forward(ProxyQuery.from_query_params(query_params))

    def _forward(self, query: ProxyQuery) -> ProxyResponse:
        """Forward a validated query to NewsAPI.org.

        Args:
            query: Query with an allow-listed endpoint

        Returns:
            Upstream status and body, or a proxy_error response
        """
        url = f"{self._config.upstream_base_url}/{query.endpoint}"

        try:
            response = requests.get(
                url,
                params=query.params,
                headers={API_KEY_HEADER: self._config.api_key},
            )
            body = response.text
        except Exception as e:
            # Exception text may echo request details; log the type only
            logger.error("Forwarding to %s failed: %s", query.endpoint, type(e).__name__)
            return error_response(500, "proxy_error", "Failed to fetch news")

        logger.info("Forwarded %s -> %s", query.endpoint, response.status_code)
        return ProxyResponse(
            status_code=response.status_code,
            body=body,
            headers={**CORS_HEADERS, "Content-Type": "application/json"},
        )
