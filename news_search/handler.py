"""Lambda handler for the News Search proxy.

This is the entry point for the Lambda function that forwards browser
requests to NewsAPI.org behind API Gateway (``GET /api/news``).
"""

import logging
import os
from typing import Any

from .config import ConfigurationError, get_proxy_config
from .proxy import NewsProxy, ProxyResponse, check_request, error_response

logger = logging.getLogger()
logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

# Global proxy instance for Lambda warm starts
_proxy: NewsProxy | None = None


def _get_proxy() -> NewsProxy:
    """Get or create the NewsProxy instance.

    Raises:
        ConfigurationError: If the credential is not configured
    """
    global _proxy
    if _proxy is None:
        _proxy = NewsProxy(config=get_proxy_config())
    return _proxy


def _get_method(event: dict[str, Any]) -> str:
    """Read the HTTP method from a REST (v1) or HTTP API (v2) event."""
    if "httpMethod" in event:
        return event["httpMethod"]
    return event.get("requestContext", {}).get("http", {}).get("method", "")


def _to_lambda_response(response: ProxyResponse) -> dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body,
    }


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda entry point for the news proxy.

    Args:
        event: API Gateway proxy event containing:
            - httpMethod or requestContext.http.method
            - queryStringParameters: endpoint plus passthrough parameters

    Returns:
        API Gateway proxy response (statusCode, headers, body)
    """
    method = _get_method(event)
    query_params = event.get("queryStringParameters") or {}

    rejection = check_request(method, query_params)
    if rejection is not None:
        return _to_lambda_response(rejection)

    try:
        proxy = _get_proxy()
    except ConfigurationError as e:
        logger.error("Proxy is not configured: %s", e)
        return _to_lambda_response(
            error_response(500, "configuration_error", "News API key is not configured")
        )

    return _to_lambda_response(proxy.handle(method, query_params))
