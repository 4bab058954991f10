"""
Shared utilities for the FixPhrase Lambda functions.
"""
import os
import json
import base64
import logging
from typing import Dict, Any, Iterable, Optional
from datetime import datetime, timezone

ALLOWED_METHODS = 'GET, POST'


def setup_logger(logger_name: str) -> logging.Logger:
    """
    Set up a logger with consistent formatting.

    Args:
        logger_name: Name of the logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').strip().upper() or 'INFO')

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_env_var(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Blank values count as unset.

    Args:
        key: Environment variable key
        default: Optional default value

    Returns:
        Environment variable value

    Raises:
        ValueError: If variable is not set and no default provided
    """
    value = os.environ.get(key, '').strip()
    if value:
        return value
    if default is None:
        raise ValueError(f"Environment variable {key} is required but not set")
    return default


def create_response(
    status_code: int,
    body: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Create a standardized API Gateway response.

    Args:
        status_code: HTTP status code
        body: Response body dictionary
        headers: Optional custom headers

    Returns:
        API Gateway formatted response
    """
    default_headers = {
        'Content-Type': 'application/json; charset=utf-8',
        'Access-Control-Allow-Origin': '*',
    }

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': body if isinstance(body, str) else json.dumps(body, indent=2)
    }


def method_not_allowed() -> Dict[str, Any]:
    """405 response advertising the supported methods."""
    return create_response(
        405,
        {'error': 'method not allowed'},
        headers={'Allow': ALLOWED_METHODS}
    )


def get_http_method(event: Dict[str, Any]) -> str:
    """
    Get the request method from a REST (v1) or HTTP API (v2) proxy event.

    Args:
        event: API Gateway proxy event

    Returns:
        Upper-case method, or an empty string if the event has none
    """
    method = event.get('httpMethod')
    if not method:
        method = event.get('requestContext', {}).get('http', {}).get('method', '')
    return (method or '').upper()


def get_query_params(event: Dict[str, Any]) -> Dict[str, str]:
    """Query string parameters (API Gateway sends None when there are none)."""
    return event.get('queryStringParameters') or {}


def _reject_constant(name: str) -> Any:
    """NaN and Infinity are not valid JSON."""
    raise ValueError(f"invalid JSON literal: {name}")


def parse_json_body(event: Dict[str, Any], allowed_fields: Iterable[str]) -> Dict[str, Any]:
    """
    Parse a JSON object request body, rejecting unknown fields.

    Args:
        event: API Gateway proxy event
        allowed_fields: Field names the body may contain

    Returns:
        Parsed body dictionary

    Raises:
        ValueError: If the body is not a JSON object or has unknown fields
    """
    raw = event.get('body')
    if raw is None or raw == '':
        raise ValueError('empty request body')

    if isinstance(raw, str):
        if event.get('isBase64Encoded'):
            raw = base64.b64decode(raw).decode('utf-8')
        body = json.loads(raw, parse_constant=_reject_constant)
    else:
        body = raw

    if not isinstance(body, dict):
        raise ValueError('request body must be a JSON object')

    allowed = set(allowed_fields)
    for name in body:
        if name not in allowed:
            raise ValueError(f'unknown field "{name}"')
    return body


def get_utc_timestamp() -> str:
    """
    Get current UTC time in RFC 3339 format.

    Returns:
        Timestamp string (YYYY-MM-DDTHH:MM:SSZ)
    """
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
