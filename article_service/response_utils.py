"""
Response and logging helpers shared by the HTTP handlers.
"""
import json
from typing import Any, Dict

from fastapi import Response

JSON_MEDIA_TYPE = "application/json"


def render_pretty_json(data: Dict[str, Any]) -> str:
    """
    Render data as JSON with a one-space indent and a trailing newline.

    Args:
        data: Data to serialize; key order is preserved

    Returns:
        JSON text
    """
    return json.dumps(data, indent=1, ensure_ascii=False) + "\n"


def pretty_json_response(data: Dict[str, Any]) -> Response:
    """Build an application/json response from data."""
    return Response(content=render_pretty_json(data), media_type=JSON_MEDIA_TYPE)


def sanitize_log_input(value: str) -> str:
    """
    Sanitize user input for logging to prevent log injection attacks.
    Removes newlines and other control characters that could be used for log forging.

    Args:
        value: The user input to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not isinstance(value, str):
        value = str(value)
    sanitized = value.replace('\n', '_').replace('\r', '_').replace('\t', '_')
    # Truncate to reasonable length to prevent log flooding
    return sanitized[:200]
