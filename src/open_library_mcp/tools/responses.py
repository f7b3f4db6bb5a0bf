"""
Tool response payloads.

MCP RESPONSE FORMAT:
Tools answer with a ``content`` array of typed items. Handled failures are
ordinary results carrying ``isError: True``; they are never raised, so the
caller always receives a payload it can show to the model.
"""

import json
from typing import Any

import httpx


def text_result(text: str) -> dict[str, Any]:
    """Successful (or empty-match) result with a single text item."""
    return {"content": [{"type": "text", "text": text}]}


def json_result(data: Any) -> dict[str, Any]:
    """Successful result carrying pretty-printed JSON."""
    return text_result(json.dumps(data, indent=2, ensure_ascii=False))


def error_result(text: str) -> dict[str, Any]:
    """Operational failure reported as a normal result."""
    return {"isError": True, "content": [{"type": "text", "text": text}]}


def is_not_found(error: Exception) -> bool:
    """True when Open Library answered 404."""
    return (
        isinstance(error, httpx.HTTPStatusError)
        and error.response.status_code == httpx.codes.NOT_FOUND
    )


def describe_failure(error: Exception) -> str:
    """
    Explain why an Open Library request failed.

    An error status from Open Library is reported with its status text (or
    the exception message when there is none). Anything else, network
    failures included, means the request could not be completed.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return f"Open Library API error: {error.response.reason_phrase or error}"
    return f"Error processing request: {error}"
