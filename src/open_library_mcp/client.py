"""
HTTP client for the Open Library API.

A single ``httpx.AsyncClient`` bound to the Open Library base address is
created per server process and shared, read-only, by every tool call. Timeouts
and connection pooling are left to httpx; nothing is retried or cached.
"""

import logging
from typing import Any

import httpx

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)


def create_client(
    config: ServerConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the client used by the network-backed tools.

    Args:
        config: Server configuration; the global one when omitted
        transport: Optional transport override (``httpx.MockTransport`` in tests)
    """
    config = config or get_config()
    logger.debug("Creating Open Library client for %s", config.api_base_url)
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        timeout=config.http_timeout,
        headers={
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        },
        follow_redirects=True,
        transport=transport,
    )


async def fetch_json(
    client: httpx.AsyncClient, path: str, params: dict[str, Any] | None = None
) -> Any:
    """
    GET ``path`` and decode the JSON body.

    Returns:
        The decoded body, or ``None`` when the response body is empty

    Raises:
        httpx.HTTPStatusError: Open Library answered with a non-2xx status
        httpx.RequestError: The request could not be completed
    """
    response = await client.get(path, params=params)
    response.raise_for_status()
    if not response.content.strip():
        return None
    return response.json()
