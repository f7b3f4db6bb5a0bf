"""
Tool dispatch for the Open Library MCP Server.

The dispatcher is the single entry point the MCP layer talks to:

- ``list_tools()`` answers ``tools/list`` with the fixed tool catalog
- ``call_tool(name, arguments)`` answers ``tools/call`` by routing to a handler

It owns the one long-lived resource in the process, the Open Library HTTP
client. Handlers share nothing else, so concurrent calls need no coordination.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData

from .client import create_client
from .config import ServerConfig, get_config
from .tools import all_tools

logger = logging.getLogger(__name__)


class OpenLibraryDispatcher:
    """Routes MCP tool calls to the Open Library tool handlers."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        config: ServerConfig | None = None,
        tools: list[dict[str, Any]] | None = None,
    ) -> None:
        self._config = config or get_config()
        self._client = client or create_client(self._config)
        self._tools = {tool["name"]: tool for tool in (tools or all_tools)}
        self._catalog = [
            {
                "name": tool["name"],
                "description": tool["description"],
                "inputSchema": tool["inputSchema"],
            }
            for tool in self._tools.values()
        ]

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def config(self) -> ServerConfig:
        return self._config

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the tool catalog (name, description, inputSchema) for tools/list."""
        # Callers get their own copy so the catalog stays the same on every call
        return copy.deepcopy(self._catalog)

    async def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Invoke a tool by name.

        Returns:
            The handler's payload, error payloads included

        Raises:
            McpError: ``METHOD_NOT_FOUND`` for an unknown tool, or
                ``INVALID_PARAMS`` when the arguments fail validation
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        logger.debug("Calling tool %s with %s", name, arguments)
        kwargs = {"config": self._config} if tool.get("uses_config") else {}
        if tool["remote"]:
            return await tool["handler"](arguments, self._client, **kwargs)
        return await tool["handler"](arguments, **kwargs)

    async def aclose(self) -> None:
        """Close the Open Library client."""
        await self._client.aclose()

    async def __aenter__(self) -> "OpenLibraryDispatcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
