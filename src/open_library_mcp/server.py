"""Open Library MCP Server - FastMCP Implementation

Exposes the Open Library API to MCP clients as six tools:
- get_book_by_title, get_authors_by_name: search endpoints
- get_author_info, get_book_by_id: single-record lookups
- get_author_photo, get_book_cover: Covers API URL builders

Clients connect via stdio transport. Every tools/list and tools/call request
is answered by the OpenLibraryDispatcher; this module only wires it into
FastMCP and handles process startup.
"""

import logging
import signal
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent
from pydantic import Field

from .config import ServerConfig, get_config
from .dispatcher import OpenLibraryDispatcher
from .observability import initialize_observability

# Initialize logging - stderr for logs, stdout for MCP protocol
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger(__name__)


class DispatchedTool(Tool):
    """FastMCP tool whose calls are forwarded to the dispatcher.

    The input schema is the catalog's own, so FastMCP does no argument
    parsing of its own. It describes the tool for tools/list; protocol calls are
    answered by ``route_tool_calls``. Error payloads are raised as ToolError,
    which FastMCP reports as an ``isError`` result.
    """

    dispatcher: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        result = await self.dispatcher.call_tool(self.name, arguments)
        texts = [item["text"] for item in result["content"]]
        if result.get("isError"):
            raise ToolError("\n".join(texts))
        return ToolResult(content=[TextContent(type="text", text=text) for text in texts])


def route_tool_calls(mcp: FastMCP, dispatcher: OpenLibraryDispatcher) -> None:
    """Answer tools/call straight from the dispatcher.

    The low-level MCP server turns a raised McpError into a JSON-RPC error
    response, so unknown tools and invalid arguments reach the client as
    protocol faults rather than ``isError`` results.
    """

    async def handle_call_tool(request: CallToolRequest) -> ServerResult:
        result = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return ServerResult(CallToolResult.model_validate(result))

    handlers = mcp._mcp_server.request_handlers  # type: ignore[reportPrivateUsage]
    handlers[CallToolRequest] = handle_call_tool


def create_server(
    config: ServerConfig | None = None, dispatcher: OpenLibraryDispatcher | None = None
) -> FastMCP:
    """Build the FastMCP server with every Open Library tool registered."""
    config = config or get_config()
    dispatcher = dispatcher or OpenLibraryDispatcher(config=config)

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            logger.info("Closing Open Library client")
            await dispatcher.aclose()

    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Open Library MCP Server - look up books and authors on Open Library. "
            "Search books by title and authors by name, fetch author details and "
            "books by ISBN, LCCN, OCLC or OLID, and build cover and author photo URLs."
        ),
        lifespan=lifespan,
    )

    for descriptor in dispatcher.list_tools():
        logger.debug("Registering tool: %s", descriptor["name"])
        mcp.add_tool(
            DispatchedTool(
                name=descriptor["name"],
                description=descriptor["description"],
                parameters=descriptor["inputSchema"],
                dispatcher=dispatcher,
            )
        )

    route_tool_calls(mcp, dispatcher)

    logger.info("Registered %d tools", len(dispatcher.tool_names))
    return mcp


def run_stdio_server(config: ServerConfig) -> None:
    """Run the MCP server using stdio transport.

    Stdin receives JSON-RPC requests, stdout sends responses.
    """
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled - verbose protocol logging active")
    else:
        logging.getLogger().setLevel(config.log_level)
        logging.getLogger("fastmcp").setLevel(logging.WARNING)

    initialize_observability(config)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    mcp = create_server(config)
    try:
        logger.info("MCP Server ready and waiting for connections...")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def main() -> None:
    """Main entry point for the MCP server.

    Started via ``open-library-mcp`` or ``python -m open_library_mcp.server``.
    """
    try:
        config = get_config()

        logger.info("=" * 60)
        logger.info("Open Library MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Upstream: %s", config.api_base_url)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        if config.transport == "stdio":
            run_stdio_server(config)
        else:
            logger.error("Unsupported transport: %s", config.transport)
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
