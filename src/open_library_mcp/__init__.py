"""
Open Library MCP Server Package.

An MCP (Model Context Protocol) server that exposes the Open Library book
metadata API as tools.

Key Components:
- config: Configuration management with pydantic-settings
- client: The shared httpx client for Open Library
- validation: Tool argument validation and Invalid params faults
- models: Pydantic models for normalized book and author records
- tools: The six MCP tools and their input schemas
- dispatcher: tools/list and tools/call routing
- server: FastMCP wiring and process entry point
"""

__version__ = "0.1.0"

from .dispatcher import OpenLibraryDispatcher

__all__ = [
    "OpenLibraryDispatcher",
    "__version__",
]
