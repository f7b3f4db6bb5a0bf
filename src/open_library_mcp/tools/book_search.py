"""
Book title search tool for the Open Library MCP Server.

get_book_by_title queries ``/search.json`` and returns every matching work
as a normalized BookInfo entry.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, field_validator

from ..client import fetch_json
from ..config import ServerConfig, get_config
from ..models.book import BookInfo
from ..observability import trace_tool
from ..validation import require_non_empty, validate_arguments
from .responses import describe_failure, error_result, json_result, text_result

logger = logging.getLogger(__name__)

TOOL_NAME = "get_book_by_title"


class GetBookByTitleInput(BaseModel):
    """Input schema for the get_book_by_title tool."""

    title: str = Field(
        ...,
        description="The title of the book to search for.",
        examples=["The Hobbit", "Pride and Prejudice"],
    )

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        return require_non_empty(v, "Title cannot be empty")


@trace_tool(TOOL_NAME)
async def get_book_by_title_handler(
    arguments: dict[str, Any] | None,
    client: httpx.AsyncClient,
    config: ServerConfig | None = None,
) -> dict[str, Any]:
    """
    Handler for the get_book_by_title tool.

    Args:
        arguments: Raw arguments from the MCP tools/call request
        client: Shared Open Library client
        config: Server configuration for the covers host; the global one when
            omitted

    Returns:
        A JSON array of matching books, a "no books found" sentence, or an
        error payload when Open Library could not be reached

    Raises:
        McpError: The arguments failed validation (no request is made)
    """
    params = validate_arguments(GetBookByTitleInput, TOOL_NAME, arguments)

    try:
        data = await fetch_json(client, "/search.json", params={"title": params.title})
        docs = (data or {}).get("docs") or []
        if not docs:
            return text_result(f'No books found matching title: "{params.title}"')

        covers_base_url = (config or get_config()).covers_base_url
        books = [BookInfo.from_search_doc(doc, covers_base_url).to_payload() for doc in docs]
    except Exception as e:
        logger.exception("Error in %s", TOOL_NAME)
        return error_result(describe_failure(e))

    logger.info("Found %d book(s) matching title %r", len(books), params.title)
    return json_result(books)


get_book_by_title = {
    "name": TOOL_NAME,
    "description": "Search for a book by its title on Open Library.",
    "inputSchema": GetBookByTitleInput.model_json_schema(),
    "handler": get_book_by_title_handler,
    "remote": True,
    "uses_config": True,
}
