"""
Author name search tool for the Open Library MCP Server.

get_authors_by_name queries ``/search/authors.json`` and returns every match.
Fields an author document does not carry are left out of its entry instead of
being defaulted.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, field_validator

from ..client import fetch_json
from ..models.author import AuthorInfo
from ..observability import trace_tool
from ..validation import require_non_empty, validate_arguments
from .responses import describe_failure, error_result, json_result, text_result

logger = logging.getLogger(__name__)

TOOL_NAME = "get_authors_by_name"


class GetAuthorsByNameInput(BaseModel):
    """Input schema for the get_authors_by_name tool."""

    name: str = Field(
        ...,
        description="The name of the author to search for.",
        examples=["J. R. R. Tolkien", "Ursula K. Le Guin"],
    )

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return require_non_empty(v, "Author name cannot be empty")


@trace_tool(TOOL_NAME)
async def get_authors_by_name_handler(
    arguments: dict[str, Any] | None, client: httpx.AsyncClient
) -> dict[str, Any]:
    """Handler for the get_authors_by_name tool."""
    params = validate_arguments(GetAuthorsByNameInput, TOOL_NAME, arguments)

    try:
        data = await fetch_json(client, "/search/authors.json", params={"q": params.name})
        docs = (data or {}).get("docs") or []
        if not docs:
            return text_result(f'No authors found matching name: "{params.name}"')

        authors = [AuthorInfo.from_search_doc(doc).to_payload() for doc in docs]
    except Exception as e:
        logger.exception("Error in %s", TOOL_NAME)
        return error_result(describe_failure(e))

    logger.info("Found %d author(s) matching name %r", len(authors), params.name)
    return json_result(authors)


get_authors_by_name = {
    "name": TOOL_NAME,
    "description": "Search for author information on Open Library.",
    "inputSchema": GetAuthorsByNameInput.model_json_schema(),
    "handler": get_authors_by_name_handler,
    "remote": True,
}
