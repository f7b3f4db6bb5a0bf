"""
Author detail tool for the Open Library MCP Server.

get_author_info fetches ``/authors/{author_key}.json`` and returns the full
record with its biography flattened to plain text.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, field_validator

from ..client import fetch_json
from ..models.author import AuthorDetails
from ..observability import trace_tool
from ..validation import require_author_olid, validate_arguments
from .responses import describe_failure, error_result, is_not_found, json_result, text_result

logger = logging.getLogger(__name__)

TOOL_NAME = "get_author_info"


class GetAuthorInfoInput(BaseModel):
    """Input schema for the get_author_info tool."""

    author_key: str = Field(
        ...,
        description="The Open Library key for the author (e.g., OL23919A).",
        examples=["OL23919A"],
    )

    @field_validator("author_key")
    @classmethod
    def validate_author_key(cls, v: str) -> str:
        return require_author_olid(
            v,
            empty_message="Author key cannot be empty",
            format_message="Author key must be in the format OL<number>A",
        )


@trace_tool(TOOL_NAME)
async def get_author_info_handler(
    arguments: dict[str, Any] | None, client: httpx.AsyncClient
) -> dict[str, Any]:
    """
    Handler for the get_author_info tool.

    A 404 from Open Library is reported as "not found"; an empty response
    body is a plain (non-error) "no data" sentence.
    """
    params = validate_arguments(GetAuthorInfoInput, TOOL_NAME, arguments)
    author_key = params.author_key

    try:
        data = await fetch_json(client, f"/authors/{author_key}.json")
        if data is None:
            return text_result(f'No data found for author key: "{author_key}"')

        author = AuthorDetails.model_validate(data).to_payload()
    except Exception as e:
        if is_not_found(e):
            logger.warning("Author %s not found", author_key)
            return error_result(f'Author with key "{author_key}" not found.')
        logger.exception("Error in %s (%s)", TOOL_NAME, author_key)
        return error_result(describe_failure(e))

    return json_result(author)


get_author_info = {
    "name": TOOL_NAME,
    "description": (
        "Get detailed information for a specific author using their "
        "Open Library Author Key (e.g. OL23919A)."
    ),
    "inputSchema": GetAuthorInfoInput.model_json_schema(),
    "handler": get_author_info_handler,
    "remote": True,
}
