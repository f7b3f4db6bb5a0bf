"""
Book lookup by identifier for the Open Library MCP Server.

get_book_by_id resolves an ISBN, LCCN, OCLC number or Open Library edition id
through ``/api/volumes/brief/{idType}/{idValue}.json`` and returns the first
matching edition as BookDetails.
"""

import logging
from typing import Any, Literal

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic_core import PydanticCustomError

from ..client import fetch_json
from ..models.book import BookDetails
from ..observability import trace_tool
from ..validation import require_non_empty, validate_arguments
from .responses import describe_failure, error_result, is_not_found, json_result, text_result

logger = logging.getLogger(__name__)

TOOL_NAME = "get_book_by_id"

IdType = Literal["isbn", "lccn", "oclc", "olid"]


class GetBookByIdInput(BaseModel):
    """
    Input schema for the get_book_by_id tool.

    ``idType`` is matched case-insensitively and stored lower-case.
    """

    model_config = ConfigDict(populate_by_name=True)

    id_type: IdType = Field(
        ...,
        alias="idType",
        description="The type of identifier used (ISBN, LCCN, OCLC, OLID).",
    )

    id_value: str = Field(
        ...,
        alias="idValue",
        description="The value of the identifier.",
        examples=["9780547928227", "OL25189068M"],
    )

    @field_validator("id_type", mode="wrap")
    @classmethod
    def normalize_id_type(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        if isinstance(v, str):
            v = v.lower()
        try:
            return handler(v)
        except ValidationError:
            raise PydanticCustomError(
                "id_type", "idType must be one of: isbn, lccn, oclc, olid"
            ) from None

    @field_validator("id_value")
    @classmethod
    def id_value_not_empty(cls, v: str) -> str:
        return require_non_empty(v, "idValue cannot be empty")


@trace_tool(TOOL_NAME)
async def get_book_by_id_handler(
    arguments: dict[str, Any] | None, client: httpx.AsyncClient
) -> dict[str, Any]:
    """
    Handler for the get_book_by_id tool.

    An unknown identifier, whether Open Library answers 404 or an empty
    ``records`` object, is a plain "no book found" sentence rather than an
    error.
    """
    params = validate_arguments(GetBookByIdInput, TOOL_NAME, arguments)
    not_found = f"No book found for {params.id_type}: {params.id_value}"

    try:
        path = f"/api/volumes/brief/{params.id_type}/{params.id_value}.json"
        data = await fetch_json(client, path)
        records = (data or {}).get("records") or {}
        if not records:
            return text_result(not_found)

        # Records are keyed by edition path; the first one is the match
        record = next(iter(records.values()))
        book = BookDetails.from_record(record).to_payload()
    except Exception as e:
        if is_not_found(e):
            logger.info("No book found for %s %s", params.id_type, params.id_value)
            return text_result(not_found)
        logger.exception("Error in %s", TOOL_NAME)
        return error_result(describe_failure(e))

    return json_result(book)


get_book_by_id = {
    "name": TOOL_NAME,
    "description": (
        "Get detailed information about a book using its identifier (ISBN, LCCN, OCLC, OLID)."
    ),
    "inputSchema": GetBookByIdInput.model_json_schema(),
    "handler": get_book_by_id_handler,
    "remote": True,
}
