"""
Cover and author photo tools for the Open Library MCP Server.

Both tools only build Covers API URLs from validated input; they never make a
request. The Covers API offers no way to check that an image exists short of
downloading it.
"""

import logging
from typing import Any, Literal

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from ..config import ServerConfig, get_config
from ..models.book import cover_image_url
from ..observability import trace_tool
from ..validation import require_author_olid, require_non_empty, validate_arguments
from .responses import text_result

logger = logging.getLogger(__name__)

CoverKey = Literal["ISBN", "OCLC", "LCCN", "OLID", "ID"]
CoverSize = Literal["S", "M", "L"]

DEFAULT_COVER_SIZE: CoverSize = "L"


# =============================================================================
# AUTHOR PHOTO
# =============================================================================


class GetAuthorPhotoInput(BaseModel):
    """Input schema for the get_author_photo tool."""

    olid: str = Field(
        ...,
        description="The Open Library Author ID (OLID) for the author (e.g. OL23919A).",
        examples=["OL23919A"],
    )

    @field_validator("olid")
    @classmethod
    def validate_olid(cls, v: str) -> str:
        return require_author_olid(
            v,
            empty_message="OLID cannot be empty",
            format_message="OLID must be in the format OL<number>A",
        )


@trace_tool("get_author_photo")
async def get_author_photo_handler(
    arguments: dict[str, Any] | None, config: ServerConfig | None = None
) -> dict[str, Any]:
    """Return the large author photo URL for an author OLID."""
    params = validate_arguments(GetAuthorPhotoInput, "get_author_photo", arguments)
    covers_base_url = (config or get_config()).covers_base_url
    return text_result(f"{covers_base_url}/a/olid/{params.olid}-L.jpg")


get_author_photo = {
    "name": "get_author_photo",
    "description": (
        "Get the URL for an author's photo using their Open Library Author ID "
        "(OLID e.g. OL23919A)."
    ),
    "inputSchema": GetAuthorPhotoInput.model_json_schema(),
    "handler": get_author_photo_handler,
    "remote": False,
    "uses_config": True,
}


# =============================================================================
# BOOK COVER
# =============================================================================


class GetBookCoverInput(BaseModel):
    """
    Input schema for the get_book_cover tool.

    ``ID`` is Open Library's internal cover id. ``size`` falls back to
    large when it is omitted or null.
    """

    key: CoverKey = Field(
        ...,
        description="The type of identifier used (ISBN, OCLC, LCCN, OLID, ID).",
    )

    value: str = Field(
        ...,
        description="The value of the identifier.",
        examples=["0451526538"],
    )

    size: CoverSize | None = Field(
        default=None,
        description="The desired size of the cover (S, M, or L).",
    )

    @field_validator("key", mode="wrap")
    @classmethod
    def validate_key(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        try:
            return handler(v)
        except ValidationError:
            raise PydanticCustomError(
                "cover_key", "Key must be one of ISBN, OCLC, LCCN, OLID, ID"
            ) from None

    @field_validator("value")
    @classmethod
    def value_not_empty(cls, v: str) -> str:
        return require_non_empty(v, "Value cannot be empty")

    @model_validator(mode="after")
    def apply_default_size(self) -> "GetBookCoverInput":
        if self.size is None:
            self.size = DEFAULT_COVER_SIZE
        return self


@trace_tool("get_book_cover")
async def get_book_cover_handler(
    arguments: dict[str, Any] | None, config: ServerConfig | None = None
) -> dict[str, Any]:
    """Return the cover image URL for a book identifier."""
    params = validate_arguments(GetBookCoverInput, "get_book_cover", arguments)
    covers_base_url = (config or get_config()).covers_base_url
    url = cover_image_url(covers_base_url, params.key, params.value, params.size)
    logger.debug("Built cover URL %s", url)
    return text_result(url)


get_book_cover = {
    "name": "get_book_cover",
    "description": (
        "Get the URL for a book's cover image using a key (ISBN, OCLC, LCCN, OLID, ID) and value."
    ),
    "inputSchema": GetBookCoverInput.model_json_schema(),
    "handler": get_book_cover_handler,
    "remote": False,
    "uses_config": True,
}
