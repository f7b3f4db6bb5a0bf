"""
Argument validation shared by every Open Library tool.

Each tool declares its input as a Pydantic model (required fields, patterns,
enumerations, defaults). This module evaluates those models against the raw
``arguments`` object of a ``tools/call`` request and turns any failure into
one MCP ``Invalid params`` fault.

MCP ERROR HANDLING:
Invalid arguments are a protocol-level fault (JSON-RPC -32602), raised before
the tool touches the network. Each violated field contributes one
``<field>: <reason>`` message; messages are joined with ``, ``.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, TypeVar

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Open Library author identifiers, e.g. OL23919A
AUTHOR_OLID_PATTERN = re.compile(r"^OL\d+A$")


def require_non_empty(value: str, message: str) -> str:
    """Reject the empty string with a field-specific message."""
    if not value:
        raise PydanticCustomError("string_empty", message)
    return value


def require_author_olid(value: str, empty_message: str, format_message: str) -> str:
    """Reject values that are not Open Library author identifiers."""
    require_non_empty(value, empty_message)
    if not AUTHOR_OLID_PATTERN.match(value):
        raise PydanticCustomError("author_olid_format", format_message)
    return value


def format_validation_errors(error: ValidationError) -> list[str]:
    """Render each Pydantic error as ``<field>: <reason>``."""
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        if detail["type"] == "missing":
            reason = "Required"
        elif not field:
            # The arguments value itself was not an object
            field, reason = "arguments", "Expected object"
        else:
            reason = detail["msg"]
        messages.append(f"{field}: {reason}")
    return messages


def invalid_params(tool_name: str, messages: list[str]) -> McpError:
    """Build the protocol fault for rejected tool arguments."""
    return McpError(
        ErrorData(
            code=INVALID_PARAMS,
            message=f"Invalid arguments for {tool_name}: {', '.join(messages)}",
        )
    )


def validate_arguments(
    model: type[ModelT], tool_name: str, arguments: Mapping[str, Any] | None
) -> ModelT:
    """
    Validate raw tool arguments against a tool's input model.

    Args:
        model: The tool's Pydantic input model
        tool_name: Tool name used in the fault message
        arguments: Raw ``arguments`` from the tools/call request; ``None``
            is treated as an empty object

    Returns:
        The validated model with defaults applied

    Raises:
        McpError: ``INVALID_PARAMS`` listing every violated field
    """
    if arguments is None:
        arguments = {}

    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        messages = format_validation_errors(e)
        logger.warning("Invalid arguments for %s: %s", tool_name, ", ".join(messages))
        raise invalid_params(tool_name, messages) from e
