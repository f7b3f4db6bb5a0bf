"""
Tests for tool argument validation.

Every tool schema must reject bad input with an MCP Invalid params fault
whose message lists one ``<field>: <reason>`` entry per violated field.
"""

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS

from open_library_mcp.tools.author_info import GetAuthorInfoInput
from open_library_mcp.tools.author_search import GetAuthorsByNameInput
from open_library_mcp.tools.book_lookup import GetBookByIdInput
from open_library_mcp.tools.book_search import GetBookByTitleInput
from open_library_mcp.tools.covers import GetAuthorPhotoInput, GetBookCoverInput
from open_library_mcp.validation import validate_arguments


def fault_message(model, tool_name: str, arguments) -> str:
    with pytest.raises(McpError) as exc_info:
        validate_arguments(model, tool_name, arguments)
    assert exc_info.value.error.code == INVALID_PARAMS
    return exc_info.value.error.message


class TestRequiredFields:
    """Missing required fields are reported as ``<field>: Required``."""

    @pytest.mark.parametrize(
        "model,tool_name,field",
        [
            (GetBookByTitleInput, "get_book_by_title", "title"),
            (GetAuthorsByNameInput, "get_authors_by_name", "name"),
            (GetAuthorInfoInput, "get_author_info", "author_key"),
            (GetAuthorPhotoInput, "get_author_photo", "olid"),
        ],
    )
    def test_missing_single_field(self, model, tool_name, field):
        message = fault_message(model, tool_name, {})
        assert message == f"Invalid arguments for {tool_name}: {field}: Required"

    def test_missing_fields_are_joined(self):
        message = fault_message(GetBookCoverInput, "get_book_cover", {})
        assert message == (
            "Invalid arguments for get_book_cover: key: Required, value: Required"
        )

    def test_book_by_id_uses_wire_field_names(self):
        message = fault_message(GetBookByIdInput, "get_book_by_id", {"idType": "isbn"})
        assert message.endswith("idValue: Required")

    def test_none_arguments_treated_as_empty_object(self):
        message = fault_message(GetBookByTitleInput, "get_book_by_title", None)
        assert message.endswith("title: Required")

    def test_non_object_arguments(self):
        message = fault_message(GetBookByTitleInput, "get_book_by_title", ["The Hobbit"])
        assert message.endswith("arguments: Expected object")


class TestEmptyStrings:
    """Empty required strings carry a field-specific message."""

    @pytest.mark.parametrize(
        "model,tool_name,arguments,expected",
        [
            (GetBookByTitleInput, "get_book_by_title", {"title": ""}, "title: Title cannot be empty"),
            (
                GetAuthorsByNameInput,
                "get_authors_by_name",
                {"name": ""},
                "name: Author name cannot be empty",
            ),
            (
                GetAuthorInfoInput,
                "get_author_info",
                {"author_key": ""},
                "author_key: Author key cannot be empty",
            ),
            (GetAuthorPhotoInput, "get_author_photo", {"olid": ""}, "olid: OLID cannot be empty"),
            (
                GetBookCoverInput,
                "get_book_cover",
                {"key": "ISBN", "value": ""},
                "value: Value cannot be empty",
            ),
            (
                GetBookByIdInput,
                "get_book_by_id",
                {"idType": "isbn", "idValue": ""},
                "idValue: idValue cannot be empty",
            ),
        ],
    )
    def test_empty_string_message(self, model, tool_name, arguments, expected):
        assert expected in fault_message(model, tool_name, arguments)


class TestPatternsAndEnumerations:
    @pytest.mark.parametrize("value", ["invalid-key", "OL123", "OL123M", "ol123a", "XOL1A"])
    def test_author_key_format(self, value):
        message = fault_message(GetAuthorInfoInput, "get_author_info", {"author_key": value})
        assert message == (
            "Invalid arguments for get_author_info: "
            "author_key: Author key must be in the format OL<number>A"
        )

    def test_author_photo_olid_format(self):
        message = fault_message(GetAuthorPhotoInput, "get_author_photo", {"olid": "OL1M"})
        assert message.endswith("olid: OLID must be in the format OL<number>A")

    def test_valid_author_key(self):
        params = validate_arguments(GetAuthorInfoInput, "get_author_info", {"author_key": "OL23919A"})
        assert params.author_key == "OL23919A"

    def test_cover_key_enumeration(self):
        message = fault_message(
            GetBookCoverInput, "get_book_cover", {"key": "INVALID_KEY", "value": "0451526538"}
        )
        assert "key: Key must be one of ISBN, OCLC, LCCN, OLID, ID" in message

    def test_cover_key_is_case_sensitive(self):
        message = fault_message(GetBookCoverInput, "get_book_cover", {"key": "isbn", "value": "1"})
        assert "Key must be one of" in message

    def test_cover_size_enumeration(self):
        message = fault_message(
            GetBookCoverInput, "get_book_cover", {"key": "ISBN", "value": "1", "size": "XL"}
        )
        assert "size:" in message

    def test_id_type_enumeration(self):
        message = fault_message(
            GetBookByIdInput, "get_book_by_id", {"idType": "invalid", "idValue": "123"}
        )
        assert "idType: idType must be one of: isbn, lccn, oclc, olid" in message

    @pytest.mark.parametrize("id_type", ["ISBN", "Isbn", "isbn"])
    def test_id_type_is_lower_cased(self, id_type):
        params = validate_arguments(
            GetBookByIdInput, "get_book_by_id", {"idType": id_type, "idValue": "9780547928227"}
        )
        assert params.id_type == "isbn"
        assert params.id_value == "9780547928227"

    def test_wrong_primitive_type(self):
        message = fault_message(GetBookByTitleInput, "get_book_by_title", {"title": 42})
        assert message.startswith("Invalid arguments for get_book_by_title: title:")


class TestDefaults:
    @pytest.mark.parametrize("arguments", [{}, {"size": None}])
    def test_cover_size_defaults_to_large(self, arguments):
        params = validate_arguments(
            GetBookCoverInput, "get_book_cover", {"key": "ISBN", "value": "0451526538", **arguments}
        )
        assert params.size == "L"

    def test_explicit_cover_size_kept(self):
        params = validate_arguments(
            GetBookCoverInput, "get_book_cover", {"key": "OLID", "value": "OL1M", "size": "S"}
        )
        assert params.size == "S"

    def test_extra_fields_are_ignored(self):
        params = validate_arguments(
            GetBookByTitleInput, "get_book_by_title", {"title": "Dune", "wrongParam": "x"}
        )
        assert params.title == "Dune"
