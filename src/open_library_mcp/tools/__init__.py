"""
MCP Tools for the Open Library Server.

Each tool is a dictionary with its metadata (name, description, JSON Schema
generated from a Pydantic input model) and an async handler. ``remote`` tools
receive the shared Open Library client; the cover tools only build URLs.
Tools flagged ``uses_config`` also receive the server configuration, which
supplies the covers host.

Every handler follows the same shape:
1. Validate raw arguments (invalid input raises an MCP ``Invalid params`` fault)
2. Issue at most one GET to Open Library
3. Normalize the response into a stable output shape
4. Report failures as ``isError`` results, never as exceptions
"""

from .author_info import get_author_info
from .author_search import get_authors_by_name
from .book_lookup import get_book_by_id
from .book_search import get_book_by_title
from .covers import get_author_photo, get_book_cover

# Catalog order as reported by tools/list
all_tools = [
    get_book_by_title,
    get_authors_by_name,
    get_author_info,
    get_author_photo,
    get_book_cover,
    get_book_by_id,
]

__all__ = [
    "all_tools",
    "get_author_info",
    "get_author_photo",
    "get_authors_by_name",
    "get_book_by_id",
    "get_book_by_title",
    "get_book_cover",
]
