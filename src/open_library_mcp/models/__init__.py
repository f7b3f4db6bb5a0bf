"""
Open Library MCP Server Models.

Pydantic models for the normalized records the tools return. Upstream JSON is
read into these models and serialized back out, so every tool answers with a
stable shape whatever optional metadata Open Library happens to include.
"""

from .author import AuthorDetails, AuthorInfo
from .book import BookDetails, BookInfo, cover_image_url

__all__ = [
    "AuthorDetails",
    "AuthorInfo",
    "BookDetails",
    "BookInfo",
    "cover_image_url",
]
