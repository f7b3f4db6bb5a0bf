"""
Normalized author records returned by the Open Library tools.

- AuthorInfo: one entry of an author search (``/search/authors.json``)
- AuthorDetails: a full author record (``/authors/{key}.json``)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

AUTHOR_SEARCH_FIELDS = ("key", "name", "alternate_names", "birth_date", "top_work", "work_count")


class AuthorInfo(BaseModel):
    """
    An author matched by a name search.

    Unlike BookInfo, nothing is defaulted here: a field the search document
    does not carry is left out of the payload. Values are copied as Open
    Library sends them, without coercion.
    """

    key: Any = Field(None, examples=["OL23919A"])
    name: Any = Field(None, examples=["J. K. Rowling"])
    alternate_names: Any = None
    birth_date: Any = Field(None, examples=["31 July 1965"])
    top_work: Any = Field(None, examples=["Harry Potter and the Philosopher's Stone"])
    work_count: Any = None

    @classmethod
    def from_search_doc(cls, doc: dict[str, Any]) -> "AuthorInfo":
        return cls(**{field: doc[field] for field in AUTHOR_SEARCH_FIELDS if field in doc})

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class AuthorDetails(BaseModel):
    """
    A full author record.

    The record is passed through as Open Library returns it, except for
    ``bio``: upstream sends either a plain string or a typed-text object
    (``{"type": "/type/text", "value": ...}``), and the payload carries the
    plain text. A typed-text bio without a ``value`` is left out.
    """

    model_config = ConfigDict(extra="allow")

    bio: Any = None

    @field_serializer("bio")
    def flatten_bio(self, bio: Any) -> Any:
        if isinstance(bio, dict):
            return bio.get("value")
        return bio

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump()
        has_text = not isinstance(self.bio, dict) or "value" in self.bio
        if "bio" not in self.model_fields_set or not has_text:
            payload.pop("bio", None)
        return payload
