"""
Normalized book records returned by the Open Library tools.

Open Library returns loosely shaped JSON whose fields come and go from one
record to the next. These models copy the parts each tool exposes into a
stable shape:

- BookInfo: one entry of a title search (``/search.json``)
- BookDetails: one edition looked up by identifier
  (``/api/volumes/brief/{kind}/{value}.json``)
"""

from typing import Any

from pydantic import BaseModel, Field


def cover_image_url(covers_base_url: str, kind: str, value: Any, size: str) -> str:
    """Build a Covers API image URL, e.g. ``/b/isbn/0451526538-L.jpg``."""
    return f"{covers_base_url}/b/{kind.lower()}/{value}-{size}.jpg"


class BookInfo(BaseModel):
    """
    A book matched by a title search.

    Missing metadata is defaulted (``authors=[]``, ``first_publish_year=None``,
    ``edition_count=0``). ``title`` and ``open_library_work_key`` are only set
    when the search document has them, and ``cover_url`` only when it carries a
    cover id; unset fields are left out of the payload.
    """

    title: str | None = Field(None, description="Title of the work")
    authors: list[str] = Field(
        default_factory=list,
        description="Author names as listed by Open Library",
        examples=[["J.R.R. Tolkien"]],
    )
    first_publish_year: int | None = Field(
        None, description="Year of first publication", examples=[1954]
    )
    open_library_work_key: str | None = Field(
        None, description="Open Library work key", examples=["/works/OL27448W"]
    )
    edition_count: int = Field(0, description="Number of known editions", ge=0)
    cover_url: str | None = Field(
        None,
        description="Medium-size cover image URL",
        examples=["https://covers.openlibrary.org/b/id/9255566-M.jpg"],
    )

    @classmethod
    def from_search_doc(cls, doc: dict[str, Any], covers_base_url: str) -> "BookInfo":
        """Map one ``docs`` entry of a title search."""
        fields: dict[str, Any] = {
            "authors": doc.get("author_name") or [],
            "first_publish_year": doc.get("first_publish_year") or None,
            "edition_count": doc.get("edition_count") or 0,
        }
        if "title" in doc:
            fields["title"] = doc["title"]
        if "key" in doc:
            fields["open_library_work_key"] = doc["key"]
        if doc.get("cover_i"):
            fields["cover_url"] = cover_image_url(covers_base_url, "id", doc["cover_i"], "M")
        return cls(**fields)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the tool response, dropping fields that were never set."""
        return self.model_dump(exclude_unset=True)


class BookDetails(BaseModel):
    """
    One edition looked up by ISBN, LCCN, OCLC or OLID.

    Open Library answers with two overlapping blocks per record: the primary
    ``data`` block and a secondary ``details.details`` block. Every field is
    read from ``data`` first and falls back to the secondary block:

    - number_of_pages, isbn_13, isbn_10, lccn: data, then details
    - oclc: ``data.identifiers.oclc``, then ``details.oclc_numbers``
    - open_library_work_key: only in details (first entry of ``works``)
    - info_url, preview_url: the outer ``details`` block first, then ``data``
    """

    title: str | None = None
    subtitle: str | None = None
    authors: list[str] | None = None
    publishers: list[str] | None = None
    publish_date: str | None = None
    number_of_pages: int | None = None
    isbn_13: list[str] | None = None
    isbn_10: list[str] | None = None
    lccn: list[str] | None = None
    oclc: list[str] | None = None
    olid: list[str] | None = None
    open_library_edition_key: str | None = None
    open_library_work_key: str | None = None
    cover_url: str | None = None
    info_url: str | None = None
    preview_url: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "BookDetails":
        """Map one entry of the volumes ``records`` object."""
        data = record.get("data") or {}
        details = record.get("details") or {}
        secondary = details.get("details") or {}
        identifiers = data.get("identifiers") or {}

        works = secondary.get("works") or []
        ebooks = data.get("ebooks") or []

        return cls(
            title=data.get("title"),
            subtitle=data.get("subtitle"),
            # Empty name lists are dropped rather than serialized
            authors=[a.get("name") for a in data.get("authors") or []] or None,
            publishers=[p.get("name") for p in data.get("publishers") or []] or None,
            publish_date=data.get("publish_date"),
            number_of_pages=_first_present(
                data.get("number_of_pages"), secondary.get("number_of_pages")
            ),
            isbn_13=_first_present(identifiers.get("isbn_13"), secondary.get("isbn_13")),
            isbn_10=_first_present(identifiers.get("isbn_10"), secondary.get("isbn_10")),
            lccn=_first_present(identifiers.get("lccn"), secondary.get("lccn")),
            oclc=_first_present(identifiers.get("oclc"), secondary.get("oclc_numbers")),
            olid=identifiers.get("openlibrary"),
            open_library_edition_key=data.get("key"),
            open_library_work_key=works[0].get("key") if works else None,
            cover_url=(data.get("cover") or {}).get("medium"),
            info_url=_first_present(details.get("info_url"), data.get("url")),
            preview_url=_first_present(
                details.get("preview_url"), ebooks[0].get("preview_url") if ebooks else None
            ),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the tool response, stripping absent fields."""
        return self.model_dump(exclude_none=True)


def _first_present(primary: Any, fallback: Any) -> Any:
    return primary if primary is not None else fallback
