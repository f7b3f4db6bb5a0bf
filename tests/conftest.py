"""Test configuration and fixtures for the Open Library MCP Server.

- Configuration isolation - every test starts from default settings
- A fake Open Library - ``httpx.MockTransport`` records requests and serves
  canned responses, so no test touches the network
- Canned upstream payloads shaped like real Open Library responses
"""

import os
from collections.abc import AsyncGenerator, Generator
from typing import Any

import httpx
import logfire
import pytest
import pytest_asyncio

from open_library_mcp.client import create_client
from open_library_mcp.config import ServerConfig, reset_config
from open_library_mcp.dispatcher import OpenLibraryDispatcher

# === Fake Upstream ===


class FakeOpenLibrary:
    """Stand-in for openlibrary.org behind an httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._json: Any = {}
        self._content: bytes | None = None
        self._error: Exception | None = None

    def respond(self, status: int = 200, json: Any = None, content: bytes | None = None) -> None:
        self._status = status
        self._json = json
        self._content = content
        self._error = None

    def fail(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._content is not None:
            return httpx.Response(self._status, content=self._content)
        return httpx.Response(self._status, json=self._json)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]


# === Configuration Fixtures ===


@pytest.fixture(scope="session", autouse=True)
def local_tracing() -> None:
    """Keep tool spans in-process for the whole test session."""
    logfire.configure(send_to_logfire=False, console=False)



@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide an environment without OPEN_LIBRARY_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("OPEN_LIBRARY_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(clean_env) -> Generator[ServerConfig, None, None]:
    """Provide a test-specific MCP server configuration."""
    reset_config()

    config = ServerConfig(
        server_name="test-open-library",
        server_version="0.0.1-test",
        debug=True,
        log_level="DEBUG",
        _env_file=None,
    )

    yield config

    reset_config()


# === Upstream Fixtures ===


@pytest.fixture
def open_library() -> FakeOpenLibrary:
    return FakeOpenLibrary()


@pytest_asyncio.fixture
async def client(
    open_library: FakeOpenLibrary, test_config: ServerConfig
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Open Library client wired to the fake upstream."""
    async with create_client(
        test_config, transport=httpx.MockTransport(open_library.handler)
    ) as client:
        yield client


@pytest_asyncio.fixture
async def dispatcher(
    client: httpx.AsyncClient, test_config: ServerConfig
) -> AsyncGenerator[OpenLibraryDispatcher, None]:
    async with OpenLibraryDispatcher(client=client, config=test_config) as dispatcher:
        yield dispatcher


# === Canned Upstream Payloads ===


@pytest.fixture
def book_search_response() -> dict:
    """Two /search.json docs: one complete, one with only title and key."""
    return {
        "numFound": 2,
        "start": 0,
        "docs": [
            {
                "key": "/works/OL27482W",
                "title": "The Hobbit",
                "author_name": ["J.R.R. Tolkien"],
                "first_publish_year": 1937,
                "edition_count": 120,
                "cover_i": 6979861,
            },
            {
                "key": "/works/OL999W",
                "title": "Minimal Book",
            },
        ],
    }


@pytest.fixture
def author_search_response() -> dict:
    return {
        "numFound": 2,
        "start": 0,
        "numFoundExact": True,
        "docs": [
            {
                "key": "OL26320A",
                "type": "author",
                "name": "J.R.R. Tolkien",
                "alternate_names": ["John Ronald Reuel Tolkien"],
                "birth_date": "3 January 1892",
                "top_work": "The Hobbit",
                "work_count": 629,
                "top_subjects": ["Fiction"],
            },
            {
                "key": "OL1234567A",
                "type": "author",
                "name": "Tolkien Estate",
                "work_count": 3,
            },
        ],
    }


@pytest.fixture
def author_record() -> dict:
    """An /authors/{key}.json record with a typed-text bio."""
    return {
        "key": "/authors/OL23919A",
        "name": "J. K. Rowling",
        "personal_name": "Joanne Rowling",
        "birth_date": "31 July 1965",
        "bio": {
            "type": "/type/text",
            "value": "Joanne Rowling is a British author.",
        },
        "alternate_names": ["Joanne Rowling", "Robert Galbraith"],
        "photos": [5543033],
        "remote_ids": {"wikidata": "Q34660", "viaf": "116796842"},
        "revision": 42,
        "last_modified": {"type": "/type/datetime", "value": "2023-09-01T12:00:00"},
    }


@pytest.fixture
def volume_response() -> dict:
    """An /api/volumes/brief response with one record."""
    return {
        "records": {
            "/books/OL26331930M": {
                "recordURL": "https://openlibrary.org/books/OL26331930M",
                "data": {
                    "url": "https://openlibrary.org/books/OL26331930M/The_Hobbit",
                    "key": "/books/OL26331930M",
                    "title": "The Hobbit",
                    "subtitle": "or There and Back Again",
                    "authors": [{"url": "https://openlibrary.org/authors/OL26320A", "name": "J.R.R. Tolkien"}],
                    "publishers": [{"name": "Mariner Books"}],
                    "publish_date": "2012",
                    "identifiers": {
                        "isbn_13": ["9780547928227"],
                        "isbn_10": ["054792822X"],
                        "openlibrary": ["OL26331930M"],
                    },
                    "cover": {
                        "small": "https://covers.openlibrary.org/b/id/8406786-S.jpg",
                        "medium": "https://covers.openlibrary.org/b/id/8406786-M.jpg",
                        "large": "https://covers.openlibrary.org/b/id/8406786-L.jpg",
                    },
                    "ebooks": [{"preview_url": "https://archive.org/details/hobbit0000tolk"}],
                },
                "details": {
                    "bib_key": "isbn:9780547928227",
                    "info_url": "https://openlibrary.org/books/OL26331930M/The_Hobbit",
                    "details": {
                        "key": "/books/OL26331930M",
                        "title": "The Hobbit",
                        "number_of_pages": 300,
                        "lccn": ["2012017776"],
                        "oclc_numbers": ["794165516"],
                        "works": [{"key": "/works/OL27482W"}],
                    },
                },
            }
        },
        "items": [],
    }
