"""Tests for the Google Books engine (mocked HTTP)."""

from unittest.mock import patch

import pytest

from citebot.engines.google_books import GoogleBooksEngine
from citebot.errors import InvalidIdentifierError, UpstreamError
from citebot.formatters import format_citation

BOOK_URL = "https://books.google.com/books?id=zyTCAlFPjgYC&printsec=frontcover"

VOLUME = {
    "id": "zyTCAlFPjgYC",
    "volumeInfo": {
        "title": "The Google Story",
        "authors": ["David A. Vise", "Mark Malseed"],
        "publisher": "Random House Digital, Inc.",
        "publishedDate": "2005-11-15",
        "industryIdentifiers": [
            {"type": "ISBN_10", "identifier": "055380457X"},
            {"type": "ISBN_13", "identifier": "9780553804577"},
        ],
    },
}


@pytest.fixture
def engine():
    return GoogleBooksEngine(api_key="")


def test_full_record(engine, make_response):
    with patch.object(engine.session, "get", return_value=make_response(VOLUME)) as mock_get:
        fields = engine.fetch(BOOK_URL)

    assert format_citation(fields) == (
        "{{cite book | author1=David A. Vise | author2=Mark Malseed | title=The Google Story"
        " | year=2005 | publisher=Random House Digital, Inc. | isbn=9780553804577"
        f" | url={BOOK_URL} }}}}"
    )
    assert mock_get.call_args.args[0] == f"{engine.base_url}/volumes/zyTCAlFPjgYC"


def test_isbn10_fallback(engine, make_response):
    volume = {"volumeInfo": {"title": "Old", "industryIdentifiers": [{"type": "ISBN_10", "identifier": "0131103628"}]}}
    with patch.object(engine.session, "get", return_value=make_response(volume)):
        fields = engine.fetch(BOOK_URL)

    assert fields.get("isbn") == "0131103628"


def test_sparse_volume_keeps_url_only(engine, make_response):
    with patch.object(engine.session, "get", return_value=make_response({"volumeInfo": {}})):
        rendered = format_citation(engine.fetch(BOOK_URL))

    assert rendered == f"{{{{cite book | url={BOOK_URL} }}}}"


def test_missing_id_raises_before_any_request(engine):
    with patch.object(engine.session, "get") as mock_get:
        with pytest.raises(InvalidIdentifierError, match="Could not extract Google Books ID"):
            engine.fetch("https://books.google.com/books/about/Some_Book.html")

    mock_get.assert_not_called()


def test_unknown_volume_uses_api_error_message(engine, make_response):
    error = {"error": {"code": 404, "message": "The volume ID could not be found."}}
    with patch.object(engine.session, "get", return_value=make_response(error, status=404)):
        with pytest.raises(UpstreamError) as exc_info:
            engine.fetch("https://books.google.com/books?id=nope")

    assert exc_info.value.upstream_message == "The volume ID could not be found."
