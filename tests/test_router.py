"""Tests for identifier dispatch and error shaping."""

from unittest.mock import MagicMock, patch

import pytest

from citebot.config import GENERIC_ERROR, UNSUPPORTED_MESSAGE
from citebot.errors import NotFoundError, UnsupportedIdentifierError, UpstreamError
from citebot.models import CitationFields, IdentifierType, TemplateType
from citebot.routers import unified
from citebot.routers.unified import error_message, get_citation, resolve_identifier


def fake_engine(fields=None, error=None):
    engine = MagicMock()
    if error is not None:
        engine.fetch.side_effect = error
    else:
        engine.fetch.return_value = fields
    return engine


def journal_fields():
    return CitationFields(TemplateType.JOURNAL).add("title", "T").add("pmid", "123", required=True)


# ── Routing ──────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "identifier, identifier_type",
    [
        ("10.1038/s41586-020-2649-2", IdentifierType.DOI),
        ("https://doi.org/10.1038/x", IdentifierType.DOI_URL),
        ("PMID:123", IdentifierType.PMID),
        ("S2CID:220845396", IdentifierType.S2CID),
        ("https://books.google.com/books?id=abc123", IdentifierType.GOOGLE_BOOKS),
        ("https://bbc.com/news/x", IdentifierType.WEB_URL),
    ],
)
def test_each_type_routes_to_its_engine(identifier, identifier_type):
    engine = fake_engine(journal_fields())
    with patch.dict(unified.ENGINES, {identifier_type: engine}):
        routed_type, citation = get_citation(f"  {identifier}  ")

    assert routed_type == identifier_type
    assert citation == "{{cite journal | title=T | pmid=123 }}"
    engine.fetch.assert_called_once_with(identifier)


def test_doi_and_doi_url_share_crossref():
    assert unified.ENGINES[IdentifierType.DOI] is unified.ENGINES[IdentifierType.DOI_URL]


def test_unknown_raises_unsupported():
    with pytest.raises(UnsupportedIdentifierError, match="Unsupported identifier format"):
        get_citation("not an identifier")


# ── Error messages ───────────────────────────────────────────────────


def test_error_message_prefers_upstream_payload():
    error = UpstreamError("Crossref returned HTTP 404", upstream_message="Resource not found.")
    assert error_message(error) == "Resource not found."


def test_error_message_falls_back_to_local_message():
    assert error_message(UpstreamError("Crossref request timed out")) == "Crossref request timed out"


def test_error_message_falls_back_to_generic():
    assert error_message(RuntimeError()) == GENERIC_ERROR


# ── resolve_identifier ───────────────────────────────────────────────


def test_resolve_success():
    with patch.dict(unified.ENGINES, {IdentifierType.PMID: fake_engine(journal_fields())}):
        body, status = resolve_identifier("123")

    assert status == 200
    assert body == {"citation": "{{cite journal | title=T | pmid=123 }}", "type": "pmid"}


def test_resolve_unknown_is_400():
    body, status = resolve_identifier("not an identifier")
    assert status == 400
    assert body == {"error": UNSUPPORTED_MESSAGE}


def test_resolve_empty_is_400():
    body, status = resolve_identifier(None)
    assert status == 400
    assert "citation" not in body


def test_resolve_not_found_is_404():
    engine = fake_engine(error=NotFoundError("S2CID not found"))
    with patch.dict(unified.ENGINES, {IdentifierType.S2CID: engine}):
        body, status = resolve_identifier("S2CID:1")

    assert status == 404
    assert body == {"error": "S2CID not found"}


def test_resolve_upstream_failure_is_502_with_payload():
    engine = fake_engine(error=UpstreamError("Crossref returned HTTP 503", upstream_message="Service down"))
    with patch.dict(unified.ENGINES, {IdentifierType.DOI: engine}):
        body, status = resolve_identifier("10.1000/182")

    assert status == 502
    assert body == {"error": "Service down"}


def test_resolve_unexpected_error_is_500_without_partial_citation():
    engine = fake_engine(error=KeyError("volumeInfo"))
    with patch.dict(unified.ENGINES, {IdentifierType.GOOGLE_BOOKS: engine}):
        body, status = resolve_identifier("https://books.google.com/books?id=x")

    assert status == 500
    assert list(body) == ["error"]
    assert body["error"]
