"""Tests for the Flask API surface."""

from unittest.mock import patch

import pytest

from citebot.app import create_app
from citebot.config import UNSUPPORTED_MESSAGE
from citebot.models import IdentifierType
from citebot.routers import unified


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_index_renders_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b'id="identifier"' in response.data


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_citation_success(client, make_response):
    paper = {"title": "A paper", "venue": "Nature", "year": 2021}
    engine = unified.ENGINES[IdentifierType.S2CID]
    with patch.object(engine.session, "get", return_value=make_response(paper)):
        response = client.post("/api/citation", json={"identifier": "S2CID:42"})

    assert response.status_code == 200
    assert response.get_json()["citation"] == (
        "{{cite journal | title=A paper | journal=Nature | year=2021 | s2cid=42 }}"
    )


def test_unknown_identifier(client):
    response = client.post("/api/citation", json={"identifier": "not an identifier"})
    assert response.status_code == 400
    assert response.get_json() == {"error": UNSUPPORTED_MESSAGE}


def test_pmid_not_found(client, make_response):
    engine = unified.ENGINES[IdentifierType.PMID]
    with patch.object(engine.session, "get", return_value=make_response({"result": {"uids": []}})):
        response = client.post("/api/citation", json={"identifier": "32728213"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "PMID not found"}


@pytest.mark.parametrize("payload", [{}, {"identifier": ""}, {"identifier": "   "}, {"identifier": 5}])
def test_missing_identifier(client, payload):
    response = client.post("/api/citation", json=payload)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing identifier parameter"}


def test_non_json_body(client):
    response = client.post("/api/citation", data="identifier=x", content_type="text/plain")
    assert response.status_code == 400
