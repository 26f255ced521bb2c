"""Shared fixtures: canned HTTP responses for engine tests."""

import json

import pytest
import requests


def build_response(json_data=None, status=200, text=None, url="https://example.org/", encoding="utf-8"):
    """A real requests.Response with a fixed body, no network involved."""
    response = requests.Response()
    response.status_code = status
    if text is None:
        text = json.dumps(json_data)
    response._content = text.encode("utf-8")
    response._content_consumed = True
    response.encoding = encoding
    response.url = url
    return response


@pytest.fixture
def make_response():
    return build_response
