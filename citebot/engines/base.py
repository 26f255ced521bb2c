"""
citebot/engines/base.py

Base class for metadata engines.

Each engine owns a requests.Session with the bot's default headers and
turns one identifier into a CitationFields record with a single GET.
Transport and HTTP failures are raised as UpstreamError, carrying the
source's own error message when the response body has one.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from citebot.config import API_TIMEOUT, DEFAULT_HEADERS
from citebot.errors import UpstreamError
from citebot.models import CitationFields

logger = logging.getLogger(__name__)


class SearchEngine(ABC):
    """
    Abstract metadata engine.

    Subclasses set `name` and `base_url` and implement `fetch`.
    """

    name = "Base"
    base_url = ""

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.timeout = timeout if timeout is not None else API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    @abstractmethod
    def fetch(self, identifier: str) -> CitationFields:
        """Look up one identifier and return its citation fields."""

    def _make_request(self, url: str, params: Optional[Dict[str, Any]] = None,
                      headers: Optional[Dict[str, str]] = None, stream: bool = False) -> requests.Response:
        """GET a URL, raising UpstreamError on any failure or non-2xx status."""
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout,
                                        stream=stream)
        except requests.Timeout as e:
            logger.warning("[%s] Timed out after %ss: %s", self.name, self.timeout, url)
            raise UpstreamError(f"{self.name} request timed out") from e
        except requests.RequestException as e:
            logger.warning("[%s] Request failed: %s", self.name, e)
            raise UpstreamError(f"{self.name} request failed: {e}") from e

        if not response.ok:
            upstream_message = self._error_message(response)
            logger.warning("[%s] HTTP %s for %s: %s", self.name, response.status_code, url, upstream_message)
            raise UpstreamError(
                f"{self.name} returned HTTP {response.status_code}",
                status_code=404 if response.status_code == 404 else None,
                upstream_message=upstream_message,
            )
        return response

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None,
                  headers: Optional[Dict[str, str]] = None) -> Any:
        response = self._make_request(url, params=params, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"{self.name} returned invalid JSON") from e

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        """
        Pull a human-readable message out of an error response.

        Handles {"error": "..."}, {"error": {"message": "..."}}, {"message": "..."}
        and short plain-text bodies such as Crossref's "Resource not found."
        """
        try:
            payload = response.json()
        except ValueError:
            text = (response.text or '').strip()
            if text and len(text) < 300 and not text.startswith('<'):
                return text
            return None

        if not isinstance(payload, dict):
            return None
        error = payload.get('error')
        if isinstance(error, str) and error:
            return error
        if isinstance(error, dict) and error.get('message'):
            return error['message']
        message = payload.get('message')
        if isinstance(message, str) and message:
            return message
        return None
