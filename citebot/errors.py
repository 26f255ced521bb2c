"""
citebot/errors.py

Exceptions raised while turning an identifier into a citation.

Every error carries a user-facing message and the HTTP status the API
responds with. Engines raise these; only the dispatch layer catches them.
"""

from typing import Optional


class CitationError(Exception):
    """Base class for citation lookup failures."""

    status_code = 500

    def __init__(self, message: str = '', status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnsupportedIdentifierError(CitationError):
    """Input matched none of the supported identifier kinds."""

    status_code = 400


class InvalidIdentifierError(CitationError):
    """Input was recognised but cannot be used, e.g. a Books URL without an id."""

    status_code = 400


class NotFoundError(CitationError):
    """The upstream source has no record for the identifier."""

    status_code = 404


class UpstreamError(CitationError):
    """
    HTTP or transport failure talking to a metadata source.

    `upstream_message` holds the source's own error payload when it sent one;
    it is preferred over the local message when reporting to the user.
    """

    status_code = 502

    def __init__(self, message: str = '', status_code: Optional[int] = None,
                 upstream_message: Optional[str] = None):
        super().__init__(message, status_code)
        self.upstream_message = upstream_message
