"""
citebot/routers/unified.py

Dispatch: detect identifier type -> engine -> citation template.

get_citation() raises on any failure; resolve_identifier() is the API-facing
wrapper that turns failures into a single user-readable error message.
A request yields either a complete citation or an error, never a partial
citation.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from citebot.config import GENERIC_ERROR, UNSUPPORTED_MESSAGE
from citebot.detectors import detect_type
from citebot.engines import (
    CrossrefEngine,
    GenericURLEngine,
    GoogleBooksEngine,
    PubMedEngine,
    SearchEngine,
    SemanticScholarEngine,
)
from citebot.errors import CitationError, UnsupportedIdentifierError, UpstreamError
from citebot.formatters import format_citation
from citebot.models import IdentifierType

logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE INSTANCES (reused across requests)
# =============================================================================

_crossref = CrossrefEngine()

ENGINES: Dict[IdentifierType, SearchEngine] = {
    IdentifierType.DOI: _crossref,
    IdentifierType.DOI_URL: _crossref,
    IdentifierType.PMID: PubMedEngine(),
    IdentifierType.S2CID: SemanticScholarEngine(),
    IdentifierType.GOOGLE_BOOKS: GoogleBooksEngine(),
    IdentifierType.WEB_URL: GenericURLEngine(),
}


# =============================================================================
# ROUTING
# =============================================================================

def get_citation(identifier: str) -> Tuple[IdentifierType, str]:
    """
    Classify an identifier and build its citation.

    Args:
        identifier: Raw user input (DOI, PMID, S2CID, Google Books URL, URL)

    Returns:
        (identifier type, citation template string)

    Raises:
        CitationError: unsupported input, not-found, or upstream failure
    """
    identifier = (identifier or '').strip()
    identifier_type = detect_type(identifier)
    logger.info("[UnifiedRouter] %s -> %s", identifier, identifier_type.name)

    engine = ENGINES.get(identifier_type)
    if engine is None:
        raise UnsupportedIdentifierError(UNSUPPORTED_MESSAGE)

    fields = engine.fetch(identifier)
    return identifier_type, format_citation(fields)


def error_message(error: Exception) -> str:
    """Best available message: upstream payload, then local message, then generic."""
    if isinstance(error, UpstreamError) and error.upstream_message:
        return error.upstream_message
    return str(error) or GENERIC_ERROR


def resolve_identifier(identifier: Optional[str]) -> Tuple[Dict[str, Any], int]:
    """
    Run a lookup and shape the result for the JSON API.

    Returns:
        ({'citation': ..., 'type': ...}, 200) on success,
        ({'error': ...}, status) on any failure
    """
    try:
        identifier_type, citation = get_citation(identifier or '')
    except CitationError as e:
        message = error_message(e)
        logger.warning("[UnifiedRouter] Lookup failed for %r: %s", identifier, message)
        return {'error': message}, e.status_code
    except Exception as e:
        logger.exception("[UnifiedRouter] Unexpected error for %r", identifier)
        return {'error': error_message(e)}, 500

    return {'citation': citation, 'type': identifier_type.value}, 200
