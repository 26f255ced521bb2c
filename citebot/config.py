"""
citebot/config.py

Configuration, constants, and shared settings.
"""

import os
from typing import Dict

# =============================================================================
# API ENDPOINTS
# =============================================================================

CROSSREF_API_URL = os.environ.get('CROSSREF_API_URL', 'https://api.crossref.org')
PUBMED_API_URL = os.environ.get('PUBMED_API_URL', 'https://eutils.ncbi.nlm.nih.gov/entrez/eutils')
GOOGLE_BOOKS_API_URL = os.environ.get('GOOGLE_BOOKS_API_URL', 'https://www.googleapis.com/books/v1')
SEMANTIC_SCHOLAR_API_URL = os.environ.get('SEMANTIC_SCHOLAR_API_URL', 'https://api.semanticscholar.org/graph/v1')

# =============================================================================
# API KEYS (from environment, all optional)
# =============================================================================

PUBMED_API_KEY = os.environ.get('PUBMED_API_KEY', '')
GOOGLE_BOOKS_API_KEY = os.environ.get('GOOGLE_BOOKS_API_KEY', '')
SEMANTIC_SCHOLAR_API_KEY = os.environ.get('SEMANTIC_SCHOLAR_API_KEY', '')

# =============================================================================
# HTTP SETTINGS
# =============================================================================

CONTACT_EMAIL = os.environ.get('CITEBOT_CONTACT_EMAIL', 'citebot@example.org')

API_TIMEOUT = float(os.environ.get('CITEBOT_API_TIMEOUT', '30'))  # seconds
WEB_TIMEOUT = 10  # seconds, page fetches are never retried

DEFAULT_HEADERS: Dict[str, str] = {
    'User-Agent': f'CiteBot/1.0 (mailto:{CONTACT_EMAIL})',
    'Accept': 'application/json',
}

WEB_USER_AGENT = 'Mozilla/5.0 (compatible; JustapediaCitationBot/1.0; +http://justapedia.org)'

# =============================================================================
# APP SETTINGS
# =============================================================================

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-prod')
PORT = int(os.environ.get('PORT', 5000))
FLASK_DEBUG = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

GENERIC_ERROR = 'Failed to generate citation'
UNSUPPORTED_MESSAGE = (
    'Unsupported identifier format. '
    'Please use DOI, PMID, S2CID, Google Books URL, or a Web URL.'
)
