"""
citebot/detectors.py

Identifier type detection logic.
Matches the raw input against a fixed, ordered list of patterns.
"""

import re
from typing import Optional

from citebot.models import IdentifierType


# Bare DOI: 10.<registrant>/<suffix>
DOI_PATTERN = re.compile(r'^10\.\d{4,9}/[-._;()/:a-zA-Z0-9]+$')

DOI_URL_PATTERN = re.compile(r'^https?://(dx\.)?doi\.org/')

PMID_PATTERN = re.compile(r'^PMID:?\s*\d+$', re.IGNORECASE)

# Short bare numbers are assumed to be PMIDs
BARE_NUMBER_PATTERN = re.compile(r'^\d{1,8}$')

S2CID_PATTERN = re.compile(r'^S2CID:?\s*\d+$', re.IGNORECASE)

GOOGLE_BOOKS_PATTERN = re.compile(r'^https?://books\.google')

URL_PATTERN = re.compile(r'^https?://')

PMID_PREFIX = re.compile(r'^PMID:?\s*', re.IGNORECASE)
S2CID_PREFIX = re.compile(r'^S2CID:?\s*', re.IGNORECASE)


def detect_type(query: Optional[str]) -> IdentifierType:
    """
    Classify an identifier. First match wins.

    Args:
        query: Raw user input

    Returns:
        The IdentifierType; UNKNOWN when nothing matches
    """
    if not query:
        return IdentifierType.UNKNOWN

    query = query.strip()

    if DOI_PATTERN.match(query):
        return IdentifierType.DOI
    if DOI_URL_PATTERN.match(query):
        return IdentifierType.DOI_URL
    if PMID_PATTERN.match(query) or BARE_NUMBER_PATTERN.match(query):
        return IdentifierType.PMID
    if S2CID_PATTERN.match(query):
        return IdentifierType.S2CID
    if GOOGLE_BOOKS_PATTERN.match(query):
        return IdentifierType.GOOGLE_BOOKS
    if URL_PATTERN.match(query):
        return IdentifierType.WEB_URL

    return IdentifierType.UNKNOWN


def clean_doi(text: str) -> str:
    """Strip a doi.org URL prefix, leaving the bare DOI."""
    return DOI_URL_PATTERN.sub('', text.strip())


def clean_pmid(text: str) -> str:
    return PMID_PREFIX.sub('', text.strip())


def clean_s2cid(text: str) -> str:
    return S2CID_PREFIX.sub('', text.strip())
