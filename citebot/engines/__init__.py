"""
engines/ - Metadata engines, one per external source.

Modules:
    base.py             - SearchEngine ABC: shared session, request, and error handling
    crossref.py         - CrossrefEngine (DOI, doi.org URL)
    pubmed.py           - PubMedEngine (PMID)
    google_books.py     - GoogleBooksEngine (books.google URL)
    semantic_scholar.py - SemanticScholarEngine (S2CID)
    generic_url.py      - GenericURLEngine (any other web page)
"""

from citebot.engines.base import SearchEngine
from citebot.engines.crossref import CrossrefEngine
from citebot.engines.pubmed import PubMedEngine
from citebot.engines.google_books import GoogleBooksEngine
from citebot.engines.semantic_scholar import SemanticScholarEngine
from citebot.engines.generic_url import GenericURLEngine

__all__ = [
    'SearchEngine',
    'CrossrefEngine',
    'PubMedEngine',
    'GoogleBooksEngine',
    'SemanticScholarEngine',
    'GenericURLEngine',
]
