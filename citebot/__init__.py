"""
CiteBot

Turns bibliographic identifiers (DOI, PMID, S2CID, Google Books URL, web URL)
into wiki citation templates using authoritative metadata sources.

Modules:
    engines/    - One engine per metadata source (Crossref, PubMed, ...)
    routers/    - Dispatch: detect type -> engine -> template
    formatters/ - Citation template rendering
    detectors   - Identifier classification
    app         - Flask application
"""

__version__ = "1.0.0"
