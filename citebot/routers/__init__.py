"""
routers/ - Decision logic for routing identifiers to engines.

Modules:
    unified.py  - Main routing: detect type -> engine -> format
"""

from citebot.routers.unified import get_citation, resolve_identifier

__all__ = [
    'get_citation',
    'resolve_identifier',
]
