"""
formatters/ - Output formatting for citation templates.

Modules:
    wiki.py - WikiTemplateFormatter for {{cite journal}}, {{cite book}}, {{cite web}}
"""

from citebot.formatters.wiki import WikiTemplateFormatter, format_citation

__all__ = [
    'WikiTemplateFormatter',
    'format_citation',
]
