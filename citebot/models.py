"""
citebot/models.py

Data structures shared by detectors, engines, and formatters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


class IdentifierType(Enum):
    """Kinds of input the classifier can recognise."""
    DOI = 'doi'
    DOI_URL = 'doi_url'
    PMID = 'pmid'
    S2CID = 's2cid'
    GOOGLE_BOOKS = 'google_books'
    WEB_URL = 'web_url'
    UNKNOWN = 'unknown'


class TemplateType(Enum):
    """Wiki citation template names."""
    JOURNAL = 'cite journal'
    BOOK = 'cite book'
    WEB = 'cite web'


@dataclass
class CitationField:
    """One `key=value` entry of a citation template."""
    key: str
    value: Optional[Any] = None
    required: bool = False

    @property
    def text(self) -> str:
        if self.value is None:
            return ''
        return str(self.value).strip()

    def is_rendered(self) -> bool:
        """Optional fields with no text are left out of the template."""
        return self.required or bool(self.text)


@dataclass
class CitationFields:
    """
    Ordered field list extracted from a single source response.

    Order of insertion is the order of output. Values are kept raw; the
    formatter decides what gets rendered.
    """
    template_type: TemplateType
    fields: List[CitationField] = field(default_factory=list)

    def add(self, key: str, value: Optional[Any], required: bool = False) -> 'CitationFields':
        self.fields.append(CitationField(key, value, required))
        return self

    def add_authors(self, names: Iterable[Optional[str]]) -> 'CitationFields':
        """Add `author1`, `author2`, ... skipping blank names."""
        number = 0
        for name in names:
            if not name or not str(name).strip():
                continue
            number += 1
            self.add(f'author{number}', name)
        return self

    def add_split_authors(self, names: Iterable[Tuple[Optional[str], Optional[str]]]) -> 'CitationFields':
        """Add `lastN`/`firstN` pairs from (family, given) tuples."""
        number = 0
        for last, first in names:
            if not last and not first:
                continue
            number += 1
            self.add(f'last{number}', last)
            self.add(f'first{number}', first)
        return self

    def get(self, key: str) -> Optional[str]:
        for entry in self.fields:
            if entry.key == key:
                return entry.text
        return None

    def keys(self) -> List[str]:
        """Keys that will appear in the rendered template."""
        return [entry.key for entry in self.fields if entry.is_rendered()]

    def to_dict(self) -> Dict[str, str]:
        return {entry.key: entry.text for entry in self.fields if entry.is_rendered()}
