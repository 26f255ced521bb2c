"""
citebot/engines/crossref.py

Journal article metadata via the Crossref REST API.

Documentation: https://api.crossref.org/swagger-ui/index.html
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote, unquote

from citebot.config import CROSSREF_API_URL
from citebot.detectors import clean_doi
from citebot.engines.base import SearchEngine
from citebot.errors import UpstreamError
from citebot.models import CitationFields, TemplateType

logger = logging.getLogger(__name__)


class CrossrefEngine(SearchEngine):
    """
    Crossref works-by-DOI lookup.

    Accepts bare DOIs and doi.org / dx.doi.org URLs.
    """

    name = "Crossref"
    base_url = CROSSREF_API_URL

    def fetch(self, identifier: str) -> CitationFields:
        # doi.org URLs often arrive percent-encoded, e.g. SICI DOIs with %3C...%3E
        doi = unquote(clean_doi(identifier))
        logger.info("[%s] Fetching DOI: %s", self.name, doi)

        data = self._get_json(f"{self.base_url}/works/{quote(doi, safe='/')}")
        message = data.get('message') if isinstance(data, dict) else None
        if not isinstance(message, dict):
            raise UpstreamError(f"{self.name} returned no record for {doi}")

        return self._normalize(message, doi)

    def _normalize(self, item: Dict[str, Any], doi: str) -> CitationFields:
        fields = CitationFields(TemplateType.JOURNAL)
        fields.add_split_authors(self._authors(item.get('author') or []))
        fields.add('title', _first(item.get('title')))
        fields.add('journal', _first(item.get('container-title')))
        fields.add('year', self._created_year(item))
        fields.add('volume', item.get('volume'))
        fields.add('issue', item.get('issue'))
        fields.add('pages', item.get('page'))
        fields.add('doi', doi)
        return fields

    @staticmethod
    def _authors(authors: List[Dict[str, Any]]) -> List[Tuple[Optional[str], Optional[str]]]:
        # Organisational authors only carry `name`
        return [(a.get('family') or a.get('name'), a.get('given')) for a in authors]

    @staticmethod
    def _created_year(item: Dict[str, Any]) -> Optional[int]:
        date_parts = (item.get('created') or {}).get('date-parts') or []
        if date_parts and date_parts[0]:
            return date_parts[0][0]
        return None


def _first(values: Optional[List[str]]) -> Optional[str]:
    if values:
        return values[0]
    return None
