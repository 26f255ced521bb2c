"""
citebot/engines/pubmed.py

PubMed article metadata via NCBI E-utilities (esummary, JSON mode).

Documentation: https://www.ncbi.nlm.nih.gov/books/NBK25499/
"""

import logging
import re
from typing import Any, Dict, Optional

from citebot.config import PUBMED_API_KEY, PUBMED_API_URL
from citebot.detectors import clean_pmid
from citebot.engines.base import SearchEngine
from citebot.errors import NotFoundError
from citebot.models import CitationFields, TemplateType

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r'\d{4}')
ELOCATION_DOI_PATTERN = re.compile(r'doi:\s*(\S+)')


class PubMedEngine(SearchEngine):
    """PubMed summary lookup by PMID."""

    name = "PubMed"
    base_url = PUBMED_API_URL

    def __init__(self, api_key: str = PUBMED_API_KEY, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    def fetch(self, identifier: str) -> CitationFields:
        pmid = clean_pmid(identifier)
        logger.info("[%s] Fetching PMID: %s", self.name, pmid)

        params = {'db': 'pubmed', 'id': pmid, 'retmode': 'json'}
        if self.api_key:
            params['api_key'] = self.api_key

        data = self._get_json(f"{self.base_url}/esummary.fcgi", params=params)
        result = (data.get('result') or {}) if isinstance(data, dict) else {}
        record = result.get(pmid)

        # Unknown ids come back either missing or as {"uid": ..., "error": ...}
        if not record or record.get('error'):
            raise NotFoundError("PMID not found")

        return self._normalize(record, pmid)

    def _normalize(self, record: Dict[str, Any], pmid: str) -> CitationFields:
        fields = CitationFields(TemplateType.JOURNAL)
        fields.add_authors(a.get('name') for a in record.get('authors') or [])
        fields.add('title', record.get('title'))
        fields.add('journal', record.get('source'))
        fields.add('year', self._year(record.get('pubdate') or ''))
        fields.add('volume', record.get('volume'))
        fields.add('issue', record.get('issue'))
        fields.add('pages', record.get('pages'))
        fields.add('doi', self._doi(record))
        fields.add('pmid', pmid, required=True)
        return fields

    @staticmethod
    def _year(pubdate: str) -> Optional[str]:
        # pubdate looks like "2020 Sep" or "2019 Dec 12"
        match = YEAR_PATTERN.search(pubdate)
        return match.group() if match else None

    @staticmethod
    def _doi(record: Dict[str, Any]) -> Optional[str]:
        """
        DOI from `elocationid`, e.g. "doi: 10.1038/s41586-020-2649-2".

        elocationid may hold only a pii, in which case the `articleids`
        list is checked instead.
        """
        elocation = (record.get('elocationid') or '').strip()
        match = ELOCATION_DOI_PATTERN.search(elocation)
        if match:
            return match.group(1)
        if elocation.startswith('10.'):
            return elocation

        for article_id in record.get('articleids') or []:
            if article_id.get('idtype') == 'doi' and article_id.get('value'):
                return article_id['value']
        return None
