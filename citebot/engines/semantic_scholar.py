"""
citebot/engines/semantic_scholar.py

Paper metadata via the Semantic Scholar Graph API.

Documentation: https://api.semanticscholar.org/api-docs/graph
"""

import logging
from typing import Any, Dict

from citebot.config import SEMANTIC_SCHOLAR_API_KEY, SEMANTIC_SCHOLAR_API_URL
from citebot.detectors import clean_s2cid
from citebot.engines.base import SearchEngine
from citebot.errors import NotFoundError
from citebot.models import CitationFields, TemplateType

logger = logging.getLogger(__name__)

PAPER_FIELDS = 'title,authors,year,venue,externalIds'


class SemanticScholarEngine(SearchEngine):
    """
    Semantic Scholar lookup by corpus id (S2CID).

    The venue is always cited as `journal`, conference papers included.
    """

    name = "Semantic Scholar"
    base_url = SEMANTIC_SCHOLAR_API_URL

    def __init__(self, api_key: str = SEMANTIC_SCHOLAR_API_KEY, **kwargs):
        super().__init__(**kwargs)
        if api_key:
            self.session.headers['x-api-key'] = api_key

    def fetch(self, identifier: str) -> CitationFields:
        corpus_id = clean_s2cid(identifier)
        logger.info("[%s] Fetching S2CID: %s", self.name, corpus_id)

        data = self._get_json(
            f"{self.base_url}/paper/S2CID:{corpus_id}",
            params={'fields': PAPER_FIELDS},
        )
        if not data:
            raise NotFoundError("S2CID not found")

        return self._normalize(data, corpus_id)

    def _normalize(self, paper: Dict[str, Any], corpus_id: str) -> CitationFields:
        external_ids = paper.get('externalIds') or {}

        fields = CitationFields(TemplateType.JOURNAL)
        fields.add_authors(a.get('name') for a in paper.get('authors') or [])
        fields.add('title', paper.get('title'))
        fields.add('journal', paper.get('venue'))
        fields.add('year', paper.get('year'))
        fields.add('doi', external_ids.get('DOI'))
        fields.add('s2cid', corpus_id, required=True)
        return fields
