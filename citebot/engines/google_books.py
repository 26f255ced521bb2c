"""
citebot/engines/google_books.py

Book metadata via the Google Books volumes API.

Takes a books.google.* URL, pulls the volume id from its `id` query
parameter, and looks the volume up.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, quote, urlparse

from citebot.config import GOOGLE_BOOKS_API_KEY, GOOGLE_BOOKS_API_URL
from citebot.engines.base import SearchEngine
from citebot.errors import InvalidIdentifierError, UpstreamError
from citebot.models import CitationFields, TemplateType

logger = logging.getLogger(__name__)


class GoogleBooksEngine(SearchEngine):
    """Google Books volume lookup by URL."""

    name = "Google Books"
    base_url = GOOGLE_BOOKS_API_URL

    def __init__(self, api_key: str = GOOGLE_BOOKS_API_KEY, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    def fetch(self, identifier: str) -> CitationFields:
        url = identifier.strip()
        volume_id = self.extract_volume_id(url)
        if not volume_id:
            raise InvalidIdentifierError("Could not extract Google Books ID from URL")

        logger.info("[%s] Fetching volume: %s", self.name, volume_id)

        params = {'key': self.api_key} if self.api_key else None
        data = self._get_json(f"{self.base_url}/volumes/{quote(volume_id)}", params=params)
        info = data.get('volumeInfo') if isinstance(data, dict) else None
        if not isinstance(info, dict):
            raise UpstreamError(f"{self.name} returned no volume info for {volume_id}")

        return self._normalize(info, url)

    @staticmethod
    def extract_volume_id(url: str) -> Optional[str]:
        values = parse_qs(urlparse(url).query).get('id')
        return values[0] if values else None

    def _normalize(self, info: Dict[str, Any], url: str) -> CitationFields:
        published = info.get('publishedDate') or ''

        fields = CitationFields(TemplateType.BOOK)
        fields.add_authors(info.get('authors') or [])
        fields.add('title', info.get('title'))
        fields.add('year', published[:4])
        fields.add('publisher', info.get('publisher'))
        fields.add('isbn', self._isbn(info.get('industryIdentifiers') or []))
        fields.add('url', url, required=True)
        return fields

    @staticmethod
    def _isbn(identifiers: List[Dict[str, str]]) -> Optional[str]:
        by_type = {i.get('type'): i.get('identifier') for i in identifiers}
        return by_type.get('ISBN_13') or by_type.get('ISBN_10')
