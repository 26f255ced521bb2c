"""
citebot/engines/generic_url.py

Generic URL metadata extraction via HTML scraping.

Fetches the page and extracts metadata with fallback chains over:
1. Open Graph / article tags (og:title, og:site_name, og:url, article:author, ...)
2. Standard meta tags (name="author", name="date")
3. Page content: <title>, .author / .byline elements, <time datetime>

This is the fallback engine for any http(s) URL without a specialised source.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from datetime import datetime, timezone
from typing import Optional

import requests
from bs4 import BeautifulSoup

from citebot.config import WEB_TIMEOUT, WEB_USER_AGENT
from citebot.engines.base import SearchEngine
from citebot.errors import UpstreamError
from citebot.models import CitationFields, TemplateType

logger = logging.getLogger(__name__)


def utc_today() -> str:
    """Access date for web citations, YYYY-MM-DD in UTC."""
    return datetime.now(timezone.utc).strftime('%Y-%m-%d')


class GenericURLEngine(SearchEngine):
    """
    Generic web page metadata extractor.

    One GET and no retry. `timeout` caps the whole download, not just each
    socket read, so a page that trickles in slowly fails the lookup.
    """

    name = "Generic URL"

    def __init__(self, **kwargs):
        kwargs.setdefault('timeout', WEB_TIMEOUT)
        super().__init__(**kwargs)
        self.session.headers.update({
            'User-Agent': WEB_USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        })

    def fetch(self, identifier: str) -> CitationFields:
        url = identifier.strip()
        logger.info("[%s] Fetching: %s", self.name, url)

        deadline = time.monotonic() + self.timeout
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self._download, url, deadline)
        try:
            body = future.result(timeout=self.timeout)
        except FuturesTimeout:
            logger.warning("[%s] Timed out after %ss: %s", self.name, self.timeout, url)
            raise UpstreamError(f"{self.name} request timed out") from None
        finally:
            executor.shutdown(wait=False)

        # Raw bytes, so bs4 honours the page's own <meta charset>
        soup = BeautifulSoup(body, 'html.parser')
        return self._extract(soup, url)

    def _download(self, url: str, deadline: float) -> bytes:
        """Read the page body, giving up once the overall deadline passes."""
        response = self._make_request(url, stream=True)
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=1024):
                if time.monotonic() > deadline:
                    raise UpstreamError(f"{self.name} request timed out")
                chunks.append(chunk)
        except requests.RequestException as e:
            raise UpstreamError(f"{self.name} request failed: {e}") from e
        finally:
            response.close()
        return b''.join(chunks)

    def _extract(self, soup: BeautifulSoup, url: str) -> CitationFields:
        title = self._meta(soup, 'og:title') or self._title_tag(soup)
        site_name = self._meta(soup, 'og:site_name')
        page_url = self._meta(soup, 'og:url') or url

        author = (
            self._meta(soup, 'article:author')
            or self._meta(soup, 'author')
            or self._first_text(soup, '.author')
            or self._first_text(soup, '.byline')
        )

        date = (
            self._meta(soup, 'article:published_time')
            or self._meta(soup, 'date')
            or self._time_element(soup)
        )

        fields = CitationFields(TemplateType.WEB)
        fields.add('author', author)
        fields.add('title', title, required=True)
        fields.add('website', site_name)
        fields.add('url', page_url, required=True)
        fields.add('date', date[:10] if date else None)
        fields.add('access-date', utc_today(), required=True)
        return fields

    @staticmethod
    def _meta(soup: BeautifulSoup, key: str) -> str:
        """Content of <meta property=key> or, failing that, <meta name=key>."""
        for attr in ('property', 'name'):
            tag = soup.find('meta', attrs={attr: key})
            if tag and tag.get('content'):
                content = tag['content'].strip()
                if content:
                    return content
        return ''

    @staticmethod
    def _title_tag(soup: BeautifulSoup) -> str:
        if soup.title:
            return soup.title.get_text().strip()
        return ''

    @staticmethod
    def _first_text(soup: BeautifulSoup, selector: str) -> str:
        element = soup.select_one(selector)
        if element:
            return element.get_text().strip()
        return ''

    @staticmethod
    def _time_element(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.find('time')
        if tag and tag.get('datetime'):
            return tag['datetime'].strip()
        return None
