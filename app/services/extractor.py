import logging
from typing import Optional
from urllib.parse import urlparse

from newspaper import Article as NewspaperArticle
from newspaper.article import ArticleException

from app.errors import ExtractionTransportError
from app.models.article import Article

logger = logging.getLogger(__name__)


class NewspaperExtractor:
    """Fetches a page and pulls out the article with newspaper3k."""

    def __init__(self, request_timeout: int = 10):
        self.request_timeout = request_timeout

    def extract(self, url: str) -> Optional[Article]:
        """
        Returns the article found at url, or None when the page was fetched
        but holds no article content. Network and parser faults raise
        ExtractionTransportError.
        """
        try:
            page = NewspaperArticle(url, keep_article_html=True, request_timeout=self.request_timeout)
            page.download()
            page.parse()
        except ArticleException as e:
            logger.error(f"Error downloading {url}: {e}")
            raise ExtractionTransportError(str(e)) from e
        except Exception as e:
            logger.error(f"Error extracting content from {url}: {e}", exc_info=True)
            raise ExtractionTransportError(str(e)) from e

        content = page.article_html or page.text
        if not content:
            logger.warning(f"No article content found at {url}")
            return None

        return Article(
            url=url,
            title=page.title or None,
            content=content,
            author=", ".join(page.authors) if page.authors else None,
            source=self._source_name(page),
            published=page.publish_date.isoformat() if page.publish_date else None,
        )

    @staticmethod
    def _source_name(page) -> Optional[str]:
        if getattr(page, 'meta_site_name', None):
            return page.meta_site_name
        netloc = urlparse(page.url or '').netloc
        return netloc.replace('www.', '') or None
