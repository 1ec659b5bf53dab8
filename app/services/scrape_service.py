import logging
import re
from urllib.parse import urlparse

from app.errors import (
    ConfigurationMissingError,
    ExtractionError,
    ExtractionTransportError,
    InvalidInputError,
    ScraperError,
)
from app.models.article import ArticleRecord, ScrapeResult, SummaryRecord
from app.utils.summarizer import summarize
from app.utils.text_normalizer import html_to_text
from app.utils.translator import translate

logger = logging.getLogger(__name__)

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def validate_url(url) -> str:
    """Returns url unchanged if it is a string holding an absolute URI."""
    if not url or not isinstance(url, str):
        raise InvalidInputError("A 'url' string is required")

    if any(ch.isspace() for ch in url):
        raise InvalidInputError(f"Not a valid absolute URL: {url}")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidInputError(f"Not a valid absolute URL: {url}") from e

    if not _SCHEME.match(parsed.scheme) or not (parsed.netloc or parsed.path):
        raise InvalidInputError(f"Not a valid absolute URL: {url}")
    return url


class ScrapeService:
    """
    Runs one scrape request end to end:
    validate, extract, summarize, translate, persist, respond.

    Every step runs after the previous one finished; the first failure ends
    the request with the matching ScraperError.
    """

    def __init__(self, config, extractor, persistence):
        self.config = config
        self.extractor = extractor
        self.persistence = persistence

    def scrape(self, payload) -> ScrapeResult:
        url = validate_url(payload.get('url') if isinstance(payload, dict) else None)
        logger.info(f"Scrape request validated for {url}")

        self._check_config()

        article = self._extract(url)
        text = html_to_text(article.content)

        summary = summarize(text)
        if not summary:
            logger.warning(f"No sentence qualified for the summary of {url}")
        translation = translate(summary)
        logger.info(f"Summarized {url}: {len(summary.split())} words")

        self.persistence.persist(
            SummaryRecord.from_article(article, summary, translation),
            ArticleRecord.from_article(article),
        )
        logger.info(f"Persisted summary and article for {url}")

        return ScrapeResult.from_article(article, summary, translation)

    def _check_config(self):
        missing = self.config.missing_settings()
        if missing:
            logger.error(f"Missing required configuration: {', '.join(missing)}")
            raise ConfigurationMissingError(f"Missing required configuration: {', '.join(missing)}")

    def _extract(self, url: str):
        try:
            article = self.extractor.extract(url)
        except ScraperError:
            raise
        except Exception as e:
            logger.error(f"Extractor failed for {url}: {e}", exc_info=True)
            raise ExtractionTransportError(str(e)) from e

        if not article or not article.content:
            raise ExtractionError(f"No article content found at {url}")
        logger.info(f"Extracted article '{article.title}' from {url}")
        return article
