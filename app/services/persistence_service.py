import logging

from app.errors import DocumentStoreError, MetadataStoreError
from app.models.article import ArticleRecord, SummaryRecord

logger = logging.getLogger(__name__)


class PersistenceService:
    """
    Saves a scrape in two steps: the summary row first, then the full article.

    The article is only written once the summary is stored. The two writes are
    not atomic; if the article write fails the summary row stays in place.
    """

    def __init__(self, summary_store, article_store):
        self.summary_store = summary_store
        self.article_store = article_store

    def persist(self, summary_record: SummaryRecord, article_record: ArticleRecord):
        self._save_summary(summary_record)
        return self._save_article(article_record)

    def _save_summary(self, record: SummaryRecord):
        try:
            return self.summary_store.insert(record)
        except MetadataStoreError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error saving summary for {record.url}: {e}", exc_info=True)
            raise MetadataStoreError(f"Failed to save summary: {e}") from e

    def _save_article(self, record: ArticleRecord):
        try:
            client = self.article_store.connect()
        except DocumentStoreError:
            raise
        except Exception as e:
            logger.error(f"Could not open MongoDB connection: {e}", exc_info=True)
            raise DocumentStoreError(f"Failed to connect to MongoDB: {e}") from e

        try:
            return self.article_store.insert(client, record)
        except DocumentStoreError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error saving article {record.url}: {e}", exc_info=True)
            raise DocumentStoreError(f"Failed to save full article: {e}") from e
        finally:
            self._release(client)

    def _release(self, client):
        try:
            self.article_store.close(client)
        except Exception as e:
            # Never changes the outcome of the save
            logger.error(f"Error closing MongoDB connection: {e}")
