import logging
from datetime import datetime, timezone
from typing import Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from supabase import create_client, Client

from app.errors import DocumentStoreError, MetadataStoreError
from app.models.article import ArticleRecord, SummaryRecord

logger = logging.getLogger(__name__)


class SupabaseSummaryStore:
    """Metadata store: one row per scraped URL in a Supabase table."""

    def __init__(self, url: str, key: str, table: str = 'summaries'):
        self.url = url
        self.key = key
        self.table = table
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        # Created on first use, then reused for the life of the process
        if self._client is None:
            self._client = create_client(self.url, self.key)
            logger.info(f"Supabase client created for {self.url}")
        return self._client

    def insert(self, record: SummaryRecord):
        record.created_at = datetime.now(timezone.utc)
        try:
            response = self.client.table(self.table).insert(record.to_row()).execute()
        except Exception as e:
            logger.error(f"Supabase error inserting summary for {record.url}: {e}")
            raise MetadataStoreError(f"Failed to save summary: {e}") from e

        logger.info(f"Stored summary for {record.url} in table '{self.table}'")
        return response


class MongoArticleStore:
    """Document store: full article documents in a MongoDB collection."""

    def __init__(self, uri: str, database: str = 'blog_scraper', collection: str = 'articles',
                 timeout_ms: int = 5000):
        self.uri = uri
        self.database = database
        self.collection = collection
        self.timeout_ms = timeout_ms

    def connect(self) -> MongoClient:
        """Open a new client; the caller owns it and must close() it."""
        try:
            return MongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                connectTimeoutMS=self.timeout_ms,
            )
        except PyMongoError as e:
            logger.error(f"Failed to create MongoDB client: {e}")
            raise DocumentStoreError(f"Failed to connect to MongoDB: {e}") from e

    def insert(self, client: MongoClient, record: ArticleRecord):
        record.created_at = datetime.now(timezone.utc)
        try:
            result = client[self.database][self.collection].insert_one(record.to_document())
        except PyMongoError as e:
            logger.error(f"MongoDB error storing article {record.url}: {e}")
            raise DocumentStoreError(f"Failed to save full article: {e}") from e

        logger.info(f"Stored article {record.url} in MongoDB ({result.inserted_id})")
        return result.inserted_id

    def close(self, client: MongoClient):
        client.close()

    def ping(self) -> bool:
        """Health check helper; opens and closes its own client."""
        client = self.connect()
        try:
            client.admin.command('ping')
            return True
        finally:
            client.close()
