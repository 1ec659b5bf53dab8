import pytest

from app.errors import DocumentStoreError, MetadataStoreError
from app.models.article import ArticleRecord, SummaryRecord
from app.services.persistence_service import PersistenceService
from tests.fakes import FakeArticleStore, FakeSummaryStore


@pytest.fixture
def records(article):
    return (
        SummaryRecord.from_article(article, "A summary.", "A خلاصہ."),
        ArticleRecord.from_article(article),
    )


def test_saves_summary_then_article_and_closes(records):
    summary_store, article_store = FakeSummaryStore(), FakeArticleStore()

    result = PersistenceService(summary_store, article_store).persist(*records)

    assert result == "inserted-id"
    assert summary_store.records == [records[0]]
    assert article_store.records == [records[1]]
    assert article_store.events == ["connect", "insert", "close"]


def test_metadata_failure_never_touches_document_store(records):
    summary_store = FakeSummaryStore(error=MetadataStoreError("table missing"))
    article_store = FakeArticleStore()

    with pytest.raises(MetadataStoreError):
        PersistenceService(summary_store, article_store).persist(*records)

    assert article_store.events == []


def test_unexpected_metadata_fault_is_reported_as_metadata_failure(records):
    summary_store = FakeSummaryStore(error=RuntimeError("boom"))
    article_store = FakeArticleStore()

    with pytest.raises(MetadataStoreError) as exc_info:
        PersistenceService(summary_store, article_store).persist(*records)

    assert "boom" in exc_info.value.details
    assert article_store.events == []


def test_document_insert_failure_still_closes_once(records):
    summary_store = FakeSummaryStore()
    article_store = FakeArticleStore(insert_error=RuntimeError("write concern"))

    with pytest.raises(DocumentStoreError):
        PersistenceService(summary_store, article_store).persist(*records)

    assert summary_store.records == [records[0]]
    assert article_store.events == ["connect", "insert", "close"]


def test_document_store_error_passes_through_unchanged(records):
    error = DocumentStoreError("duplicate key")
    article_store = FakeArticleStore(insert_error=error)

    with pytest.raises(DocumentStoreError) as exc_info:
        PersistenceService(FakeSummaryStore(), article_store).persist(*records)

    assert exc_info.value is error
    assert article_store.events.count("close") == 1


def test_close_failure_does_not_change_outcome(records):
    article_store = FakeArticleStore(close_error=RuntimeError("socket already closed"))

    result = PersistenceService(FakeSummaryStore(), article_store).persist(*records)

    assert result == "inserted-id"
    assert article_store.events == ["connect", "insert", "close"]


def test_close_failure_does_not_mask_insert_failure(records):
    article_store = FakeArticleStore(insert_error=RuntimeError("write"), close_error=RuntimeError("close"))

    with pytest.raises(DocumentStoreError):
        PersistenceService(FakeSummaryStore(), article_store).persist(*records)

    assert article_store.events == ["connect", "insert", "close"]


def test_connect_failure_is_document_failure(records):
    class UnreachableStore(FakeArticleStore):
        def connect(self):
            self.events.append("connect")
            raise ValueError("bad uri")

    article_store = UnreachableStore()

    with pytest.raises(DocumentStoreError):
        PersistenceService(FakeSummaryStore(), article_store).persist(*records)

    assert article_store.events == ["connect"]
