import pytest

from app import create_app
from app.models.article import Article
from tests.fakes import ARTICLE_HTML, FakeArticleStore, FakeExtractor, FakeSummaryStore, ScraperSettings


@pytest.fixture
def article():
    return Article(
        url="https://x.test/a",
        title="A post",
        content=ARTICLE_HTML,
        author="Jane Doe",
        source="x.test",
        published="2025-06-11T10:00:00",
    )


@pytest.fixture
def extractor(article):
    return FakeExtractor(article=article)


@pytest.fixture
def summary_store():
    return FakeSummaryStore()


@pytest.fixture
def article_store():
    return FakeArticleStore()


@pytest.fixture
def app(extractor, summary_store, article_store):
    return create_app(ScraperSettings, extractor=extractor, summary_store=summary_store, article_store=article_store)


@pytest.fixture
def client(app):
    return app.test_client()
