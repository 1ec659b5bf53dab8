from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

UNTITLED = "Untitled"
UNKNOWN = "Unknown"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Article(BaseModel):
    """Structured fields returned by the extractor for one page."""
    url: str
    content: str
    title: Optional[str] = None
    author: Optional[str] = None
    source: Optional[str] = None
    published: Optional[str] = None


class SummaryRecord(BaseModel):
    url: str
    title: str = UNTITLED
    summary: str
    translation: str
    created_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_article(cls, article: Article, summary: str, translation: str) -> "SummaryRecord":
        return cls(
            url=article.url,
            title=article.title or UNTITLED,
            summary=summary,
            translation=translation,
        )

    def to_row(self) -> dict:
        """Row for the metadata table; timestamps go over the wire as ISO-8601."""
        return self.model_dump(mode="json")


class ArticleRecord(BaseModel):
    url: str
    title: str = UNTITLED
    content: str
    author: Optional[str] = None
    source: Optional[str] = None
    published: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_article(cls, article: Article) -> "ArticleRecord":
        return cls(
            url=article.url,
            title=article.title or UNTITLED,
            content=article.content,
            author=article.author,
            source=article.source,
            published=article.published,
        )

    def to_document(self) -> dict:
        # pymongo stores datetime natively
        return self.model_dump()


class ScrapeResult(BaseModel):
    title: str
    summary: str
    translation: str = Field(serialization_alias="urduTranslation")
    author: str = UNKNOWN
    source: str = UNKNOWN
    published: str = UNKNOWN

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Example Blog Post",
                "summary": "This is the first post on the new blog.",
                "urduTranslation": "یہ ہے یہ پہلا پوسٹ پر یہ نیا بلاگ.",
                "author": "Jane Doe",
                "source": "example.com",
                "published": "2025-06-11T10:00:00Z",
            }
        }
    )

    @classmethod
    def from_article(cls, article: Article, summary: str, translation: str) -> "ScrapeResult":
        return cls(
            title=article.title or UNTITLED,
            summary=summary,
            translation=translation,
            author=article.author or UNKNOWN,
            source=article.source or UNKNOWN,
            published=article.published or UNKNOWN,
        )

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)
