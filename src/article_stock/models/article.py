"""Article records built from a classified URL and its metadata."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from article_stock.models.metadata import ArticleMetadata
from article_stock.models.platform import Platform


class ArticlePreview(BaseModel):
    """Article data shown to the user before it is stocked."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    title: str
    description: str | None = None
    url: str
    author: str | None = None
    platform: Platform
    published_at: datetime | None = None
    image_url: str | None = Field(default=None, description="Thumbnail of the article")

    @classmethod
    def from_metadata(
        cls, url: str, platform: Platform, metadata: ArticleMetadata
    ) -> "ArticlePreview":
        """Combine a classified URL with its extracted metadata."""
        return cls(
            title=metadata.title,
            description=metadata.description,
            url=url,
            author=metadata.author,
            platform=platform,
            published_at=metadata.published_at,
            image_url=metadata.thumbnail,
        )

    def to_response(self) -> dict[str, Any]:
        """Return the preview endpoint's JSON body (absent fields omitted)."""
        return {"article": self.model_dump(mode="json", by_alias=True, exclude_none=True)}


class ArticleDraft(BaseModel):
    """Every field the article-creation endpoint persists for a new article."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    description: str | None = None
    author: str | None = None
    published_at: datetime | None = None
    platform: Platform
    thumbnail: str | None = None
    content: str | None = None

    @classmethod
    def from_metadata(
        cls, url: str, platform: Platform, metadata: ArticleMetadata
    ) -> "ArticleDraft":
        """Combine a classified URL with its extracted metadata."""
        return cls(
            url=url,
            platform=platform,
            **metadata.model_dump(),
        )
