"""Metadata extracted from an article page."""

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator

UNTITLED_PLACEHOLDER = "タイトルなし"


class ArticleMetadata(BaseModel):
    """
    Descriptive fields extracted from a remote article page.

    Built fresh for every extraction and never mutated afterwards. Optional
    fields are ``None`` when the page had no usable value, never an empty
    string.
    """

    title: str = UNTITLED_PLACEHOLDER
    description: str | None = None
    author: str | None = None
    published_at: datetime | None = None
    thumbnail: str | None = None
    content: str | None = None

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        """Trim the title and substitute the placeholder when blank."""
        if v is None:
            return UNTITLED_PLACEHOLDER
        stripped = str(v).strip()
        return stripped or UNTITLED_PLACEHOLDER

    @field_validator("description", "author", "thumbnail", "content", mode="before")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        """Trim optional text and collapse blank values to None."""
        if v is None:
            return None
        stripped = str(v).strip()
        return stripped or None

    @field_validator("published_at")
    @classmethod
    def validate_published_at(cls, v: datetime | None) -> datetime | None:
        """Ensure published_at is timezone-aware (naive values are UTC)."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
