"""Pydantic models for Article Stock."""

from article_stock.models.article import ArticleDraft, ArticlePreview
from article_stock.models.metadata import UNTITLED_PLACEHOLDER, ArticleMetadata
from article_stock.models.platform import Platform

__all__ = [
    "Platform",
    "ArticleMetadata",
    "UNTITLED_PLACEHOLDER",
    "ArticlePreview",
    "ArticleDraft",
]
