"""Article Stock: platform classification and metadata extraction for submitted article URLs."""

from article_stock.exceptions import ExtractionError, IntakeError
from article_stock.extractors import CachingMetadataExtractor, HttpMetadataExtractor
from article_stock.models import ArticleDraft, ArticleMetadata, ArticlePreview, Platform
from article_stock.platforms import classify, is_supported_platform, is_valid_url
from article_stock.services import ArticleIntakeService

__version__ = "0.1.0"

__all__ = [
    "Platform",
    "ArticleMetadata",
    "ArticlePreview",
    "ArticleDraft",
    "classify",
    "is_valid_url",
    "is_supported_platform",
    "HttpMetadataExtractor",
    "CachingMetadataExtractor",
    "ArticleIntakeService",
    "ExtractionError",
    "IntakeError",
]
