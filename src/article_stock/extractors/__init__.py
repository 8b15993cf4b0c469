"""Metadata extractors for article pages."""

from article_stock.extractors.base import MetadataExtractor
from article_stock.extractors.cached import CachingMetadataExtractor
from article_stock.extractors.html_metadata import parse_metadata
from article_stock.extractors.http_extractor import HttpMetadataExtractor

__all__ = [
    "MetadataExtractor",
    "HttpMetadataExtractor",
    "CachingMetadataExtractor",
    "parse_metadata",
]
