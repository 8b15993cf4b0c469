"""Platform classification for submitted URLs."""

from article_stock.platforms.classifier import (
    SUPPORTED_DOMAINS,
    classify,
    detect_platform,
    is_supported_platform,
    is_valid_url,
    normalize_hostname,
)

__all__ = [
    "SUPPORTED_DOMAINS",
    "classify",
    "detect_platform",
    "is_supported_platform",
    "is_valid_url",
    "normalize_hostname",
]
