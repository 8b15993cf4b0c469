"""Utility modules for Article Stock."""

from article_stock.utils.cache import LRUCache, sweep_expired
from article_stock.utils.log_config import configure_logging

__all__ = [
    "LRUCache",
    "sweep_expired",
    "configure_logging",
]
