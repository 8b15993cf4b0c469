"""Configuration for Article Stock."""

from article_stock.config.settings import DEFAULT_USER_AGENT, Settings

settings = Settings()

__all__ = ["DEFAULT_USER_AGENT", "Settings", "settings"]
