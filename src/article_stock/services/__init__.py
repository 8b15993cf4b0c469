"""Services built on the classification and extraction pipeline."""

from article_stock.services.intake import ArticleIntakeService, DuplicateChecker

__all__ = ["ArticleIntakeService", "DuplicateChecker"]
