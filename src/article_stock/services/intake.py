"""
Article intake: turning a submitted URL into a preview or a new article.

The create and preview endpoints run the same sequence: presence check, URL
validity, platform support, (create only) duplicate check, classification,
then metadata extraction. Each step short-circuits with an IntakeError that
carries the user-facing message and status code.
"""

from typing import Protocol

import structlog

from article_stock.exceptions import (
    ArticleCreateError,
    ArticlePreviewError,
    DuplicateArticleError,
    ExtractionError,
    InvalidURLError,
    MissingURLError,
    PlatformDetectionError,
    UnsupportedPlatformError,
)
from article_stock.extractors.base import MetadataExtractor
from article_stock.models.article import ArticleDraft, ArticlePreview
from article_stock.models.platform import Platform
from article_stock.platforms.classifier import classify, is_supported_platform, is_valid_url

logger = structlog.get_logger(__name__)


class DuplicateChecker(Protocol):
    """Looks up whether an article URL has already been stocked."""

    async def exists(self, url: str) -> bool:
        """Return True if an article with this URL already exists."""
        ...


class ArticleIntakeService:
    """Validates, classifies and extracts submitted article URLs."""

    def __init__(
        self,
        extractor: MetadataExtractor,
        duplicate_checker: DuplicateChecker | None = None,
    ) -> None:
        """
        Initialize the intake service.

        Args:
            extractor: Metadata extractor used for accepted URLs
            duplicate_checker: Existing-article lookup for create (optional)
        """
        self._extractor = extractor
        self._duplicate_checker = duplicate_checker

    def _check_url(self, url: object) -> str:
        if not isinstance(url, str) or not url.strip():
            raise MissingURLError()
        if not is_valid_url(url):
            raise InvalidURLError(url)
        if not is_supported_platform(url):
            raise UnsupportedPlatformError(url)
        return url

    @staticmethod
    def _classify(url: str) -> Platform:
        platform = classify(url)
        if platform is None:
            raise PlatformDetectionError(url)
        return platform

    def validate(self, url: object) -> tuple[str, Platform]:
        """
        Validate a submitted value and classify it.

        Args:
            url: Submitted value (any JSON value)

        Returns:
            The URL and its platform

        Raises:
            MissingURLError: If no URL string was submitted
            InvalidURLError: If the value is not a URL
            UnsupportedPlatformError: If the URL is not on a supported platform
            PlatformDetectionError: If the platform could not be determined
        """
        try:
            checked = self._check_url(url)
            return checked, self._classify(checked)
        except (MissingURLError, InvalidURLError, UnsupportedPlatformError, PlatformDetectionError) as e:
            logger.info("intake_rejected", url=url, reason=type(e).__name__)
            raise

    async def preview(self, url: object) -> ArticlePreview:
        """
        Build a preview of an article without stocking it.

        Raises:
            IntakeError: If validation fails (400) or metadata cannot be fetched (500)
        """
        checked, platform = self.validate(url)

        try:
            metadata = await self._extractor.extract(checked)
        except ExtractionError as e:
            logger.warning("preview_failed", url=checked, reason=e.reason)
            raise ArticlePreviewError(checked) from e

        return ArticlePreview.from_metadata(checked, platform, metadata)

    async def prepare(self, url: object) -> ArticleDraft:
        """
        Build the record for a new article.

        The duplicate check runs after the platform check and before
        classification, so a known article is rejected without a fetch.

        Raises:
            IntakeError: If validation fails (400), the article is already
                stocked (409) or metadata cannot be fetched (500)
        """
        try:
            checked = self._check_url(url)
        except (MissingURLError, InvalidURLError, UnsupportedPlatformError) as e:
            logger.info("intake_rejected", url=url, reason=type(e).__name__)
            raise

        if self._duplicate_checker is not None and await self._duplicate_checker.exists(checked):
            logger.info("intake_rejected", url=checked, reason="DuplicateArticleError")
            raise DuplicateArticleError(checked)

        try:
            platform = self._classify(checked)
        except PlatformDetectionError:
            logger.info("intake_rejected", url=checked, reason="PlatformDetectionError")
            raise

        try:
            metadata = await self._extractor.extract(checked)
        except ExtractionError as e:
            logger.warning("create_failed", url=checked, reason=e.reason)
            raise ArticleCreateError(checked) from e

        return ArticleDraft.from_metadata(checked, platform, metadata)
