"""Base protocol for metadata extractors."""

from typing import Protocol, runtime_checkable

from article_stock.models.metadata import ArticleMetadata


@runtime_checkable
class MetadataExtractor(Protocol):
    """
    Protocol for metadata extractors.

    Any class with a matching ``extract`` coroutine can be used where an
    extractor is expected, which lets callers wrap extractors (for example
    with a cache) or substitute fakes in tests.
    """

    async def extract(self, url: str) -> ArticleMetadata:
        """
        Fetch a page and extract its descriptive metadata.

        Args:
            url: Absolute URL of the article page

        Returns:
            ArticleMetadata for the page

        Raises:
            ExtractionError: If the page cannot be retrieved or parsed
        """
        ...
