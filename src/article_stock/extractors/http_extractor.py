"""HTTP metadata extractor (httpx fetch + BeautifulSoup parse)."""

import time

import anyio
import httpx
import structlog

from article_stock.config.settings import DEFAULT_USER_AGENT, Settings
from article_stock.exceptions import (
    ExtractionConnectionError,
    ExtractionError,
    ExtractionHTTPError,
    ExtractionTimeoutError,
)
from article_stock.extractors.html_metadata import parse_metadata
from article_stock.models.metadata import ArticleMetadata

logger = structlog.get_logger(__name__)


class HttpMetadataExtractor:
    """
    Fetches an article page over HTTP and extracts its metadata.

    Each call is a single attempt bounded by ``timeout_seconds`` overall; no
    retries are performed and nothing is shared between calls except an
    optional caller-owned HTTP client. Every failure is raised as an
    ExtractionError.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the extractor.

        Args:
            timeout_seconds: Hard limit for fetching a page
            user_agent: User-Agent header sent with every request
            follow_redirects: Whether to follow HTTP redirects
            http_client: Shared HTTP client (optional, not closed by the extractor)
        """
        self._timeout = timeout_seconds
        self._user_agent = user_agent
        self._follow_redirects = follow_redirects
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> "HttpMetadataExtractor":
        """Create an extractor configured from application settings."""
        return cls(
            timeout_seconds=settings.extract_timeout_seconds,
            user_agent=settings.user_agent,
            follow_redirects=settings.follow_redirects,
            http_client=http_client,
        )

    @property
    def timeout_seconds(self) -> float:
        """Return the fetch timeout."""
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Get the shared HTTP client or create a fresh one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def extract(self, url: str) -> ArticleMetadata:
        """
        Fetch a page and extract its metadata.

        Args:
            url: Absolute URL of the article page

        Returns:
            ArticleMetadata for the page

        Raises:
            ExtractionError: If the page cannot be retrieved or parsed
        """
        start_time = time.monotonic()

        try:
            html = await self._fetch_html(url)
            metadata = await anyio.to_thread.run_sync(parse_metadata, html, url)
        except ExtractionError as e:
            logger.warning("extract_failed", url=url, reason=e.reason)
            raise
        except Exception as e:
            logger.exception("extract_error", url=url, error=str(e))
            raise ExtractionError(url, str(e) or type(e).__name__) from e

        logger.info(
            "extract_completed",
            url=url,
            title=metadata.title,
            elapsed_ms=round((time.monotonic() - start_time) * 1000, 1),
        )
        return metadata

    async def _fetch_html(self, url: str) -> str:
        """
        Fetch the raw HTML of a page.

        Raises:
            ExtractionTimeoutError: If the request does not finish in time
            ExtractionHTTPError: If the response status is not 2xx
            ExtractionConnectionError: For other transport failures
        """
        client = self._get_client()
        should_close = self._http_client is None

        logger.debug("fetch_started", url=url, timeout_seconds=self._timeout)
        try:
            with anyio.fail_after(self._timeout):
                response = await client.get(
                    url,
                    headers={"User-Agent": self._user_agent},
                    follow_redirects=self._follow_redirects,
                )
        except (TimeoutError, httpx.TimeoutException) as e:
            raise ExtractionTimeoutError(url, self._timeout) from e
        except httpx.RequestError as e:
            raise ExtractionConnectionError(url, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            raise ExtractionHTTPError(url, response.status_code)

        return response.text
