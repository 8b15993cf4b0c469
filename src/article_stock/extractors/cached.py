"""Caching wrapper around a metadata extractor."""

import anyio
import structlog
from anyio.abc import TaskGroup

from article_stock.config.settings import Settings
from article_stock.extractors.base import MetadataExtractor
from article_stock.models.metadata import ArticleMetadata
from article_stock.utils.cache import LRUCache, sweep_expired

logger = structlog.get_logger(__name__)


class CachingMetadataExtractor:
    """
    Memoizes extraction results per URL.

    The wrapped extractor stays stateless; only successful results are
    stored, so a failed URL is fetched again on the next call.

    Used as an async context manager, it also runs a background task that
    drops expired entries every ``sweep_interval_seconds``.
    """

    def __init__(
        self,
        extractor: MetadataExtractor,
        ttl_seconds: float = 300,
        max_size: int = 1000,
        enabled: bool = True,
        sweep_interval_seconds: float | None = 300,
    ) -> None:
        self._extractor = extractor
        self.enabled = enabled
        self.sweep_interval_seconds = sweep_interval_seconds
        self._task_group: TaskGroup | None = None
        self._cache: LRUCache[ArticleMetadata] = LRUCache(
            max_size=max_size,
            ttl_seconds=float(ttl_seconds),
        )

    @classmethod
    def from_settings(
        cls, extractor: MetadataExtractor, settings: Settings
    ) -> "CachingMetadataExtractor":
        """Wrap an extractor using the cache settings."""
        return cls(
            extractor,
            ttl_seconds=settings.cache_ttl_seconds,
            max_size=settings.cache_max_size,
            enabled=settings.cache_enabled,
            sweep_interval_seconds=settings.cache_sweep_interval_seconds,
        )

    async def __aenter__(self) -> "CachingMetadataExtractor":
        if self.enabled and self.sweep_interval_seconds:
            self._task_group = anyio.create_task_group()
            await self._task_group.__aenter__()
            self._task_group.start_soon(sweep_expired, self._cache, self.sweep_interval_seconds)
            logger.debug("cache_sweeper_started", interval_seconds=self.sweep_interval_seconds)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._task_group is None:
            return
        task_group, self._task_group = self._task_group, None
        task_group.cancel_scope.cancel()
        await task_group.__aexit__(None, None, None)
        logger.debug("cache_sweeper_stopped")

    @property
    def sweeping(self) -> bool:
        """Return True while the background sweep task is running."""
        return self._task_group is not None

    @property
    def cache(self) -> LRUCache[ArticleMetadata]:
        """Return the underlying cache."""
        return self._cache

    async def extract(self, url: str) -> ArticleMetadata:
        """Return cached metadata for the URL, extracting it on a miss."""
        if not self.enabled:
            return await self._extractor.extract(url)

        key = url.strip()
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug("metadata_cache_hit", url=key)
            return cached

        logger.debug("metadata_cache_miss", url=key)
        metadata = await self._extractor.extract(url)
        await self._cache.set(key, metadata)
        return metadata
