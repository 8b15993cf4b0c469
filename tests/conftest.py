"""Shared test fixtures for the Article Stock test suite."""

from typing import Any

import pytest
import respx

from article_stock.models.metadata import ArticleMetadata

# ─── Pytest Configuration ────────────────────────────────────────


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no I/O)")
    config.addinivalue_line("markers", "integration: Integration tests")


# ─── Async Backend ───────────────────────────────────────────────


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


# ─── Settings Fixtures ───────────────────────────────────────────


@pytest.fixture
def test_settings():
    """Settings with a short timeout and caching disabled."""
    from article_stock.config import Settings

    return Settings(
        debug=True,
        log_level="DEBUG",
        extract_timeout_seconds=2.0,
        cache_enabled=False,
    )


# ─── HTTP Fixtures ───────────────────────────────────────────────


@pytest.fixture
def mock_http():
    """RESPX mock router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


# ─── Fakes ───────────────────────────────────────────────────────


class FakeExtractor:
    """Extractor returning canned metadata (or raising) and recording calls."""

    def __init__(self, metadata: ArticleMetadata | None = None, error: Exception | None = None) -> None:
        self.metadata = metadata or ArticleMetadata(title="Fake title")
        self.error = error
        self.calls: list[str] = []

    async def extract(self, url: str) -> ArticleMetadata:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.metadata


@pytest.fixture
def make_extractor() -> type[FakeExtractor]:
    """Factory for fake extractors with custom metadata or errors."""
    return FakeExtractor


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    """Extractor that returns fixed metadata without any I/O."""
    return FakeExtractor(
        ArticleMetadata(
            title="Python の型ヒント入門",
            description="型ヒントの基本をまとめました",
            author="taro",
            thumbnail="https://res.cloudinary.com/zenn/image/upload/og.png",
            content="最初の段落",
        )
    )


# ─── Sample Data Fixtures ────────────────────────────────────────


@pytest.fixture
def zenn_article_url() -> str:
    return "https://zenn.dev/taro/articles/python-type-hints"


@pytest.fixture
def full_article_html() -> str:
    """Article page carrying Open Graph, Twitter-card and standard tags."""
    return """
    <!DOCTYPE html>
    <html lang="ja">
    <head>
        <meta charset="UTF-8">
        <title>Fallback Title | Zenn</title>
        <meta property="og:title" content="  Python の型ヒント入門  ">
        <meta name="twitter:title" content="Twitter Title">
        <meta property="og:description" content="型ヒントの基本をまとめました">
        <meta name="description" content="Plain description">
        <meta name="author" content="taro">
        <meta property="og:image" content="https://res.cloudinary.com/zenn/image/upload/og.png">
        <meta property="article:published_time" content="2024-03-01T09:30:00+09:00">
    </head>
    <body>
        <article>
            <p>最初の段落</p>
            <p>  二番目の段落  </p>
            <p>三番目の段落</p>
            <p>四番目の段落</p>
        </article>
    </body>
    </html>
    """


@pytest.fixture
def og_title_only_html() -> str:
    """Page whose only relevant tag is og:title."""
    return '<html><head><meta property="og:title" content="Example"></head><body></body></html>'
