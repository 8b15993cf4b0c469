"""Unit tests for URL validation and platform classification."""

import pytest

from article_stock.models.platform import Platform
from article_stock.platforms.classifier import (
    SUPPORTED_DOMAINS,
    classify,
    detect_platform,
    is_supported_platform,
    is_valid_url,
    normalize_hostname,
)


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://twitter.com/user/status/1", Platform.TWITTER),
            ("https://www.twitter.com/user/status/1", Platform.TWITTER),
            ("https://x.com/user/status/1", Platform.TWITTER),
            ("https://www.x.com/user/status/1", Platform.TWITTER),
            ("https://zenn.dev/taro/articles/abc", Platform.ZENN),
            ("https://www.zenn.dev/taro/articles/abc", Platform.ZENN),
            ("https://qiita.com/taro/items/123", Platform.QIITA),
            ("https://www.qiita.com/taro/items/123", Platform.QIITA),
        ],
    )
    def test_supported_domains(self, url, expected):
        assert classify(url) is expected

    def test_hostname_is_case_insensitive(self):
        assert classify("https://WWW.Zenn.DEV/taro/articles/abc") is Platform.ZENN
        assert classify("HTTPS://X.COM/user") is Platform.TWITTER

    def test_port_and_query_do_not_matter(self):
        assert classify("https://qiita.com:443/items/1?utm_source=x#top") is Platform.QIITA

    @pytest.mark.parametrize(
        "url",
        [
            "https://medium.com/@user/post",
            "https://dev.to/user/post",
            "https://example.com",
            "https://blog.zenn.dev/post",
            "https://qiita.com.evil.example/items/1",
            "https://wwwx.com/user",
        ],
    )
    def test_unsupported_domains_return_none(self, url):
        assert classify(url) is None
        assert is_supported_platform(url) is False

    @pytest.mark.parametrize("url", ["", "   ", "not-a-url", "zenn.dev/taro", "https://", None, 42])
    def test_malformed_input_returns_none(self, url):
        assert classify(url) is None

    def test_only_one_www_prefix_is_stripped(self):
        assert classify("https://www.www.zenn.dev/a") is None

    def test_classify_is_repeatable(self):
        url = "https://x.com/user/status/1"
        assert classify(url) is classify(url)

    def test_detect_platform_alias(self):
        assert detect_platform is classify


class TestIsValidUrl:
    """Tests for is_valid_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://example.com/path?q=1",
            "ftp://example.com",
            "mailto:someone@example.com",
            "  https://zenn.dev/taro  ",
        ],
    )
    def test_valid_urls(self, url):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not-a-url",
            "example.com",
            "https://",
            "http:///path-only",
            "https://exa mple.com",
            "https://example.com:99999",
            "http://[::1",
        ],
    )
    def test_invalid_urls(self, url):
        assert is_valid_url(url) is False

    def test_ftp_is_valid_but_unsupported(self):
        assert is_valid_url("ftp://example.com") is True
        assert is_supported_platform("ftp://example.com") is False


class TestNormalizeHostname:
    """Tests for normalize_hostname."""

    def test_strips_www_and_lowercases(self):
        assert normalize_hostname("https://WWW.Qiita.com/items") == "qiita.com"

    def test_unparseable_returns_none(self):
        assert normalize_hostname("not-a-url") is None

    def test_url_without_host_returns_none(self):
        assert normalize_hostname("mailto:someone@example.com") is None


def test_supported_domains_table_is_read_only():
    assert set(SUPPORTED_DOMAINS) == {"twitter.com", "x.com", "zenn.dev", "qiita.com"}
    with pytest.raises(TypeError):
        SUPPORTED_DOMAINS["medium.com"] = Platform.ZENN  # type: ignore[index]
