"""
URL validation and platform classification.

Everything here is pure string/URL parsing: no network access, no shared
state, and no exceptions escape for any input.
"""

from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import SplitResult, urlsplit

from article_stock.models.platform import Platform

# Domain keys do NOT include the 'www.' prefix
SUPPORTED_DOMAINS: Mapping[str, Platform] = MappingProxyType(
    {
        "twitter.com": Platform.TWITTER,
        "x.com": Platform.TWITTER,
        "zenn.dev": Platform.ZENN,
        "qiita.com": Platform.QIITA,
    }
)

# Schemes that are meaningless without a host ("https://" alone is not a URL)
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def _parse_url(url: object) -> SplitResult | None:
    """
    Parse a string as an absolute URL.

    Args:
        url: Candidate URL (any object)

    Returns:
        The split URL, or None if the value is not a URL with an explicit scheme
    """
    if not isinstance(url, str):
        return None

    candidate = url.strip()
    if not candidate:
        return None

    try:
        parsed = urlsplit(candidate)
        # Accessing port validates it (raises ValueError when out of range)
        parsed.port
    except ValueError:
        return None

    if not parsed.scheme:
        return None
    if parsed.scheme.lower() in _HOST_REQUIRED_SCHEMES and not parsed.hostname:
        return None
    if any(ch.isspace() for ch in parsed.netloc):
        return None

    return parsed


def is_valid_url(url: str) -> bool:
    """
    Check whether a string is a syntactically valid absolute URL.

    Any scheme is accepted (``ftp://example.com`` is valid); a scheme-less
    string such as ``example.com`` is not.
    """
    return _parse_url(url) is not None


def normalize_hostname(url: str) -> str | None:
    """
    Extract the lookup domain of a URL.

    Args:
        url: Candidate URL

    Returns:
        Lower-cased hostname without a leading 'www.', or None if unparseable
    """
    parsed = _parse_url(url)
    if parsed is None or not parsed.hostname:
        return None

    domain = parsed.hostname.lower()
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def classify(url: str) -> Platform | None:
    """
    Map a URL to the platform hosting it.

    Args:
        url: Any string

    Returns:
        The matching Platform, or None for unparseable or unsupported URLs
    """
    domain = normalize_hostname(url)
    if domain is None:
        return None
    return SUPPORTED_DOMAINS.get(domain)


detect_platform = classify


def is_supported_platform(url: str) -> bool:
    """Check whether a URL belongs to a supported platform."""
    return classify(url) is not None
