"""
HTML metadata parsing for article pages.

Every field is read through an ordered chain of sources. A source is a small
function that looks at the parsed document and returns a string or None; the
first source yielding a non-blank value wins. Sources used:

- title: og:title, twitter:title, <title>
- description: og:description, twitter:description, meta description
- author: meta author, article:author, [rel="author"] text
- thumbnail: og:image, twitter:image
- published date: article:published_time, publish_date, <time datetime>
- content: first paragraphs of the page
"""

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from article_stock.models.metadata import ArticleMetadata

Source = Callable[[BeautifulSoup], str | None]

CONTENT_PARAGRAPHS = 3

# Human-readable forms browsers also accept
DATE_FORMATS = (
    "%B %d, %Y",  # January 15, 2024
    "%b %d, %Y",  # Jan 15, 2024
    "%Y/%m/%d",  # 2024/01/15
    "%Y/%m/%d %H:%M:%S",  # 2024/01/15 10:00:00
    "%Y/%m/%d %H:%M",  # 2024/01/15 10:00
)


def attribute_of(selector: str, attribute: str) -> Source:
    """Build a source reading an attribute of the first element matching a CSS selector."""

    def source(soup: BeautifulSoup) -> str | None:
        tag = soup.select_one(selector)
        if tag is None:
            return None
        value = tag.get(attribute)
        return value if isinstance(value, str) else None

    return source


def text_of(selector: str) -> Source:
    """
    Build a source reading element text for a CSS selector.

    Matches without text (e.g. a <link rel="author"> in the head) are
    skipped, so the first element that actually carries text wins.
    """

    def source(soup: BeautifulSoup) -> str | None:
        for tag in soup.select(selector):
            text = tag.get_text()
            if text.strip():
                return text
        return None

    return source


TITLE_SOURCES: tuple[Source, ...] = (
    attribute_of('meta[property="og:title"]', "content"),
    attribute_of('meta[name="twitter:title"]', "content"),
    text_of("title"),
)

DESCRIPTION_SOURCES: tuple[Source, ...] = (
    attribute_of('meta[property="og:description"]', "content"),
    attribute_of('meta[name="twitter:description"]', "content"),
    attribute_of('meta[name="description"]', "content"),
)

AUTHOR_SOURCES: tuple[Source, ...] = (
    attribute_of('meta[name="author"]', "content"),
    attribute_of('meta[property="article:author"]', "content"),
    text_of('[rel="author"]'),
)

THUMBNAIL_SOURCES: tuple[Source, ...] = (
    attribute_of('meta[property="og:image"]', "content"),
    attribute_of('meta[name="twitter:image"]', "content"),
)

PUBLISHED_AT_SOURCES: tuple[Source, ...] = (
    attribute_of('meta[property="article:published_time"]', "content"),
    attribute_of('meta[name="publish_date"]', "content"),
    attribute_of("time[datetime]", "datetime"),
)


def first_value(soup: BeautifulSoup, sources: Sequence[Source]) -> str | None:
    """
    Run sources in order and return the first non-blank value.

    Args:
        soup: Parsed document
        sources: Ordered fallback chain

    Returns:
        Trimmed value, or None if no source produced one
    """
    for source in sources:
        value = source(soup)
        if value and value.strip():
            return value.strip()
    return None


def _parse_date_formats(value: str) -> datetime | None:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_published_at(value: str | None) -> datetime | None:
    """
    Parse a publish date string into a timezone-aware datetime.

    Accepts ISO 8601 (including a trailing 'Z'), RFC 2822 dates and the
    forms in DATE_FORMATS. Naive values are taken as UTC.

    Args:
        value: Raw date string

    Returns:
        Parsed datetime, or None if the string is not a recognizable date
    """
    if not value or not value.strip():
        return None

    candidate = value.strip()
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(candidate)
        except (TypeError, ValueError, IndexError):
            parsed = _parse_date_formats(candidate)
            if parsed is None:
                return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def extract_content(soup: BeautifulSoup, limit: int = CONTENT_PARAGRAPHS) -> str | None:
    """
    Build a short excerpt from the first paragraphs of the page.

    Args:
        soup: Parsed document
        limit: Number of leading <p> elements to read

    Returns:
        Non-blank paragraph texts joined by a blank line, or None
    """
    paragraphs = [p.get_text().strip() for p in soup.find_all("p", limit=limit)]
    content = "\n\n".join(text for text in paragraphs if text)
    return content or None


def parse_metadata(html: str, url: str) -> ArticleMetadata:
    """
    Extract article metadata from an HTML document.

    Args:
        html: Raw HTML of the page
        url: Page URL, used to resolve relative image URLs

    Returns:
        ArticleMetadata with every field that could be found
    """
    soup = BeautifulSoup(html, "html.parser")

    thumbnail = first_value(soup, THUMBNAIL_SOURCES)
    if thumbnail:
        thumbnail = urljoin(url, thumbnail)

    return ArticleMetadata(
        title=first_value(soup, TITLE_SOURCES),
        description=first_value(soup, DESCRIPTION_SOURCES),
        author=first_value(soup, AUTHOR_SOURCES),
        # Only the first date candidate is considered; a bad value is dropped
        published_at=parse_published_at(first_value(soup, PUBLISHED_AT_SOURCES)),
        thumbnail=thumbnail,
        content=extract_content(soup),
    )
