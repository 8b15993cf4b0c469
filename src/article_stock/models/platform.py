"""Supported content platforms."""

from enum import Enum


class Platform(str, Enum):
    """A content-hosting site the article stock understands."""

    TWITTER = "TWITTER"
    ZENN = "ZENN"
    QIITA = "QIITA"

    @property
    def display_name(self) -> str:
        """Human-readable platform name."""
        return _DISPLAY[self][0]

    @property
    def brand_color(self) -> str:
        """Hex brand color used when charting the platform."""
        return _DISPLAY[self][1]


_DISPLAY: dict[Platform, tuple[str, str]] = {
    Platform.TWITTER: ("Twitter", "#1DA1F2"),
    Platform.ZENN: ("Zenn", "#3EA8FF"),
    Platform.QIITA: ("Qiita", "#55C500"),
}
