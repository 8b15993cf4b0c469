"""Custom exceptions for Article Stock."""

from typing import Any

EXTRACTION_FAILED_MESSAGE = "メタデータの取得に失敗しました"


class ArticleStockError(Exception):
    """Base exception for all Article Stock errors."""

    pass


# ─── Extraction Errors ───────────────────────────────────────────


class ExtractionError(ArticleStockError):
    """
    Raised when a remote document cannot be retrieved or parsed.

    Every fetch or parse failure collapses into this kind. ``reason`` holds
    the technical detail for logs, ``user_message`` the text shown to users.
    """

    user_message = EXTRACTION_FAILED_MESSAGE

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"[{url}] {reason}")


class ExtractionTimeoutError(ExtractionError):
    """Raised when fetching a document exceeds the configured timeout."""

    def __init__(self, url: str, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(url, f"Fetch timed out after {timeout_seconds}s")


class ExtractionHTTPError(ExtractionError):
    """Raised when the remote server answers with a non-2xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(url, f"HTTP error! status: {status_code}")


class ExtractionConnectionError(ExtractionError):
    """Raised when the request fails at the transport level."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"Connection failed: {reason}")


# ─── Intake Errors ───────────────────────────────────────────────


class IntakeError(ArticleStockError):
    """
    Base exception for rejected article submissions.

    Carries the user-facing message and the HTTP status an endpoint should
    answer with.
    """

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> dict[str, Any]:
        """Return the JSON body an endpoint sends for this error."""
        return {"error": self.message}


class MissingURLError(IntakeError):
    """Raised when no URL string was submitted."""

    def __init__(self) -> None:
        super().__init__("URLが必要です")


class InvalidURLError(IntakeError):
    """Raised when the submitted value does not parse as a URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("有効なURLを入力してください")


class UnsupportedPlatformError(IntakeError):
    """Raised when the URL is not on a supported platform."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            "サポートされていないプラットフォームです（Twitter、Zenn、Qiitaのみ対応）"
        )


class PlatformDetectionError(IntakeError):
    """Raised when a supported URL could not be mapped to a platform."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("プラットフォームの判別に失敗しました")


class DuplicateArticleError(IntakeError):
    """Raised when the article has already been stocked."""

    status_code = 409

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("この記事は既に登録されています")


class ArticlePreviewError(IntakeError):
    """Raised when metadata for a preview could not be fetched."""

    status_code = 500

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("記事のプレビュー取得に失敗しました")


class ArticleCreateError(IntakeError):
    """Raised when metadata for a new article could not be fetched."""

    status_code = 500

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("記事の追加に失敗しました")
