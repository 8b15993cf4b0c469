"""Application settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables prefixed with ARTICLE_STOCK_.
    For example, ARTICLE_STOCK_EXTRACT_TIMEOUT_SECONDS=5 shortens the fetch timeout.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARTICLE_STOCK_",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Logging ─────────────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # ─── Extraction ──────────────────────────────────────────────────
    extract_timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True

    # ─── Cache Settings ──────────────────────────────────────────────
    cache_enabled: bool = True
    cache_ttl_seconds: int = Field(default=300, gt=0)
    cache_max_size: int = Field(default=1000, ge=1)
    cache_sweep_interval_seconds: int = Field(default=300, gt=0)

    def get_log_level(self) -> str:
        """Get the effective log level (DEBUG when debug mode is on)."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()
