"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/dictlookup.log if not set."""
        return self.log_file_path or self.data_dir / "dictlookup.log"

    # Upstream sites
    cambridge_base_url: str = "https://dictionary.cambridge.org"
    wiktionary_base_url: str = "https://simple.wiktionary.org"
    request_timeout: float = 10.0  # seconds, per outbound request
    user_agent: str = DEFAULT_USER_AGENT

    # Cache
    cache_ttl_seconds: float = 30 * 60
    cache_max_size: int = 1000

    # Server
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
