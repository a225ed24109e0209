from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing at startup."""


class Settings(BaseSettings):
    """Configuration for the SpaceTraders dashboard.

    Values are loaded from environment variables and `.env`.

    Notes:
    - The API token is only required to start the dashboard; `status` works without it.
    - Logs are written outside the terminal while the dashboard owns the screen.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API
    SPACE_TRADERS_API_TOKEN: str | None = Field(default=None)
    SPACE_TRADERS_BASE_URL: str = Field(default="https://api.spacetraders.io/v2")
    SPACEDASH_HTTP_TIMEOUT: float = Field(default=30.0)

    # Fixed page requested for the systems tab
    SPACEDASH_SYSTEMS_PAGE: int = Field(default=1)
    SPACEDASH_SYSTEMS_LIMIT: int = Field(default=20)

    # Input wait per loop iteration (milliseconds)
    SPACEDASH_POLL_TIMEOUT_MS: int = Field(default=50)

    # Logging (diagnostic; rotated daily)
    SPACEDASH_LOG_DIR: Path = Field(default=Path("_logs"))
    SPACEDASH_LOG_LEVEL: str = Field(default="INFO")
    SPACEDASH_LOG_BACKUP_COUNT: int = Field(default=7)

    @property
    def poll_timeout(self) -> float:
        return max(0, self.SPACEDASH_POLL_TIMEOUT_MS) / 1000.0

    def require_token(self) -> str:
        token = (self.SPACE_TRADERS_API_TOKEN or "").strip()
        if not token:
            raise ConfigurationError("SPACE_TRADERS_API_TOKEN must be set in the environment or .env file")
        return token


def load_settings() -> Settings:
    s = Settings()
    s.SPACE_TRADERS_BASE_URL = s.SPACE_TRADERS_BASE_URL.rstrip("/")
    return s
