from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for grid navigation and search.

    Values are loaded from environment variables and `.env`.

    Notes:
    - Grid defaults only seed new grids; screens may still override them.
    - File logging is off by default so library use never writes to disk.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Layout
    TENFOOT_DEFAULT_COLUMNS: int = Field(default=5)
    TENFOOT_MIN_COLUMN_WIDTH: int = Field(default=140)
    # Width of one card in terminal cells (CLI / console hosts).
    TENFOOT_CONSOLE_CARD_WIDTH: int = Field(default=24)

    # Grid behavior
    TENFOOT_WRAP_HORIZONTAL: bool = Field(default=False)
    TENFOOT_WRAP_VERTICAL: bool = Field(default=False)
    TENFOOT_ENABLE_WASD: bool = Field(default=True)

    # Search overlay
    TENFOOT_SEARCH_MIN_SCORE: float = Field(default=0.1, ge=0.0, le=1.0)
    TENFOOT_SEARCH_SCROLL_PADDING: int = Field(default=16, ge=0)

    # Logging
    TENFOOT_LOG_LEVEL: str = Field(default="INFO")
    TENFOOT_LOG_DIR: Path = Field(default=Path("_logs"))
    TENFOOT_LOG_TO_FILE: bool = Field(default=False)
    # Timed rotation retention count (days).
    TENFOOT_LOG_BACKUP_COUNT: int = Field(default=14)


def load_settings() -> Settings:
    s = Settings()
    if s.TENFOOT_DEFAULT_COLUMNS < 1:
        s.TENFOOT_DEFAULT_COLUMNS = 1
    return s
