from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dailygrid.constants import (
    PAGE_DISPLAY_LIMIT,
    PAGE_FETCH_LIMIT,
    PAGE_PLAY_DISPLAY_LIMIT,
    PAGE_PLAY_FETCH_LIMIT,
    SUGGEST_FETCH_LIMIT,
    SUGGEST_PLAY_FETCH_LIMIT,
    USER_BADGE_FETCH_LIMIT,
)

DAILYGRID_DIR = Path.home() / ".dailygrid"


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DAILYGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    # Database (defaults to DAILYGRID_DIR / "dailygrid.db")
    db_path: Path | None = None

    log_level: str = "INFO"
    log_json: bool = False

    # Per-source fetch caps, bounding ranking cost
    suggest_fetch_limit: int = SUGGEST_FETCH_LIMIT
    suggest_play_fetch_limit: int = SUGGEST_PLAY_FETCH_LIMIT
    page_fetch_limit: int = PAGE_FETCH_LIMIT
    page_play_fetch_limit: int = PAGE_PLAY_FETCH_LIMIT
    user_badge_fetch_limit: int = USER_BADGE_FETCH_LIMIT

    # Per-section display caps on the full search page
    page_display_limit: int = PAGE_DISPLAY_LIMIT
    page_play_display_limit: int = PAGE_PLAY_DISPLAY_LIMIT

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator(
        "suggest_fetch_limit",
        "suggest_play_fetch_limit",
        "page_fetch_limit",
        "page_play_fetch_limit",
        "user_badge_fetch_limit",
        "page_display_limit",
        "page_play_display_limit",
    )
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"limit must be positive, got {v}")
        return v

    @property
    def db_dir(self) -> Path:
        return self.database_path.parent

    @property
    def database_path(self) -> Path:
        return self.db_path or DAILYGRID_DIR / "dailygrid.db"


def get_config() -> Config:
    return Config()
