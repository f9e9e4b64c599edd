"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from loto_stats.analysis.gaps import GAP_HIGHLIGHT_COUNT as DEFAULT_GAP_HIGHLIGHT_COUNT
from loto_stats.analysis.ranking import TOP_FLOP_COUNT as DEFAULT_TOP_FLOP_COUNT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Loto Stats"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_TO_FILE: bool = True
    LOG_FILE: Path = Path("logs/app.log")

    # Statistics
    TOP_FLOP_COUNT: int = DEFAULT_TOP_FLOP_COUNT
    GAP_HIGHLIGHT_COUNT: int = DEFAULT_GAP_HIGHLIGHT_COUNT


settings = Settings()
