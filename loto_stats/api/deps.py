"""Dependency injection for FastAPI."""

from loto_stats.config import Settings, settings


def get_settings() -> Settings:
    """Application settings, overridable in tests."""
    return settings
