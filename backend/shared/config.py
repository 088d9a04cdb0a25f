"""
Centralized configuration for the scoreboard panels package.

All settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Any, Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Scoreboard Panels"
    app_version: str = "0.1.0"

    # Protocol limits
    # Runtime version string reported by the server, e.g. "v1_8_R3"
    server_version: str = ""
    title_length_override: Optional[int] = None
    text_length_override: Optional[int] = None

    # Panels
    default_display_slot: Literal["sidebar", "player_list", "below_name"] = "sidebar"

    @field_validator("default_display_slot", mode="before")
    @classmethod
    def normalize_display_slot(cls, value: Any) -> Any:
        """Accept slot names in any case, e.g. SIDEBAR or Below_Name."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
