"""Configuration management for the Card Mayhem battle engine.

Settings are loaded with pydantic-settings from environment variables
and an optional ``.env`` file. The defaults reproduce the standard game
rules, so an empty environment yields a regular battle.

Example:
    >>> from card_mayhem.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.battle.history_size
    5

Environment Variables:
    CARD_MAYHEM_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CARD_MAYHEM_JSON_LOGS: Emit JSON logs instead of console output
    CARD_MAYHEM_LOG_FILE: Optional path of a log file
    CARD_MAYHEM_BATTLE_HISTORY_SIZE: Number of snapshots kept for rewind
    CARD_MAYHEM_BATTLE_REWIND_TURNS: Snapshots a Time Reversal goes back
    CARD_MAYHEM_BATTLE_MAX_AUTO_TURNS: Turn cap for automatic battles
    CARD_MAYHEM_BATTLE_RNG_SEED: Seed for reproducible battles
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from card_mayhem.core.constants import (
    DEFAULT_REWIND_TURNS,
    HISTORY_CAPACITY,
    INITIAL_HAND_SIZE,
    MAX_AUTO_TURNS,
    MAX_INVENTORY,
)
from card_mayhem.core.exceptions import ConfigurationError


class BattleSettings(BaseSettings):
    """Configuration for arena behavior.

    Attributes:
        history_size: Number of turn snapshots kept for rewinding.
        rewind_turns: Snapshots a Time Reversal card goes back.
        max_auto_turns: Turn cap for automatically resolved battles.
        initial_hand_size: Cards dealt to each fighter at battle start.
        rng_seed: Optional seed making every draw and roll reproducible.
    """

    model_config = SettingsConfigDict(
        env_prefix="CARD_MAYHEM_BATTLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    history_size: int = Field(
        default=HISTORY_CAPACITY,
        ge=1,
        le=50,
        description="Turn snapshots kept for rewind",
    )
    rewind_turns: int = Field(
        default=DEFAULT_REWIND_TURNS,
        ge=1,
        description="Snapshots a Time Reversal goes back",
    )
    max_auto_turns: int = Field(
        default=MAX_AUTO_TURNS,
        ge=1,
        description="Turn cap for automatic battles",
    )
    initial_hand_size: int = Field(
        default=INITIAL_HAND_SIZE,
        ge=0,
        le=MAX_INVENTORY,
        description="Cards dealt at battle start",
    )
    rng_seed: int | None = Field(
        default=None,
        description="Seed for reproducible battles",
    )

    @model_validator(mode="after")
    def validate_rewind_within_history(self) -> "BattleSettings":
        """Ensure a rewind can reach into the kept history.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If rewind_turns exceeds history_size.
        """
        if self.rewind_turns > self.history_size:
            raise ConfigurationError(
                f"rewind_turns ({self.rewind_turns}) must not exceed "
                f"history_size ({self.history_size})",
                config_key="rewind_turns",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        log_file: Optional log file path.
        battle: Arena settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CARD_MAYHEM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Card Mayhem",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    battle: BattleSettings = Field(default_factory=BattleSettings)

    @property
    def effective_log_level(self) -> str:
        """Get the log level, forced to DEBUG in debug mode.

        Returns:
            Logging level name.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "BattleSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
