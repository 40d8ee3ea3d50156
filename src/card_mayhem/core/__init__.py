"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        CardMayhemError: Base exception for all application errors.
        GameEngineError: Base for battle rules violations.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        BattleSettings: Arena settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from card_mayhem.core.config import (
    BattleSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from card_mayhem.core.exceptions import (
    CardMayhemError,
    CharacterDeadError,
    ConfigurationError,
    FighterNotFoundError,
    GameEngineError,
    InsufficientResourceError,
    InvalidActionError,
    InventoryFullError,
)
from card_mayhem.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "CardMayhemError",
    "CharacterDeadError",
    "ConfigurationError",
    "FighterNotFoundError",
    "GameEngineError",
    "InsufficientResourceError",
    "InvalidActionError",
    "InventoryFullError",
    # Configuration
    "BattleSettings",
    "Settings",
    "clear_settings_cache",
    "get_settings",
    # Logging
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
