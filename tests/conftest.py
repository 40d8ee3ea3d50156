"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Card Mayhem test suite.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from card_mayhem.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CARD_MAYHEM_DEBUG": "true",
        "CARD_MAYHEM_LOG_LEVEL": "WARNING",
        "CARD_MAYHEM_BATTLE_HISTORY_SIZE": "8",
        "CARD_MAYHEM_BATTLE_RNG_SEED": "7",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def battle_settings() -> Any:
    """Provide battle settings with defaults and a fixed seed.

    Returns:
        BattleSettings instance.
    """
    from card_mayhem.core.config import BattleSettings

    return BattleSettings(rng_seed=1234)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source for reproducible rolls.

    Returns:
        Seeded Random instance.
    """
    return random.Random(1234)


@pytest.fixture
def warrior(rng: random.Random) -> Any:
    """Create a Warrior at full health.

    Returns:
        Character instance.
    """
    from card_mayhem.engine.classes import create_character
    from card_mayhem.models.enums import CharacterClass

    return create_character("Thorin", CharacterClass.WARRIOR, rng=rng)


@pytest.fixture
def mage(rng: random.Random) -> Any:
    """Create a Mage at full health and mana.

    Returns:
        Character instance.
    """
    from card_mayhem.engine.classes import create_character
    from card_mayhem.models.enums import CharacterClass

    return create_character("Gandalf", CharacterClass.MAGE, rng=rng)


@pytest.fixture
def sorcerer(rng: random.Random) -> Any:
    """Create a Sorcerer at full health and mana.

    Returns:
        Character instance.
    """
    from card_mayhem.engine.classes import create_character
    from card_mayhem.models.enums import CharacterClass

    return create_character("Medivh", CharacterClass.SORCERER, rng=rng)


@pytest.fixture
def paladin(rng: random.Random) -> Any:
    """Create a Paladin at full health and mana.

    Returns:
        Character instance.
    """
    from card_mayhem.engine.classes import create_character
    from card_mayhem.models.enums import CharacterClass

    return create_character("Arthas", CharacterClass.PALADIN, rng=rng)


@pytest.fixture
def arena(battle_settings: Any, rng: random.Random) -> Any:
    """Create an empty arena sharing the seeded random source.

    Returns:
        Arena instance.
    """
    from card_mayhem.engine.arena import Arena

    return Arena(settings=battle_settings, rng=rng)


@pytest.fixture
def roster_arena(battle_settings: Any, rng: random.Random) -> Any:
    """Create an arena holding the default roster.

    Returns:
        Arena instance.
    """
    from card_mayhem.engine.arena import Arena

    return Arena.with_default_roster(settings=battle_settings, rng=rng)
