"""Data models for the Card Mayhem battle engine.

This package holds the value types shared by cards and the engine:
enumerations, the rarity table and the timed effect layers.
"""

from __future__ import annotations

from card_mayhem.models.effects import (
    DamageModifier,
    DamageOverTime,
    MinionEffect,
    PersistentEffect,
    Shield,
)
from card_mayhem.models.enums import CharacterClass, EffectCategory, Rarity, SessionEffect
from card_mayhem.models.rarity import (
    RARITY_TABLE,
    SAMPLING_ORDER,
    RarityInfo,
    get_rarity_info,
    rarity_for_roll,
    sample_rarity,
)


__all__ = [
    # Enums
    "CharacterClass",
    "EffectCategory",
    "Rarity",
    "SessionEffect",
    # Rarity
    "RARITY_TABLE",
    "SAMPLING_ORDER",
    "RarityInfo",
    "get_rarity_info",
    "rarity_for_roll",
    "sample_rarity",
    # Effects
    "DamageModifier",
    "DamageOverTime",
    "MinionEffect",
    "PersistentEffect",
    "Shield",
]
