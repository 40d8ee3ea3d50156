"""Enumeration types for the Card Mayhem battle engine.

Rarity tiers, fighter classes, the coarse effect categories used by
presentation layers, and the session-level effects a card can ask the
arena to carry out.
"""

from __future__ import annotations

from enum import StrEnum


class Rarity(StrEnum):
    """Card rarity tiers, in ascending order of power."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MAYHEM = "mayhem"
    SUPER_MAYHEM = "super_mayhem"

    @property
    def tier(self) -> int:
        """Get the ordinal power of the tier.

        Returns:
            0 for Common up to 6 for Super Mayhem.
        """
        return list(Rarity).index(self)

    @property
    def display_name(self) -> str:
        """Get the human-readable tier name.

        Returns:
            Title-cased name (e.g., 'Super Mayhem').
        """
        return self.value.replace("_", " ").title()

    @property
    def is_unique_tier(self) -> bool:
        """Check whether cards of this tier are usable once per battle.

        Returns:
            True for Mayhem and Super Mayhem.
        """
        return self in (Rarity.MAYHEM, Rarity.SUPER_MAYHEM)


class CharacterClass(StrEnum):
    """The six playable fighter classes."""

    WARRIOR = "warrior"
    MAGE = "mage"
    ARCHER = "archer"
    PALADIN = "paladin"
    NECROMANCER = "necromancer"
    SORCERER = "sorcerer"

    @property
    def display_name(self) -> str:
        """Get the capitalized class name.

        Returns:
            Class name (e.g., 'Warrior').
        """
        return self.value.capitalize()


class EffectCategory(StrEnum):
    """Coarse category of an action's outcome.

    Used only to pick an animation or color in a front end; it has no
    gameplay effect.
    """

    DAMAGE = "damage"
    BUFF = "buff"
    HEAL = "heal"
    NEUTRAL = "neutral"


class SessionEffect(StrEnum):
    """Battle-level side effects a card asks the arena to resolve."""

    COIN_FLIP = "coin_flip"
    """Apocalypse Coin: the winner of the flip keeps priority."""

    REWIND = "rewind"
    """Time Reversal: restore the battle from an earlier snapshot."""

    TRANSMUTE = "transmute"
    """Philosopher's Stone: first Common/Uncommon card becomes a Mayhem card."""

    REFILL_EPIC = "refill_epic"
    """Ankh of Rebirth: refill the emptied hand with Epic cards."""

    SWAP_LOWEST = "swap_lowest"
    """Crystal Orb: lowest-rarity card is replaced by a random draw."""


__all__ = [
    "Rarity",
    "CharacterClass",
    "EffectCategory",
    "SessionEffect",
]
