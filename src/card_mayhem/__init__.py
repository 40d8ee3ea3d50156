"""Card Mayhem: rules engine for a two-fighter, turn-based card battle game.

Two fighters alternate turns, each choosing a class-specific attack or a
card from a hand of four drawn from rarity-weighted pools. The engine
resolves damage, shields, modifiers, statuses and lingering effects, and
keeps a short history of turns so a battle can be rewound.

Example:
    >>> from card_mayhem import Arena
    >>> arena = Arena.with_default_roster()
    >>> thorin, gandalf = arena.find_fighter("thorin"), arena.find_fighter("Gandalf")
    >>> arena.start_battle(thorin, gandalf)
    >>> messages = arena.begin_turn()
    >>> arena.execute_attack(1).damage
    18
"""

from __future__ import annotations

from card_mayhem.cards import Card, CardFactory, CardOutcome
from card_mayhem.engine import ActionResult, Arena, Character, LogEntry, create_character
from card_mayhem.models import CharacterClass, EffectCategory, Rarity, SessionEffect


__version__ = "0.1.0"

__all__ = [
    "ActionResult",
    "Arena",
    "Card",
    "CardFactory",
    "CardOutcome",
    "Character",
    "CharacterClass",
    "EffectCategory",
    "LogEntry",
    "Rarity",
    "SessionEffect",
    "create_character",
]
