"""Battle engine: characters, fighter classes, arena and rewind history.

This package contains the rules that resolve a battle:
- Character state and combat primitives
- The six fighter classes and their signature actions
- The Arena turn state machine and battle log
- The bounded snapshot history used for rewinding
"""

from __future__ import annotations

from card_mayhem.engine.arena import (
    DEFAULT_ROSTER,
    Arena,
    BattleState,
    LogCallback,
    LogEntry,
)
from card_mayhem.engine.character import Character, CharacterSnapshot, TurnStartResult
from card_mayhem.engine.classes import (
    ArcherBehavior,
    CombatantBehavior,
    MageBehavior,
    NecromancerBehavior,
    PaladinBehavior,
    SorcererBehavior,
    WarriorBehavior,
    create_character,
    get_behavior,
)
from card_mayhem.engine.history import BattleSnapshot, HistoryRing
from card_mayhem.engine.results import ActionResult, classify_action


__all__ = [
    # Arena
    "DEFAULT_ROSTER",
    "Arena",
    "BattleState",
    "LogCallback",
    "LogEntry",
    # Character
    "Character",
    "CharacterSnapshot",
    "TurnStartResult",
    # Classes
    "ArcherBehavior",
    "CombatantBehavior",
    "MageBehavior",
    "NecromancerBehavior",
    "PaladinBehavior",
    "SorcererBehavior",
    "WarriorBehavior",
    "create_character",
    "get_behavior",
    # History
    "BattleSnapshot",
    "HistoryRing",
    # Results
    "ActionResult",
    "classify_action",
]
