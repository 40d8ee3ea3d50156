"""Rules constants for the Card Mayhem battle engine.

Numbers here are part of the game design; tests rely on them for exact
parity, so change them only together with the balance they encode.
"""

from __future__ import annotations

# =============================================================================
# Character Rules
# =============================================================================

MAX_INVENTORY = 4
"""Maximum number of cards a character can hold."""

TURN_MANA_RECOVERY = 40
"""Mana restored at the start of each turn for characters that use mana."""

THORNS_DAMAGE = 5
"""Direct damage an attacker takes when striking a target with thorns."""

RELIC_RESTORE_FRACTION = 0.2
"""Fraction of max health restored when the holy relic triggers."""

LASTING_DURATION = 999
"""Duration used for effects that last for the rest of the battle."""

# =============================================================================
# Battle Rules
# =============================================================================

HISTORY_CAPACITY = 5
"""Number of turn snapshots kept for rewinding."""

DEFAULT_REWIND_TURNS = 3
"""How many snapshots back a rewind goes by default."""

MAX_AUTO_TURNS = 100
"""Safety cap on turns for automatically resolved battles."""

INITIAL_HAND_SIZE = 4
"""Cards dealt to each fighter when a battle starts."""

EPIC_REFILL_COUNT = 3
"""Epic cards drawn after an Ankh of Rebirth empties a hand."""

# =============================================================================
# Class Balance
# =============================================================================

ARCHER_CRIT_CHANCE = 0.3
"""Chance for the Archer's primary attack to critically hit."""

COIN_FLIP_CHANCE = 0.5
"""Chance for the Apocalypse Coin user to win the flip."""
