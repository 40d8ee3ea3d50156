"""Bounded turn history used for rewinding a battle."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from card_mayhem.core.constants import HISTORY_CAPACITY


if TYPE_CHECKING:
    from card_mayhem.engine.character import CharacterSnapshot


@dataclass(frozen=True)
class BattleSnapshot:
    """State of both fighters at the start of a turn.

    Attributes:
        turn: Turn number the snapshot was taken on.
        player1: First fighter's state.
        player2: Second fighter's state.
    """

    turn: int
    player1: CharacterSnapshot
    player2: CharacterSnapshot


class HistoryRing:
    """Fixed-capacity history of battle snapshots, oldest first.

    Pushing past capacity evicts the oldest entry.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        """Initialize an empty ring.

        Args:
            capacity: Maximum number of snapshots kept.

        Raises:
            ValueError: If capacity is not positive.
        """
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._entries: deque[BattleSnapshot] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Get the maximum number of snapshots kept."""
        return self._entries.maxlen or 0

    def push(self, snapshot: BattleSnapshot) -> None:
        """Append a snapshot, evicting the oldest one when full."""
        self._entries.append(snapshot)

    def truncate(self, index: int) -> None:
        """Discard the snapshot at ``index`` and everything after it.

        Args:
            index: First position to discard.
        """
        while len(self._entries) > max(0, index):
            self._entries.pop()

    def clear(self) -> None:
        """Remove every snapshot."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> BattleSnapshot:
        return self._entries[index]

    def __iter__(self) -> Iterator[BattleSnapshot]:
        return iter(self._entries)


__all__ = [
    "BattleSnapshot",
    "HistoryRing",
]
