"""Timed effect layers carried by characters.

Shields and damage modifiers are plain value objects with a duration
counter. Persistent effects additionally run a callback at their
holder's turn start. All of them are immutable: ticking an effect
returns a new instance with one less turn remaining, which lets a turn
start build the surviving list in one pass and swap it in afterwards.
"""

from __future__ import annotations

import dataclasses
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character


# =============================================================================
# Shields and Damage Modifiers
# =============================================================================


class Shield(BaseModel):
    """A fractional damage reduction layer.

    Attributes:
        reduction: Fraction of incoming damage removed (0.5 halves it).
        duration: Turns remaining before the shield fades.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    reduction: Annotated[float, Field(ge=0.0, le=1.0)]
    duration: Annotated[int, Field(ge=0)]

    def reduce(self, amount: int) -> int:
        """Apply the reduction to an amount of damage, rounding down."""
        return math.floor(amount * (1 - self.reduction))

    def tick(self) -> Shield:
        """Return a copy with one less turn remaining."""
        return self.model_copy(update={"duration": max(0, self.duration - 1)})


class DamageModifier(BaseModel):
    """A multiplicative outgoing damage layer.

    Attributes:
        multiplier: Factor applied to outgoing damage.
        duration: Turns remaining before the modifier fades.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    multiplier: Annotated[float, Field(ge=0.0)]
    duration: Annotated[int, Field(ge=0)]

    def apply(self, amount: int) -> int:
        """Scale an amount of damage, rounding down."""
        return math.floor(amount * self.multiplier)

    def tick(self) -> DamageModifier:
        """Return a copy with one less turn remaining."""
        return self.model_copy(update={"duration": max(0, self.duration - 1)})


# =============================================================================
# Persistent Effects
# =============================================================================


@dataclass(frozen=True)
class PersistentEffect(ABC):
    """An effect re-applied at the start of each of its holder's turns.

    Attributes:
        name: Display name of the effect.
        duration: Turn starts remaining.
    """

    name: str
    duration: int

    @abstractmethod
    def apply(self, holder: Character) -> str:
        """Run the effect for one turn start.

        Args:
            holder: The character carrying the effect.

        Returns:
            Message describing what happened.
        """

    def tick(self) -> PersistentEffect:
        """Return a copy with one less turn remaining."""
        return dataclasses.replace(self, duration=max(0, self.duration - 1))


@dataclass(frozen=True)
class DamageOverTime(PersistentEffect):
    """Direct damage dealt to the holder at each of its turn starts.

    Attributes:
        damage_per_turn: Damage dealt per application.
    """

    damage_per_turn: int = 0

    def apply(self, holder: Character) -> str:
        dealt = holder.receive_direct_damage(self.damage_per_turn)
        return f"{holder.name} suffers {dealt} damage from {self.name}!"


@dataclass(frozen=True)
class MinionEffect(PersistentEffect):
    """A summoned minion that strikes a fixed target at the holder's turn start.

    Attributes:
        target: The character the minion attacks.
        damage_per_turn: Direct damage per strike.
    """

    target: Character | None = None
    damage_per_turn: int = 0

    def apply(self, holder: Character) -> str:
        if self.target is None or not self.target.is_alive:
            return f"{holder.name}'s {self.name} finds nothing to attack."
        dealt = self.target.receive_direct_damage(self.damage_per_turn)
        return f"{holder.name}'s {self.name} strikes {self.target.name} for {dealt} damage!"


__all__ = [
    "Shield",
    "DamageModifier",
    "PersistentEffect",
    "DamageOverTime",
    "MinionEffect",
]
