"""Card contract and card registry.

Every card type is a subclass of :class:`Card` registered with the
:func:`card` decorator, which records its name, description and rarity
and files it in the per-rarity pool the card factory draws from.

A card resolves through ``use(user, target)``. It mutates the two
characters through their public methods and returns a
:class:`CardOutcome`. Effects that reach beyond the two characters
(rewinding the battle, keeping priority after a coin flip, drawing new
cards) are not performed by the card; it reports them as a
:class:`SessionEffect` and the arena carries them out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, ClassVar, TypeVar

from card_mayhem.core.logging import get_logger
from card_mayhem.models.enums import Rarity, SessionEffect


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character

logger = get_logger(__name__)

C = TypeVar("C", bound=type["Card"])


# =============================================================================
# Card Outcome
# =============================================================================


@dataclass(frozen=True)
class CardOutcome:
    """Result of resolving a card.

    Attributes:
        message: Human-readable description of what happened.
        effect: Battle-level effect the arena must carry out, if any.
        coin_flip_won: For coin flips, whether the card's user won.
    """

    message: str
    effect: SessionEffect | None = None
    coin_flip_won: bool | None = None


# =============================================================================
# Card Base Class
# =============================================================================


class Card(ABC):
    """Base class for all cards.

    Card instances hold no state of their own, so the same instance can
    sit in a hand, a history snapshot and a restored hand at once.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    rarity: ClassVar[Rarity]
    unique: ClassVar[bool] = False
    requires_target: ClassVar[bool] = False

    def use(self, user: Character, target: Character | None = None) -> CardOutcome:
        """Resolve the card.

        Cards that need a target resolve to an informational message,
        with no effect, when none is given.

        Args:
            user: Character playing the card.
            target: Opposing character, if any.

        Returns:
            The outcome of the card.
        """
        if self.requires_target and target is None:
            return CardOutcome(f"{self.name} needs a target, nothing happens.")
        return self.resolve(user, target)

    @abstractmethod
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        """Apply the card's effect.

        Args:
            user: Character playing the card.
            target: Opposing character. Never None for cards with
                ``requires_target`` set.

        Returns:
            The outcome of the card.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, rarity={self.rarity.value!r})"

    def __str__(self) -> str:
        return f"{self.name} [{self.rarity.display_name}]"


# =============================================================================
# Card Registry
# =============================================================================

_card_registry: dict[Rarity, list[type[Card]]] = {rarity: [] for rarity in Rarity}


def card(
    *,
    name: str,
    description: str,
    rarity: Rarity,
    requires_target: bool = False,
) -> Callable[[C], C]:
    """Decorator to register a card type.

    Cards of the Mayhem tiers are marked unique, so each holder can play
    a given one only once per battle.

    Args:
        name: Display name of the card.
        description: Short rules text.
        rarity: Pool the card belongs to.
        requires_target: Whether the card does nothing without a target.

    Returns:
        Class decorator.
    """

    def decorator(cls: C) -> C:
        cls.name = name
        cls.description = description
        cls.rarity = rarity
        cls.unique = rarity.is_unique_tier
        cls.requires_target = requires_target

        if any(existing.name == name for existing in get_all_cards()):
            logger.warning("Card name registered twice", card=name)
        _card_registry[rarity].append(cls)
        return cls

    return decorator


def get_cards_by_rarity(rarity: Rarity) -> list[type[Card]]:
    """Get the card types registered for a rarity."""
    return list(_card_registry[rarity])


def get_all_cards() -> list[type[Card]]:
    """Get every registered card type, ordered by rarity."""
    return [cls for rarity in Rarity for cls in _card_registry[rarity]]


def get_card(name: str) -> type[Card] | None:
    """Get a card type by its display name (case-insensitive)."""
    lowered = name.lower()
    for cls in get_all_cards():
        if cls.name.lower() == lowered:
            return cls
    return None


__all__ = [
    "Card",
    "CardOutcome",
    "card",
    "get_all_cards",
    "get_card",
    "get_cards_by_rarity",
]
