"""Card factory drawing cards from the rarity-weighted pools.

Example:
    >>> import random
    >>> factory = CardFactory(random.Random(7))
    >>> hand = factory.draw_many(4)
    >>> len(hand)
    4
"""

from __future__ import annotations

import random

from card_mayhem.cards.base import Card, get_cards_by_rarity
from card_mayhem.core.exceptions import GameEngineError
from card_mayhem.core.logging import get_logger
from card_mayhem.models.enums import Rarity
from card_mayhem.models.rarity import sample_rarity


logger = get_logger(__name__)

# Tiers without cards of their own draw from another pool
POOL_FALLBACKS: dict[Rarity, Rarity] = {
    Rarity.UNCOMMON: Rarity.COMMON,
}


class CardFactory:
    """Draws new card instances.

    Draws are independent: duplicates are expected, and nothing is
    removed from a pool when drawn.

    Attributes:
        rng: Random source used for rarity rolls and pool picks.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize the factory.

        Args:
            rng: Random source. A fresh unseeded generator when omitted.
        """
        self.rng = rng or random.Random()

    def sample_rarity(self) -> Rarity:
        """Roll a rarity tier using the weighted cascade."""
        return sample_rarity(self.rng)

    def pool(self, rarity: Rarity) -> list[type[Card]]:
        """Get the card types a draw of the given rarity picks from.

        Args:
            rarity: Requested tier.

        Returns:
            Card types of the tier, or of its fallback tier when it has none.
        """
        cards = get_cards_by_rarity(rarity)
        if not cards and rarity in POOL_FALLBACKS:
            cards = get_cards_by_rarity(POOL_FALLBACKS[rarity])
        return cards

    def draw_by_rarity(self, rarity: Rarity) -> Card:
        """Draw a card uniformly from one rarity pool.

        Args:
            rarity: Tier to draw from.

        Returns:
            A new card instance.

        Raises:
            GameEngineError: If the tier has no cards registered.
        """
        cards = self.pool(rarity)
        if not cards:
            raise GameEngineError(
                f"No cards registered for rarity {rarity.display_name}",
                details={"rarity": rarity.value},
            )
        drawn = self.rng.choice(cards)()
        logger.debug("Card drawn", card=drawn.name, rarity=rarity.value)
        return drawn

    def draw_random(self) -> Card:
        """Draw a card from a rarity sampled with the weighted cascade."""
        return self.draw_by_rarity(self.sample_rarity())

    def draw_many(self, count: int) -> list[Card]:
        """Draw several independent random cards.

        Args:
            count: Number of cards to draw.

        Returns:
            The drawn cards, possibly with duplicates.
        """
        return [self.draw_random() for _ in range(max(0, count))]

    def draw_epic(self) -> Card:
        """Draw a card from the Epic pool."""
        return self.draw_by_rarity(Rarity.EPIC)

    def draw_mayhem(self) -> Card:
        """Draw a card from the Mayhem pool."""
        return self.draw_by_rarity(Rarity.MAYHEM)


__all__ = [
    "CardFactory",
    "POOL_FALLBACKS",
]
