"""Mayhem and Super Mayhem cards.

These cards bend the battle itself. Each holder may play a given one
only once per battle; the character enforces that through its record of
used unique cards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_mayhem.cards.base import Card, CardOutcome, card
from card_mayhem.core.constants import COIN_FLIP_CHANCE, LASTING_DURATION
from card_mayhem.models.enums import Rarity, SessionEffect


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character


@card(
    name="Apocalypse Coin",
    description="Both fighters drop to 1 HP. A coin flip decides who plays next.",
    rarity=Rarity.MAYHEM,
    requires_target=True,
)
class ApocalypseCoin(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_health(1)
        target.set_health(1)
        won = user.rng.random() < COIN_FLIP_CHANCE
        next_player = user.name if won else target.name
        return CardOutcome(
            f"MAYHEM! Apocalypse Coin! Both fighters have 1 HP! {next_player} plays next!",
            effect=SessionEffect.COIN_FLIP,
            coin_flip_won=won,
        )


@card(
    name="Black Hole",
    description="Destroys both hands and disables cards for the rest of the battle.",
    rarity=Rarity.MAYHEM,
    requires_target=True,
)
class BlackHole(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        for fighter in (user, target):
            fighter.clear_inventory()
            fighter.set_card_block(LASTING_DURATION)
        return CardOutcome("MAYHEM! Black Hole! Every card is swallowed by the darkness!")


@card(
    name="Supreme Wish",
    description="Heals 50 when below half health, otherwise deals 40 direct damage.",
    rarity=Rarity.MAYHEM,
)
class SupremeWish(Card):
    heal_amount = 50
    damage_amount = 40

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        if user.health >= user.max_health * 0.5 and target is not None:
            dealt = target.receive_direct_damage(self.damage_amount)
            return CardOutcome(
                f"MAYHEM! Supreme Wish! {user.name} wishes for destruction! "
                f"{target.name} takes {dealt} damage!"
            )
        healed = user.heal(self.heal_amount)
        return CardOutcome(
            f"MAYHEM! Supreme Wish! {user.name} wishes for health and heals {healed} HP!"
        )


@card(
    name="Time Reversal",
    description="Turns the battle back 3 turns.",
    rarity=Rarity.MAYHEM,
)
class TimeReversal(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        return CardOutcome(
            f"MAYHEM! Time Reversal! {user.name} bends time itself!",
            effect=SessionEffect.REWIND,
        )


@card(
    name="The Snap",
    description="Halves both fighters' health and hands.",
    rarity=Rarity.MAYHEM,
    requires_target=True,
)
class TheSnap(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        for fighter in (user, target):
            fighter.set_health(max(1, fighter.health // 2))
            for _ in range(len(fighter.inventory) // 2):
                fighter.discard_item(len(fighter.inventory) - 1)
        return CardOutcome(
            f"MAYHEM! The Snap! Half of everything turns to dust! "
            f"{user.name}: {user.health} HP, {target.name}: {target.health} HP."
        )


@card(
    name="Exodia",
    description="Instantly defeats the opponent.",
    rarity=Rarity.SUPER_MAYHEM,
    requires_target=True,
)
class Exodia(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        target.set_health(0)
        return CardOutcome(
            f"SUPER MAYHEM! EXODIA, THE FORBIDDEN ONE! {target.name} is obliterated!"
        )


__all__ = [
    "ApocalypseCoin",
    "BlackHole",
    "SupremeWish",
    "TimeReversal",
    "TheSnap",
    "Exodia",
]
