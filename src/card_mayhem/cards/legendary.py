"""Legendary cards: game-swinging buffs, summons and stuns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_mayhem.cards.base import Card, CardOutcome, card
from card_mayhem.core.constants import LASTING_DURATION
from card_mayhem.models.effects import MinionEffect
from card_mayhem.models.enums import Rarity, SessionEffect


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character


@card(
    name="Chalice of Infinity",
    description="Fully restores health, but halves your damage for the rest of the battle.",
    rarity=Rarity.LEGENDARY,
)
class ChaliceOfInfinity(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        healed = user.heal(user.max_health)
        user.add_damage_modifier(0.5, LASTING_DURATION)
        return CardOutcome(
            f"{user.name} drinks from the Chalice of Infinity and heals {healed} HP, "
            f"at the cost of a 0.5x damage modifier!"
        )


@card(
    name="Excalibur",
    description="Next attack deals double damage.",
    rarity=Rarity.LEGENDARY,
)
class Excalibur(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.add_damage_modifier(2.0, 1)
        return CardOutcome(f"{user.name} draws Excalibur: 2x damage modifier!")


@card(
    name="Lich Grimoire",
    description="Summons a minion that deals 10 damage to the opponent for 3 turns.",
    rarity=Rarity.LEGENDARY,
    requires_target=True,
)
class LichGrimoire(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.add_persistent_effect(
            MinionEffect(name="Lich Minion", duration=3, target=target, damage_per_turn=10)
        )
        return CardOutcome(f"{user.name} summons a Lich Minion to haunt {target.name}!")


@card(
    name="Eye of Sauron",
    description="Destroys the first card in the opponent's hand.",
    rarity=Rarity.LEGENDARY,
    requires_target=True,
)
class EyeOfSauron(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        if not target.inventory:
            return CardOutcome(f"The Eye of Sauron finds no cards in {target.name}'s hand.")
        discarded = target.discard_item(0)
        return CardOutcome(
            f"The Eye of Sauron burns {target.name}'s {discarded.name}!"
        )


@card(
    name="Invisibility Cloak",
    description="Invulnerable for 2 turns, but cannot attack meanwhile.",
    rarity=Rarity.LEGENDARY,
)
class InvisibilityCloak(Card):
    turns = 2

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_invulnerable(self.turns)
        user.set_attack_block(self.turns)
        return CardOutcome(
            f"{user.name} vanishes under the Invisibility Cloak and is invulnerable "
            f"for {self.turns} turns!"
        )


@card(
    name="Thor's Hammer",
    description="Deals 40 damage and stuns the opponent.",
    rarity=Rarity.LEGENDARY,
    requires_target=True,
)
class ThorsHammer(Card):
    amount = 40

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        dealt = target.receive_damage(self.amount)
        target.set_stunned(True)
        return CardOutcome(
            f"{user.name} hurls Thor's Hammer! {target.name} takes {dealt} damage and is stunned!"
        )


@card(
    name="Philosopher's Stone",
    description="Transmutes your first Common card into a Mayhem card.",
    rarity=Rarity.LEGENDARY,
)
class PhilosophersStone(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        return CardOutcome(
            f"{user.name} activates the Philosopher's Stone!",
            effect=SessionEffect.TRANSMUTE,
        )


__all__ = [
    "ChaliceOfInfinity",
    "Excalibur",
    "LichGrimoire",
    "EyeOfSauron",
    "InvisibilityCloak",
    "ThorsHammer",
    "PhilosophersStone",
]
