"""Rare cards: defensive statuses, sabotage and small drains."""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_mayhem.cards.base import Card, CardOutcome, card
from card_mayhem.models.enums import Rarity, SessionEffect


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character


@card(
    name="Iron Elixir",
    description="Immune to base attacks for 1 turn.",
    rarity=Rarity.RARE,
)
class IronElixir(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_base_attack_immunity(1)
        return CardOutcome(f"{user.name} drinks an Iron Elixir and is immune to base attacks!")


@card(
    name="Broken Staff",
    description="The next attack against the opponent fails.",
    rarity=Rarity.RARE,
    requires_target=True,
)
class BrokenStaff(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        target.set_next_attack_fails(True)
        return CardOutcome(f"{user.name} curses {target.name}: the next attack against them will fail!")


@card(
    name="Shadow Cloak",
    description="Dodge every attack until your next turn.",
    rarity=Rarity.RARE,
)
class ShadowCloak(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_guaranteed_dodge(True)
        return CardOutcome(f"{user.name} melts into the shadows and will dodge the next attack!")


@card(
    name="Crystal Orb",
    description="Swaps your lowest-rarity card for a random one.",
    rarity=Rarity.RARE,
)
class CrystalOrb(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        return CardOutcome(
            f"{user.name} gazes into the Crystal Orb and reshapes their hand.",
            effect=SessionEffect.SWAP_LOWEST,
        )


@card(
    name="Blood Essence",
    description="Drains 5 health from the opponent.",
    rarity=Rarity.RARE,
    requires_target=True,
)
class BloodEssence(Card):
    amount = 5

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        dealt = target.receive_direct_damage(self.amount)
        healed = user.heal(self.amount)
        return CardOutcome(
            f"{user.name} drains {dealt} health from {target.name} and heals {healed} HP!"
        )


@card(
    name="Thorn Shield",
    description="Attackers take 5 damage when they strike you.",
    rarity=Rarity.RARE,
)
class ThornShield(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_thorns(True)
        return CardOutcome(f"{user.name} raises a Thorn Shield: attackers will be hurt by thorns!")


__all__ = [
    "IronElixir",
    "BrokenStaff",
    "ShadowCloak",
    "CrystalOrb",
    "BloodEssence",
    "ThornShield",
]
