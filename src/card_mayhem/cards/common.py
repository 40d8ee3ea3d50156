"""Common cards: small heals, minor buffs and utility.

The Uncommon tier has no cards of its own; the factory falls back to
this pool when it samples Uncommon.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_mayhem.cards.base import Card, CardOutcome, card
from card_mayhem.models.enums import Rarity


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character


@card(name="Health Potion", description="Restores 10 health.", rarity=Rarity.COMMON)
class HealthPotion(Card):
    amount = 10

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        healed = user.heal(self.amount)
        return CardOutcome(f"{user.name} drinks a Health Potion and heals {healed} HP!")


@card(name="Mana Potion", description="Restores 20 mana.", rarity=Rarity.COMMON)
class ManaPotion(Card):
    amount = 20

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        recovered = user.recover_mana(self.amount)
        return CardOutcome(f"{user.name} drinks a Mana Potion and recovers {recovered} mana!")


@card(
    name="Whetstone",
    description="Next attack deals 1.2x damage.",
    rarity=Rarity.COMMON,
)
class Whetstone(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.add_damage_modifier(1.2, 1)
        return CardOutcome(f"{user.name} sharpens their weapon: 1.2x damage modifier!")


@card(
    name="Bitter Herb",
    description="Removes every lingering effect from the user.",
    rarity=Rarity.COMMON,
)
class BitterHerb(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        removed = user.clear_persistent_effects()
        if not removed:
            return CardOutcome(f"{user.name} chews a Bitter Herb. Nothing to cleanse.")
        names = ", ".join(effect.name for effect in removed)
        return CardOutcome(f"{user.name} chews a Bitter Herb and is cleansed of {names}!")


@card(
    name="Scroll of Sight",
    description="Reveals the opponent's hand.",
    rarity=Rarity.COMMON,
    requires_target=True,
)
class ScrollOfSight(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        hand = ", ".join(item.name for item in target.inventory) or "no cards"
        return CardOutcome(f"{user.name} reads the Scroll of Sight: {target.name} holds {hand}.")


@card(name="Simple Bandage", description="Restores 5 health.", rarity=Rarity.COMMON)
class SimpleBandage(Card):
    amount = 5

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        healed = user.heal(self.amount)
        return CardOutcome(f"{user.name} applies a bandage and heals {healed} HP.")


@card(
    name="Clay Amulet",
    description="Reduces the next hit taken by 15%.",
    rarity=Rarity.COMMON,
)
class ClayAmulet(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.add_shield(0.15, 1)
        return CardOutcome(f"{user.name} wears a Clay Amulet: 15% shield!")


@card(
    name="Oil Flask",
    description="Next attack deals 1.3x damage.",
    rarity=Rarity.COMMON,
)
class OilFlask(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.add_damage_modifier(1.3, 1)
        return CardOutcome(f"{user.name} oils their weapon: 1.3x damage modifier!")


__all__ = [
    "HealthPotion",
    "ManaPotion",
    "Whetstone",
    "BitterHerb",
    "ScrollOfSight",
    "SimpleBandage",
    "ClayAmulet",
    "OilFlask",
]
