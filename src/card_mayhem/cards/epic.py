"""Epic cards: heavy strikes, resurrection and control."""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_mayhem.cards.base import Card, CardOutcome, card
from card_mayhem.models.enums import Rarity, SessionEffect


if TYPE_CHECKING:
    from card_mayhem.engine.character import Character


@card(
    name="Forbidden Spellbook",
    description="Halves the opponent's current health. Once per opponent.",
    rarity=Rarity.EPIC,
    requires_target=True,
)
class ForbiddenSpellbook(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        if user.has_card_targeted(self.name, target.name):
            return CardOutcome(
                f"The Forbidden Spellbook has no power left over {target.name}."
            )
        user.record_card_target(self.name, target.name)
        dealt = target.receive_direct_damage(target.health // 2)
        return CardOutcome(
            f"{user.name} reads a forbidden spell! {target.name} loses {dealt} health!"
        )


@card(
    name="Sacred Relic",
    description="Once, survive a killing blow with 20% health.",
    rarity=Rarity.EPIC,
)
class SacredRelic(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_holy_relic(True)
        return CardOutcome(f"{user.name} is blessed by the Sacred Relic and will restore once!")


@card(
    name="Ankh of Rebirth",
    description="Discards your hand and draws 3 Epic cards.",
    rarity=Rarity.EPIC,
)
class AnkhOfRebirth(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.clear_inventory()
        return CardOutcome(
            f"{user.name} raises the Ankh of Rebirth: their hand is reborn!",
            effect=SessionEffect.REFILL_EPIC,
        )


@card(
    name="Crown of Thorns",
    description="Attackers take 5 damage when they strike you.",
    rarity=Rarity.EPIC,
)
class CrownOfThorns(Card):
    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        user.set_thorns(True)
        return CardOutcome(f"{user.name} wears the Crown of Thorns: attackers will bleed on thorns!")


@card(
    name="Scepter of Domination",
    description="The opponent cannot use cards for 2 turns.",
    rarity=Rarity.EPIC,
    requires_target=True,
)
class ScepterOfDomination(Card):
    turns = 2

    def resolve(self, user: Character, target: Character | None) -> CardOutcome:
        target.set_card_block(self.turns)
        return CardOutcome(
            f"{user.name} dominates {target.name}, who cannot use cards for {self.turns} turns!"
        )


__all__ = [
    "ForbiddenSpellbook",
    "SacredRelic",
    "AnkhOfRebirth",
    "CrownOfThorns",
    "ScepterOfDomination",
]
