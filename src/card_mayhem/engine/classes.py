"""The six fighter classes.

Each class is a :class:`CombatantBehavior` supplying base stats, display
metadata and the two signature actions. Behaviors are registered by
class tag with the :func:`behavior` decorator, and
:func:`create_character` builds a :class:`Character` wired to a fresh
behavior instance, so per-fighter state such as the Warrior's cooldown
never leaks between fighters.

All actions check that both fighters are alive before resolving and
raise ``InsufficientResourceError`` when mana runs short, leaving the
fighters untouched.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, TypeVar

from card_mayhem.core.constants import ARCHER_CRIT_CHANCE
from card_mayhem.core.exceptions import GameEngineError
from card_mayhem.engine.character import Character
from card_mayhem.engine.results import ActionResult
from card_mayhem.models.effects import DamageOverTime
from card_mayhem.models.enums import CharacterClass

B = TypeVar("B", bound=type["CombatantBehavior"])


# =============================================================================
# Behavior Contract
# =============================================================================


class CombatantBehavior(ABC):
    """Class-specific stats and actions of a fighter."""

    character_class: ClassVar[CharacterClass]
    max_health: ClassVar[int]
    max_mana: ClassVar[int]
    attack: ClassVar[int]
    defense: ClassVar[int]

    primary_name: ClassVar[str]
    primary_description: ClassVar[str]
    secondary_name: ClassVar[str]
    secondary_description: ClassVar[str]
    secondary_cost: ClassVar[int] = 0

    @abstractmethod
    def primary(self, actor: Character, target: Character) -> ActionResult:
        """Perform the primary action."""

    @abstractmethod
    def secondary(self, actor: Character, target: Character) -> ActionResult:
        """Perform the secondary action."""

    def on_turn_start(self, actor: Character) -> None:
        """Hook run at the end of the actor's turn-start processing."""

    def reset(self) -> None:
        """Clear any per-battle state."""


_behavior_registry: dict[CharacterClass, type[CombatantBehavior]] = {}


def behavior(character_class: CharacterClass) -> Callable[[B], B]:
    """Decorator to register the behavior of a fighter class.

    Args:
        character_class: Class tag the behavior implements.

    Returns:
        Class decorator.
    """

    def decorator(cls: B) -> B:
        cls.character_class = character_class
        _behavior_registry[character_class] = cls
        return cls

    return decorator


def get_behavior(character_class: CharacterClass) -> type[CombatantBehavior]:
    """Get the behavior registered for a class tag.

    Raises:
        GameEngineError: If no behavior is registered for the class.
    """
    try:
        return _behavior_registry[character_class]
    except KeyError:
        raise GameEngineError(
            f"No behavior registered for class {character_class}",
            details={"character_class": str(character_class)},
        ) from None


def _blocked(
    actor: Character,
    target: Character,
    *,
    base_attack: bool = False,
    ignore_dodge: bool = False,
) -> ActionResult | None:
    reason = actor.check_attack_blocked(target, base_attack=base_attack, ignore_dodge=ignore_dodge)
    if reason is None:
        return None
    return ActionResult(reason, blocked=True)


# =============================================================================
# Fighter Classes
# =============================================================================


@behavior(CharacterClass.WARRIOR)
class WarriorBehavior(CombatantBehavior):
    """Sturdy melee fighter without mana.

    Brutal Strike leaves the Warrior exhausted until its next turn start,
    so it cannot be used twice within one turn cycle.
    """

    max_health = 150
    max_mana = 0
    attack = 18
    defense = 15

    primary_name = "Standard Strike"
    primary_description = "Deals 18 physical damage."
    secondary_name = "Brutal Strike"
    secondary_description = "Deals double damage (36). Cannot be used on consecutive turns."

    def __init__(self) -> None:
        self.exhausted = False

    def primary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        if blocked := _blocked(actor, target, base_attack=True):
            return blocked
        dealt = actor.deal_damage(target, 18)
        return ActionResult(
            f"{actor.name} uses {self.primary_name} on {target.name}, dealing {dealt} damage!",
            damage=dealt,
        )

    def secondary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        if self.exhausted:
            return ActionResult(
                f"{actor.name} is still exhausted from the last {self.secondary_name}!",
                blocked=True,
            )
        self.exhausted = True
        if blocked := _blocked(actor, target):
            return blocked
        dealt = actor.deal_damage(target, 36)
        return ActionResult(
            f"{actor.name} uses {self.secondary_name} on {target.name}, "
            f"dealing {dealt} massive damage!",
            damage=dealt,
        )

    def on_turn_start(self, actor: Character) -> None:
        self.exhausted = False

    def reset(self) -> None:
        self.exhausted = False


@behavior(CharacterClass.MAGE)
class MageBehavior(CombatantBehavior):
    """Fragile caster trading turns for mana."""

    max_health = 80
    max_mana = 100
    attack = 18
    defense = 5

    primary_name = "Meditate"
    primary_description = "Recovers 25 mana. Deals no damage."
    secondary_name = "Fireball"
    secondary_description = "Costs 45 mana. Deals 1.5x attack damage."
    secondary_cost = 45

    def primary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight()
        recovered = actor.recover_mana(25)
        return ActionResult(f"{actor.name} meditates and recovers {recovered} mana.")

    def secondary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        actor.pay_mana(self.secondary_cost, self.secondary_name)
        if blocked := _blocked(actor, target):
            return blocked
        dealt = actor.deal_damage(target, int(actor.attack * 1.5))
        return ActionResult(
            f"{actor.name} hurls a {self.secondary_name} at {target.name}, "
            f"dealing {dealt} damage!",
            damage=dealt,
        )


@behavior(CharacterClass.ARCHER)
class ArcherBehavior(CombatantBehavior):
    """Ranged fighter with critical hits and an undodgeable shot."""

    max_health = 100
    max_mana = 50
    attack = 15
    defense = 10

    primary_name = "Quick Shot"
    primary_description = "Deals 15 damage. 30% chance of a critical hit (double damage)."
    secondary_name = "Precise Arrow"
    secondary_description = "Costs 15 mana. Deals 25 fixed damage that cannot be dodged."
    secondary_cost = 15

    def primary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        if blocked := _blocked(actor, target, base_attack=True):
            return blocked
        critical = actor.rng.random() < ARCHER_CRIT_CHANCE
        dealt = actor.deal_damage(target, 30 if critical else 15)
        prefix = "CRITICAL! " if critical else ""
        return ActionResult(
            f"{prefix}{actor.name} uses {self.primary_name} on {target.name}, "
            f"dealing {dealt} damage!",
            damage=dealt,
        )

    def secondary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        actor.pay_mana(self.secondary_cost, self.secondary_name)
        if blocked := _blocked(actor, target, ignore_dodge=True):
            return blocked
        dealt = actor.deal_direct_damage(target, 25)
        return ActionResult(
            f"{actor.name} looses a {self.secondary_name} at {target.name}, "
            f"dealing {dealt} unavoidable damage!",
            damage=dealt,
        )


@behavior(CharacterClass.PALADIN)
class PaladinBehavior(CombatantBehavior):
    """Holy knight that sustains itself and shields against big hits."""

    max_health = 130
    max_mana = 60
    attack = 15
    defense = 18

    primary_name = "Strike of Faith"
    primary_description = "Deals 15 damage and heals the Paladin for 5 HP."
    secondary_name = "Divine Shield"
    secondary_description = "Costs 20 mana. Reduces the next hit taken by 50%."
    secondary_cost = 20

    def primary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        if blocked := _blocked(actor, target, base_attack=True):
            return blocked
        dealt = actor.deal_damage(target, 15)
        healed = actor.heal(5)
        return ActionResult(
            f"{actor.name} uses {self.primary_name} on {target.name}, dealing {dealt} damage "
            f"and healing {healed} HP!",
            damage=dealt,
        )

    def secondary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        actor.pay_mana(self.secondary_cost, self.secondary_name)
        actor.add_shield(0.5, 1)
        return ActionResult(f"{actor.name} raises a {self.secondary_name}: 50% shield!")


@behavior(CharacterClass.NECROMANCER)
class NecromancerBehavior(CombatantBehavior):
    """Dark caster that wears foes down and pays for power with its own life."""

    max_health = 90
    max_mana = 80
    attack = 10
    defense = 8

    primary_name = "Debilitating Touch"
    primary_description = "Deals 10 damage. The target loses 5 HP per turn for 2 turns."
    secondary_name = "Sacrifice"
    secondary_description = "Loses 10 HP to deal 35 damage."
    self_damage = 10

    def primary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        if blocked := _blocked(actor, target, base_attack=True):
            return blocked
        dealt = actor.deal_damage(target, 10)
        target.add_persistent_effect(
            DamageOverTime(name="Debilitation", duration=2, damage_per_turn=5)
        )
        return ActionResult(
            f"{actor.name} uses {self.primary_name} on {target.name}, dealing {dealt} damage "
            f"and inflicting Debilitation (5 damage per turn for 2 turns)!",
            damage=dealt,
        )

    def secondary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        actor.receive_direct_damage(self.self_damage)
        if blocked := _blocked(actor, target):
            return blocked
        dealt = actor.deal_damage(target, 35)
        return ActionResult(
            f"{actor.name} performs a {self.secondary_name}, losing {self.self_damage} HP "
            f"and dealing {dealt} shadow damage to {target.name}!",
            damage=dealt,
        )


@behavior(CharacterClass.SORCERER)
class SorcererBehavior(CombatantBehavior):
    """Arcane caster whose bolts ignore shields."""

    max_health = 85
    max_mana = 120
    attack = 20
    defense = 6

    primary_name = "Arcane Dart"
    primary_description = "Deals 20 damage. Ignores the target's shields."
    secondary_name = "Mana Surge"
    secondary_description = "Costs 15 mana. Next attack deals 1.5x damage."
    secondary_cost = 15

    def primary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        if blocked := _blocked(actor, target, base_attack=True):
            return blocked
        dealt = actor.deal_direct_damage(target, 20)
        return ActionResult(
            f"{actor.name} fires an {self.primary_name} at {target.name}, "
            f"dealing {dealt} damage!",
            damage=dealt,
        )

    def secondary(self, actor: Character, target: Character) -> ActionResult:
        actor.ensure_can_fight(target)
        actor.pay_mana(self.secondary_cost, self.secondary_name)
        actor.add_damage_modifier(1.5, 1)
        return ActionResult(f"{actor.name} channels a {self.secondary_name}: 1.5x damage modifier!")


# =============================================================================
# Factory Function
# =============================================================================


def create_character(
    name: str,
    character_class: CharacterClass | str,
    *,
    rng: random.Random | None = None,
) -> Character:
    """Create a fighter of the given class at full health.

    Args:
        name: Display name.
        character_class: Class tag or its string value (e.g. 'warrior').
        rng: Random source for the fighter's rolls.

    Returns:
        The new character.

    Example:
        >>> thorin = create_character("Thorin", CharacterClass.WARRIOR)
        >>> thorin.health
        150
    """
    character_class = CharacterClass(character_class)
    behavior_cls = get_behavior(character_class)
    return Character(
        name,
        character_class,
        behavior=behavior_cls(),
        max_health=behavior_cls.max_health,
        max_mana=behavior_cls.max_mana,
        attack=behavior_cls.attack,
        defense=behavior_cls.defense,
        rng=rng,
    )


__all__ = [
    "CombatantBehavior",
    "WarriorBehavior",
    "MageBehavior",
    "ArcherBehavior",
    "PaladinBehavior",
    "NecromancerBehavior",
    "SorcererBehavior",
    "behavior",
    "create_character",
    "get_behavior",
]
