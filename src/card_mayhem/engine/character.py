"""Character state and combat primitives.

A Character holds a fighter's vitals, mana, hand of cards and every
active effect layer, and exposes the primitives the arena and the cards
resolve through: the damage pipeline, healing, mana, turn-start
processing and state snapshots. Class-specific attacks live in
:mod:`card_mayhem.engine.classes`; a character delegates its primary and
secondary actions to the behavior it was built with.

Invariants kept by every method:
    - ``0 <= health <= max_health`` and ``0 <= mana <= max_mana``
    - at most ``MAX_INVENTORY`` cards in hand
    - every duration and status counter is non-negative
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from card_mayhem.core.constants import (
    MAX_INVENTORY,
    RELIC_RESTORE_FRACTION,
    THORNS_DAMAGE,
    TURN_MANA_RECOVERY,
)
from card_mayhem.core.exceptions import (
    CharacterDeadError,
    InsufficientResourceError,
    InvalidActionError,
    InventoryFullError,
)
from card_mayhem.core.logging import get_logger
from card_mayhem.models.effects import DamageModifier, PersistentEffect, Shield


if TYPE_CHECKING:
    from card_mayhem.cards.base import Card, CardOutcome
    from card_mayhem.engine.classes import CombatantBehavior
    from card_mayhem.engine.results import ActionResult
    from card_mayhem.models.enums import CharacterClass

logger = get_logger(__name__)


# =============================================================================
# Value Types
# =============================================================================


@dataclass(frozen=True)
class CharacterSnapshot:
    """Opaque copy of the rewindable part of a character's state.

    Attributes:
        health: Current health.
        mana: Current mana.
        inventory: Cards in hand, in order.
        persistent_effects: Active persistent effects.
        damage_modifiers: Active damage modifiers.
        shields: Active shields.
    """

    health: int
    mana: int
    inventory: tuple[Card, ...]
    persistent_effects: tuple[PersistentEffect, ...]
    damage_modifiers: tuple[DamageModifier, ...]
    shields: tuple[Shield, ...]


@dataclass(frozen=True)
class TurnStartResult:
    """Outcome of a character's turn-start processing.

    Attributes:
        messages: Messages produced while processing effects.
        skipped: True when the character was stunned and loses the turn.
    """

    messages: tuple[str, ...]
    skipped: bool = False


# =============================================================================
# Character
# =============================================================================


class Character:
    """A battle participant.

    State is only changed through the methods below; properties that
    expose collections return copies.

    Attributes:
        rng: Random source for rolls made on this character's behalf.
    """

    def __init__(
        self,
        name: str,
        character_class: CharacterClass,
        *,
        behavior: CombatantBehavior,
        max_health: int,
        max_mana: int,
        attack: int,
        defense: int,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize a character at full health and mana with an empty hand.

        Args:
            name: Display name.
            character_class: Class tag.
            behavior: Provider of the class-specific actions.
            max_health: Maximum health (at least 1).
            max_mana: Maximum mana (0 for classes without mana).
            attack: Base attack power.
            defense: Defense rating. Advisory only; damage ignores it.
            rng: Random source. A fresh unseeded generator when omitted.
        """
        self._name = name
        self._character_class = character_class
        self._behavior = behavior
        self._max_health = max(1, max_health)
        self._max_mana = max(0, max_mana)
        self._attack = attack
        self._defense = defense
        self.rng = rng or random.Random()

        self._health = self._max_health
        self._mana = self._max_mana
        self._inventory: list[Card] = []
        self._persistent_effects: list[PersistentEffect] = []
        self._damage_modifiers: list[DamageModifier] = []
        self._shields: list[Shield] = []

        self._base_attack_immunity = 0
        self._card_block = 0
        self._invulnerability = 0
        self._attack_block = 0

        self._stunned = False
        self._guaranteed_dodge = False
        self._next_attack_fails = False
        self._holy_relic = False
        self._thorns = False

        self._used_unique_cards: set[str] = set()
        self._card_targets: set[tuple[str, str]] = set()

    # -------------------------------------------------------------------------
    # Read surface
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Get the character's name."""
        return self._name

    @property
    def character_class(self) -> CharacterClass:
        """Get the class tag."""
        return self._character_class

    @property
    def behavior(self) -> CombatantBehavior:
        """Get the provider of the class-specific actions."""
        return self._behavior

    @property
    def health(self) -> int:
        """Get current health."""
        return self._health

    @property
    def max_health(self) -> int:
        """Get maximum health."""
        return self._max_health

    @property
    def mana(self) -> int:
        """Get current mana."""
        return self._mana

    @property
    def max_mana(self) -> int:
        """Get maximum mana."""
        return self._max_mana

    @property
    def attack(self) -> int:
        """Get base attack power."""
        return self._attack

    @property
    def defense(self) -> int:
        """Get the defense rating."""
        return self._defense

    @property
    def inventory(self) -> list[Card]:
        """Get a copy of the cards in hand."""
        return list(self._inventory)

    @property
    def persistent_effects(self) -> list[PersistentEffect]:
        """Get a copy of the active persistent effects."""
        return list(self._persistent_effects)

    @property
    def damage_modifiers(self) -> list[DamageModifier]:
        """Get a copy of the active damage modifiers."""
        return list(self._damage_modifiers)

    @property
    def shields(self) -> list[Shield]:
        """Get a copy of the active shields."""
        return list(self._shields)

    @property
    def used_unique_cards(self) -> frozenset[str]:
        """Get the names of once-per-battle cards already played."""
        return frozenset(self._used_unique_cards)

    @property
    def base_attack_immunity(self) -> int:
        """Get turns remaining of immunity to base attacks."""
        return self._base_attack_immunity

    @property
    def card_block(self) -> int:
        """Get turns remaining during which cards cannot be used."""
        return self._card_block

    @property
    def invulnerability(self) -> int:
        """Get turns remaining of invulnerability."""
        return self._invulnerability

    @property
    def attack_block(self) -> int:
        """Get turns remaining during which attacks are not allowed."""
        return self._attack_block

    @property
    def is_alive(self) -> bool:
        """Check if the character has health left."""
        return self._health > 0

    @property
    def is_stunned(self) -> bool:
        """Check if the character will lose its next turn."""
        return self._stunned

    @property
    def can_use_cards(self) -> bool:
        """Check if card use is currently allowed."""
        return self._card_block == 0

    @property
    def is_invulnerable(self) -> bool:
        """Check if incoming damage is currently absorbed."""
        return self._invulnerability > 0

    @property
    def can_attack(self) -> bool:
        """Check if attacks are currently allowed."""
        return self._attack_block == 0

    @property
    def has_guaranteed_dodge(self) -> bool:
        """Check if the next attack will be dodged."""
        return self._guaranteed_dodge

    @property
    def next_attack_fails(self) -> bool:
        """Check if this character's next attack is doomed to fail."""
        return self._next_attack_fails

    @property
    def has_holy_relic(self) -> bool:
        """Check if a killing blow will be survived once."""
        return self._holy_relic

    @property
    def has_thorns(self) -> bool:
        """Check if attackers take thorns damage."""
        return self._thorns

    # -------------------------------------------------------------------------
    # Class actions
    # -------------------------------------------------------------------------

    def primary_attack(self, target: Character) -> ActionResult:
        """Perform the class's primary action against a target."""
        return self._behavior.primary(self, target)

    def secondary_attack(self, target: Character) -> ActionResult:
        """Perform the class's secondary action against a target."""
        return self._behavior.secondary(self, target)

    def ensure_can_fight(self, target: Character | None = None) -> None:
        """Check that this character and the target are both alive.

        Args:
            target: The opposing character, if the action has one.

        Raises:
            CharacterDeadError: If either has no health left.
        """
        if not self.is_alive:
            raise CharacterDeadError(f"{self._name} has fallen and cannot act!", character=self._name)
        if target is not None and not target.is_alive:
            raise CharacterDeadError(f"{target.name} has already fallen!", character=target.name)

    def check_attack_blocked(
        self,
        target: Character,
        *,
        base_attack: bool = False,
        ignore_dodge: bool = False,
    ) -> str | None:
        """Run the defensive checks an attack must pass.

        A pending next-attack failure on the target is consumed by the
        first attack it receives.

        Args:
            target: The character being attacked.
            base_attack: Whether this is a primary (base) attack.
            ignore_dodge: Whether the attack cannot be dodged.

        Returns:
            A message describing why the attack failed, or None if it lands.
        """
        if target.next_attack_fails:
            target.set_next_attack_fails(False)
            return f"{self._name} attacks, but the attack fails!"
        if base_attack and target.base_attack_immunity > 0:
            return f"{target.name} is immune to base attacks!"
        if target.is_invulnerable:
            return f"{target.name} is invulnerable!"
        if not ignore_dodge and target.has_guaranteed_dodge:
            return f"{target.name} dodges the attack!"
        return None

    # -------------------------------------------------------------------------
    # Damage pipeline
    # -------------------------------------------------------------------------

    def apply_damage_modifiers(self, amount: int) -> int:
        """Scale outgoing damage by every active modifier, in order."""
        for modifier in self._damage_modifiers:
            amount = modifier.apply(amount)
        return amount

    def apply_shields(self, amount: int) -> int:
        """Reduce incoming damage by every active shield, in order."""
        for shield in self._shields:
            amount = shield.reduce(amount)
        return amount

    def deal_damage(self, target: Character, base_damage: int) -> int:
        """Deal damage through modifiers, the target's shields and thorns.

        Args:
            target: Character receiving the damage.
            base_damage: Damage before modifiers and shields.

        Returns:
            Damage the target took.
        """
        dealt = target.receive_damage(self.apply_damage_modifiers(base_damage))
        self._suffer_thorns(target)
        return dealt

    def deal_direct_damage(self, target: Character, base_damage: int) -> int:
        """Deal damage through modifiers only, bypassing the target's shields.

        Args:
            target: Character receiving the damage.
            base_damage: Damage before modifiers.

        Returns:
            Damage the target took.
        """
        dealt = target.receive_direct_damage(self.apply_damage_modifiers(base_damage))
        self._suffer_thorns(target)
        return dealt

    def _suffer_thorns(self, target: Character) -> None:
        if target.has_thorns:
            self.receive_direct_damage(THORNS_DAMAGE)

    def receive_damage(self, amount: int) -> int:
        """Take damage reduced by active shields.

        Args:
            amount: Incoming damage.

        Returns:
            Damage applied after shields (0 while invulnerable).
        """
        if self.is_invulnerable:
            return 0
        return self._lose_health(self.apply_shields(amount))

    def receive_direct_damage(self, amount: int) -> int:
        """Take damage that ignores shields.

        Args:
            amount: Incoming damage.

        Returns:
            Damage applied (0 while invulnerable).
        """
        if self.is_invulnerable:
            return 0
        return self._lose_health(amount)

    def _lose_health(self, amount: int) -> int:
        amount = max(0, amount)
        self.set_health(self._health - amount)
        if self._health == 0 and self._holy_relic:
            self._holy_relic = False
            self.set_health(math.floor(self._max_health * RELIC_RESTORE_FRACTION))
            logger.info("Holy relic triggered", character=self._name, health=self._health)
        return amount

    def set_health(self, value: int) -> None:
        """Set health directly, clamped to [0, max_health]."""
        self._health = min(self._max_health, max(0, value))

    def heal(self, amount: int) -> int:
        """Restore health, clamped to the maximum.

        Returns:
            Health actually restored.
        """
        before = self._health
        self.set_health(self._health + max(0, amount))
        return self._health - before

    # -------------------------------------------------------------------------
    # Mana
    # -------------------------------------------------------------------------

    def recover_mana(self, amount: int) -> int:
        """Restore mana, clamped to the maximum.

        Returns:
            Mana actually restored.
        """
        before = self._mana
        self._mana = min(self._max_mana, max(0, self._mana + max(0, amount)))
        return self._mana - before

    def spend_mana(self, amount: int) -> bool:
        """Deduct mana if enough is available.

        Returns:
            True if the mana was spent, False if there was not enough.
        """
        if self._mana < amount:
            return False
        self._mana -= amount
        return True

    def pay_mana(self, cost: int, action: str) -> None:
        """Spend mana for an action or fail without changing anything.

        Args:
            cost: Mana the action costs.
            action: Name of the action, for the error message.

        Raises:
            InsufficientResourceError: If there is not enough mana.
        """
        current = self._mana
        if not self.spend_mana(cost):
            raise InsufficientResourceError(
                f"{self._name} needs {cost} mana for {action} but has {current}!",
                character=self._name,
                cost=cost,
                current=current,
            )

    # -------------------------------------------------------------------------
    # Effect layers and statuses
    # -------------------------------------------------------------------------

    def add_damage_modifier(self, multiplier: float, duration: int) -> None:
        """Add an outgoing damage multiplier lasting ``duration`` turns."""
        self._damage_modifiers.append(DamageModifier(multiplier=multiplier, duration=duration))

    def add_shield(self, reduction: float, duration: int) -> None:
        """Add a damage reduction layer lasting ``duration`` turns."""
        self._shields.append(Shield(reduction=reduction, duration=duration))

    def add_persistent_effect(self, effect: PersistentEffect) -> None:
        """Add an effect applied at each of this character's turn starts."""
        self._persistent_effects.append(effect)

    def clear_persistent_effects(self) -> list[PersistentEffect]:
        """Remove every persistent effect.

        Returns:
            The removed effects.
        """
        removed, self._persistent_effects = self._persistent_effects, []
        return removed

    def set_base_attack_immunity(self, turns: int) -> None:
        self._base_attack_immunity = max(0, turns)

    def set_card_block(self, turns: int) -> None:
        self._card_block = max(0, turns)

    def set_invulnerable(self, turns: int) -> None:
        self._invulnerability = max(0, turns)

    def set_attack_block(self, turns: int) -> None:
        self._attack_block = max(0, turns)

    def set_stunned(self, value: bool) -> None:
        self._stunned = value

    def set_guaranteed_dodge(self, value: bool) -> None:
        self._guaranteed_dodge = value

    def set_next_attack_fails(self, value: bool) -> None:
        self._next_attack_fails = value

    def set_holy_relic(self, value: bool) -> None:
        self._holy_relic = value

    def set_thorns(self, value: bool) -> None:
        self._thorns = value

    def record_card_target(self, card_name: str, target_name: str) -> None:
        """Remember that a once-per-target card was played on a target."""
        self._card_targets.add((card_name, target_name))

    def has_card_targeted(self, card_name: str, target_name: str) -> bool:
        """Check if a once-per-target card was already played on a target."""
        return (card_name, target_name) in self._card_targets

    # -------------------------------------------------------------------------
    # Turn processing
    # -------------------------------------------------------------------------

    def start_turn(self) -> TurnStartResult:
        """Process the start of this character's turn.

        A stunned character only clears the stun and loses the turn.
        Otherwise persistent effects are applied and aged, mana is
        recovered, status counters and effect layers are aged, and a
        guaranteed dodge expires.

        Returns:
            The messages produced, and whether the turn is skipped.
        """
        if self._stunned:
            self._stunned = False
            self._behavior.on_turn_start(self)
            logger.debug("Turn lost to stun", character=self._name)
            return TurnStartResult(
                messages=(f"{self._name} is stunned and loses the turn!",),
                skipped=True,
            )

        messages: list[str] = []

        surviving: list[PersistentEffect] = []
        for effect in list(self._persistent_effects):
            messages.append(effect.apply(self))
            aged = effect.tick()
            if aged.duration > 0:
                surviving.append(aged)
        self._persistent_effects = surviving

        if self._max_mana > 0:
            recovered = self.recover_mana(TURN_MANA_RECOVERY)
            messages.append(f"{self._name} recovers {recovered} mana.")

        self._base_attack_immunity = max(0, self._base_attack_immunity - 1)
        self._card_block = max(0, self._card_block - 1)
        self._invulnerability = max(0, self._invulnerability - 1)
        self._attack_block = max(0, self._attack_block - 1)

        self._shields = [aged for aged in (s.tick() for s in self._shields) if aged.duration > 0]
        self._damage_modifiers = [
            aged for aged in (m.tick() for m in self._damage_modifiers) if aged.duration > 0
        ]

        self._guaranteed_dodge = False
        self._behavior.on_turn_start(self)

        logger.debug("Turn started", character=self._name, health=self._health, mana=self._mana)
        return TurnStartResult(messages=tuple(messages))

    # -------------------------------------------------------------------------
    # Inventory
    # -------------------------------------------------------------------------

    def add_item(self, item: Card) -> None:
        """Add a card to the hand.

        Raises:
            InventoryFullError: If the hand already holds the maximum.
        """
        if len(self._inventory) >= MAX_INVENTORY:
            raise InventoryFullError(
                f"{self._name}'s inventory is full (max {MAX_INVENTORY} cards)!",
                holder=self._name,
                capacity=MAX_INVENTORY,
            )
        self._inventory.append(item)

    def _check_index(self, index: int, action: str) -> None:
        if not 0 <= index < len(self._inventory):
            raise InvalidActionError(
                f"There is no card at position {index}!",
                character=self._name,
                action=action,
                details={"index": index, "hand_size": len(self._inventory)},
            )

    def use_item(self, index: int, target: Character | None = None) -> CardOutcome:
        """Play the card at ``index``.

        Args:
            index: Position of the card in hand.
            target: Opposing character, if any.

        Returns:
            The card's outcome.

        Raises:
            InvalidActionError: If the index is out of range, card use is
                blocked, or a once-per-battle card was already played.
        """
        self._check_index(index, "use_item")
        if not self.can_use_cards:
            raise InvalidActionError(
                f"{self._name} cannot use cards right now!",
                character=self._name,
                action="use_item",
            )

        item = self._inventory[index]
        if item.unique and item.name in self._used_unique_cards:
            raise InvalidActionError(
                f"{item.name} was already used in this battle!",
                character=self._name,
                action="use_item",
            )

        outcome = item.use(self, target)
        if item.unique:
            self._used_unique_cards.add(item.name)

        # The card may have reshaped the hand itself, so remove it by identity
        for position, held in enumerate(self._inventory):
            if held is item:
                del self._inventory[position]
                break

        logger.debug("Card used", character=self._name, card=item.name)
        return outcome

    def discard_item(self, index: int) -> Card:
        """Remove and return the card at ``index``.

        Raises:
            InvalidActionError: If the index is out of range.
        """
        self._check_index(index, "discard_item")
        return self._inventory.pop(index)

    def replace_item(self, index: int, item: Card) -> Card:
        """Swap the card at ``index`` for another, keeping hand order.

        Returns:
            The card that was replaced.

        Raises:
            InvalidActionError: If the index is out of range.
        """
        self._check_index(index, "replace_item")
        replaced = self._inventory[index]
        self._inventory[index] = item
        return replaced

    def clear_inventory(self) -> None:
        """Discard every card in hand."""
        self._inventory.clear()

    # -------------------------------------------------------------------------
    # Snapshots and reset
    # -------------------------------------------------------------------------

    def snapshot_state(self) -> CharacterSnapshot:
        """Capture health, mana, hand and effect layers."""
        return CharacterSnapshot(
            health=self._health,
            mana=self._mana,
            inventory=tuple(self._inventory),
            persistent_effects=tuple(self._persistent_effects),
            damage_modifiers=tuple(self._damage_modifiers),
            shields=tuple(self._shields),
        )

    def restore_state(self, snapshot: CharacterSnapshot) -> None:
        """Restore the state captured by :meth:`snapshot_state`."""
        self.set_health(snapshot.health)
        self._mana = min(self._max_mana, max(0, snapshot.mana))
        self._inventory = list(snapshot.inventory)
        self._persistent_effects = list(snapshot.persistent_effects)
        self._damage_modifiers = list(snapshot.damage_modifiers)
        self._shields = list(snapshot.shields)

    def reset(self) -> None:
        """Return to full health and mana with an empty hand and no effects."""
        self._health = self._max_health
        self._mana = self._max_mana
        self._inventory.clear()
        self._persistent_effects.clear()
        self._damage_modifiers.clear()
        self._shields.clear()

        self._base_attack_immunity = 0
        self._card_block = 0
        self._invulnerability = 0
        self._attack_block = 0

        self._stunned = False
        self._guaranteed_dodge = False
        self._next_attack_fails = False
        self._holy_relic = False
        self._thorns = False

        self._used_unique_cards.clear()
        self._card_targets.clear()
        self._behavior.reset()

    def __repr__(self) -> str:
        return (
            f"Character(name={self._name!r}, class={self._character_class.value!r}, "
            f"health={self._health}/{self._max_health}, mana={self._mana}/{self._max_mana})"
        )


__all__ = [
    "Character",
    "CharacterSnapshot",
    "TurnStartResult",
]
