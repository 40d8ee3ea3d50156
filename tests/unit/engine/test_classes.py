"""Tests for the six fighter classes."""

from __future__ import annotations

import random
from typing import Any

import pytest

from card_mayhem.core.exceptions import (
    CharacterDeadError,
    GameEngineError,
    InsufficientResourceError,
)
from card_mayhem.engine.classes import (
    ArcherBehavior,
    MageBehavior,
    WarriorBehavior,
    create_character,
    get_behavior,
)
from card_mayhem.models.effects import DamageOverTime
from card_mayhem.models.enums import CharacterClass


class _FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class TestCreateCharacter:
    """Tests for the character factory."""

    @pytest.mark.parametrize(
        ("character_class", "health", "mana", "attack", "defense"),
        [
            (CharacterClass.WARRIOR, 150, 0, 18, 15),
            (CharacterClass.MAGE, 80, 100, 18, 5),
            (CharacterClass.ARCHER, 100, 50, 15, 10),
            (CharacterClass.PALADIN, 130, 60, 15, 18),
            (CharacterClass.NECROMANCER, 90, 80, 10, 8),
            (CharacterClass.SORCERER, 85, 120, 20, 6),
        ],
    )
    def test_base_stats(
        self,
        character_class: CharacterClass,
        health: int,
        mana: int,
        attack: int,
        defense: int,
    ) -> None:
        """Test each class starts with its base stats."""
        fighter = create_character("Test", character_class)

        assert fighter.character_class == character_class
        assert fighter.health == fighter.max_health == health
        assert fighter.mana == fighter.max_mana == mana
        assert fighter.attack == attack
        assert fighter.defense == defense

    def test_accepts_string_class(self) -> None:
        """Test creation from the class value."""
        assert create_character("Legolas", "archer").character_class == CharacterClass.ARCHER

    def test_unknown_class(self) -> None:
        """Test that an unknown class value is rejected."""
        with pytest.raises(ValueError):
            create_character("Nobody", "bard")

    def test_behaviors_are_per_fighter(self) -> None:
        """Test that two fighters of a class never share behavior state."""
        first = create_character("A", CharacterClass.WARRIOR)
        second = create_character("B", CharacterClass.WARRIOR)
        assert first.behavior is not second.behavior

    def test_get_behavior(self) -> None:
        """Test the behavior registry."""
        assert get_behavior(CharacterClass.MAGE) is MageBehavior

    def test_get_behavior_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a class without a behavior is an engine error."""
        monkeypatch.setattr("card_mayhem.engine.classes._behavior_registry", {})

        with pytest.raises(GameEngineError):
            get_behavior(CharacterClass.MAGE)

    def test_action_metadata(self) -> None:
        """Test the display names of the signature actions."""
        assert WarriorBehavior.primary_name == "Standard Strike"
        assert WarriorBehavior.secondary_name == "Brutal Strike"
        assert MageBehavior.secondary_cost == 45
        assert ArcherBehavior.secondary_cost == 15


class TestWarrior:
    """Tests for the Warrior."""

    def test_standard_strike(self, warrior: Any, mage: Any) -> None:
        """Test the primary attack."""
        result = warrior.primary_attack(mage)

        assert result.damage == 18
        assert mage.health == 62
        assert result.message == "Thorin uses Standard Strike on Gandalf, dealing 18 damage!"

    def test_brutal_strike_cooldown(self, warrior: Any, mage: Any) -> None:
        """Test that Brutal Strike cannot be used twice before the next turn start."""
        first = warrior.secondary_attack(mage)
        assert first.damage == 36
        assert mage.health == 44

        second = warrior.secondary_attack(mage)
        assert second.blocked is True
        assert second.damage == 0
        assert second.message == "Thorin is still exhausted from the last Brutal Strike!"
        assert mage.health == 44

        warrior.start_turn()
        assert warrior.secondary_attack(mage).damage == 36

    def test_cooldown_cleared_by_reset(self, warrior: Any, mage: Any) -> None:
        """Test that reset clears the exhaustion."""
        warrior.secondary_attack(mage)
        warrior.reset()
        assert warrior.secondary_attack(mage).damage == 36

    def test_modifier_applies(self, warrior: Any, mage: Any) -> None:
        """Test that damage modifiers scale class attacks."""
        warrior.add_damage_modifier(2.0, 1)
        assert warrior.primary_attack(mage).damage == 36

    def test_dead_target(self, warrior: Any, mage: Any) -> None:
        """Test that a fallen target cannot be attacked."""
        mage.set_health(0)
        with pytest.raises(CharacterDeadError):
            warrior.primary_attack(mage)


class TestMage:
    """Tests for the Mage."""

    def test_meditate(self, mage: Any, warrior: Any) -> None:
        """Test mana recovery without damage."""
        mage.spend_mana(50)

        result = mage.primary_attack(warrior)

        assert mage.mana == 75
        assert result.damage == 0
        assert warrior.health == 150

    def test_meditate_against_fallen_target(self, mage: Any, warrior: Any) -> None:
        """Test that meditating only needs the Mage alive."""
        mage.spend_mana(50)
        warrior.set_health(0)

        result = mage.primary_attack(warrior)

        assert result.message == "Gandalf meditates and recovers 25 mana."
        assert mage.mana == 75

    def test_meditating_while_fallen(self, mage: Any, warrior: Any) -> None:
        """Test that a fallen Mage cannot meditate."""
        mage.set_health(0)

        with pytest.raises(CharacterDeadError):
            mage.primary_attack(warrior)

        assert warrior.health == 150

    def test_fireball(self, mage: Any, warrior: Any) -> None:
        """Test Fireball cost and damage."""
        result = mage.secondary_attack(warrior)

        assert result.damage == 27
        assert mage.mana == 55
        assert warrior.health == 123

    def test_fireball_without_mana(self, mage: Any, warrior: Any) -> None:
        """Test that a short Fireball changes nothing."""
        mage.spend_mana(90)

        with pytest.raises(InsufficientResourceError) as exc_info:
            mage.secondary_attack(warrior)

        assert exc_info.value.cost == 45
        assert exc_info.value.current == 10
        assert mage.mana == 10
        assert warrior.health == 150


class TestArcher:
    """Tests for the Archer."""

    def test_quick_shot_normal(self, mage: Any) -> None:
        """Test a normal hit."""
        archer = create_character("Legolas", CharacterClass.ARCHER, rng=_FixedRandom(0.9))

        result = archer.primary_attack(mage)

        assert result.damage == 15
        assert not result.message.startswith("CRITICAL")

    def test_quick_shot_critical(self, mage: Any) -> None:
        """Test a critical hit."""
        archer = create_character("Legolas", CharacterClass.ARCHER, rng=_FixedRandom(0.1))

        result = archer.primary_attack(mage)

        assert result.damage == 30
        assert result.message.startswith("CRITICAL! ")

    def test_precise_arrow_ignores_dodge_and_shield(self, mage: Any) -> None:
        """Test the undodgeable shot."""
        archer = create_character("Legolas", CharacterClass.ARCHER)
        mage.set_guaranteed_dodge(True)
        mage.add_shield(0.5, 1)

        result = archer.secondary_attack(mage)

        assert result.damage == 25
        assert archer.mana == 35

    def test_quick_shot_dodged(self, mage: Any) -> None:
        """Test that a dodge stops the quick shot."""
        archer = create_character("Legolas", CharacterClass.ARCHER)
        mage.set_guaranteed_dodge(True)

        result = archer.primary_attack(mage)

        assert result.blocked is True
        assert mage.health == 80


class TestPaladin:
    """Tests for the Paladin."""

    def test_strike_of_faith(self, paladin: Any, mage: Any) -> None:
        """Test damage plus a small self heal."""
        paladin.set_health(100)

        result = paladin.primary_attack(mage)

        assert result.damage == 15
        assert paladin.health == 105

    def test_divine_shield(self, paladin: Any, warrior: Any) -> None:
        """Test the shield halves the next hit."""
        paladin.secondary_attack(warrior)

        assert paladin.mana == 40
        assert warrior.primary_attack(paladin).damage == 9


class TestNecromancer:
    """Tests for the Necromancer."""

    def test_debilitating_touch(self, warrior: Any) -> None:
        """Test damage plus a damage-over-time effect on the target."""
        necro = create_character("Kel'Thuzad", CharacterClass.NECROMANCER)

        result = necro.primary_attack(warrior)

        assert result.damage == 10
        (effect,) = warrior.persistent_effects
        assert isinstance(effect, DamageOverTime)
        assert effect.duration == 2
        assert effect.damage_per_turn == 5

    def test_sacrifice(self, warrior: Any) -> None:
        """Test self damage paid for a heavy hit."""
        necro = create_character("Kel'Thuzad", CharacterClass.NECROMANCER)

        result = necro.secondary_attack(warrior)

        assert necro.health == 80
        assert result.damage == 35
        assert warrior.health == 115


class TestSorcerer:
    """Tests for the Sorcerer."""

    def test_arcane_dart_ignores_shields(self, sorcerer: Any, paladin: Any) -> None:
        """Test direct damage through a shield."""
        paladin.add_shield(0.5, 1)

        assert sorcerer.primary_attack(paladin).damage == 20

    def test_mana_surge_boosts_next_attack(self, sorcerer: Any, paladin: Any) -> None:
        """Test the surge modifier applies to the following attack."""
        sorcerer.secondary_attack(paladin)

        assert sorcerer.mana == 105
        assert sorcerer.primary_attack(paladin).damage == 30
