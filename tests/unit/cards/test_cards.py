"""Tests for the card catalog and card effects."""

from __future__ import annotations

from typing import Any

import pytest

from card_mayhem.cards import (
    AnkhOfRebirth,
    ApocalypseCoin,
    BitterHerb,
    BlackHole,
    BloodEssence,
    BrokenStaff,
    ChaliceOfInfinity,
    ClayAmulet,
    CrownOfThorns,
    CrystalOrb,
    Excalibur,
    Exodia,
    EyeOfSauron,
    ForbiddenSpellbook,
    HealthPotion,
    InvisibilityCloak,
    IronElixir,
    LichGrimoire,
    ManaPotion,
    PhilosophersStone,
    SacredRelic,
    ScepterOfDomination,
    ScrollOfSight,
    ShadowCloak,
    SimpleBandage,
    SupremeWish,
    TheSnap,
    ThornShield,
    ThorsHammer,
    TimeReversal,
    Whetstone,
    get_all_cards,
    get_card,
    get_cards_by_rarity,
)
from card_mayhem.models.effects import DamageOverTime, MinionEffect
from card_mayhem.models.enums import Rarity, SessionEffect


class TestCardRegistry:
    """Tests for card registration and lookup."""

    def test_pool_sizes(self) -> None:
        """Test the number of cards in each pool."""
        assert len(get_cards_by_rarity(Rarity.COMMON)) == 8
        assert len(get_cards_by_rarity(Rarity.UNCOMMON)) == 0
        assert len(get_cards_by_rarity(Rarity.RARE)) == 6
        assert len(get_cards_by_rarity(Rarity.EPIC)) == 5
        assert len(get_cards_by_rarity(Rarity.LEGENDARY)) == 7
        assert len(get_cards_by_rarity(Rarity.MAYHEM)) == 5
        assert len(get_cards_by_rarity(Rarity.SUPER_MAYHEM)) == 1

    def test_names_are_unique(self) -> None:
        """Test that no two cards share a display name."""
        names = [cls.name for cls in get_all_cards()]
        assert len(names) == len(set(names))

    def test_get_card_ignores_case(self) -> None:
        """Test case-insensitive lookup by display name."""
        assert get_card("thor's hammer") is ThorsHammer
        assert get_card("EXODIA") is Exodia
        assert get_card("Missing Card") is None

    def test_unique_flag_follows_rarity(self) -> None:
        """Test that only Mayhem tier cards are once per battle."""
        for cls in get_all_cards():
            assert cls.unique == cls.rarity.is_unique_tier
        assert Exodia.unique is True
        assert HealthPotion.unique is False

    def test_str_and_repr(self) -> None:
        """Test card string forms."""
        potion = HealthPotion()
        assert str(potion) == "Health Potion [Common]"
        assert "HealthPotion" in repr(potion)
        assert "common" in repr(potion)


class TestTargeting:
    """Tests for cards that need an opponent."""

    def test_missing_target_does_nothing(self, warrior: Any) -> None:
        """Test that a targeted card played without a target is a no-op."""
        outcome = ThorsHammer().use(warrior)

        assert outcome.message == "Thor's Hammer needs a target, nothing happens."
        assert outcome.effect is None

    def test_self_targeted_card_ignores_target(self, warrior: Any, mage: Any) -> None:
        """Test that self-only cards resolve with or without a target."""
        warrior.set_health(100)

        HealthPotion().use(warrior, mage)

        assert warrior.health == 110
        assert mage.health == 80


class TestCommonCards:
    """Tests for the Common pool."""

    def test_health_potion_clamps(self, warrior: Any) -> None:
        """Test healing capped at maximum health."""
        warrior.set_health(145)

        outcome = HealthPotion().use(warrior)

        assert warrior.health == 150
        assert "heals 5 HP" in outcome.message

    def test_mana_potion(self, mage: Any) -> None:
        """Test mana restoration."""
        mage.spend_mana(50)

        ManaPotion().use(mage)

        assert mage.mana == 70

    def test_whetstone_adds_modifier(self, warrior: Any) -> None:
        """Test a one-turn 1.2x modifier."""
        Whetstone().use(warrior)

        (modifier,) = warrior.damage_modifiers
        assert modifier.multiplier == 1.2
        assert modifier.duration == 1

    def test_bitter_herb_cleanses(self, warrior: Any) -> None:
        """Test removal of persistent effects."""
        warrior.add_persistent_effect(DamageOverTime(name="Poison", duration=3, damage_per_turn=2))

        outcome = BitterHerb().use(warrior)

        assert warrior.persistent_effects == []
        assert "Poison" in outcome.message

    def test_bitter_herb_without_effects(self, warrior: Any) -> None:
        """Test the herb with nothing to cleanse."""
        assert "Nothing to cleanse" in BitterHerb().use(warrior).message

    def test_scroll_of_sight_reveals_hand(self, warrior: Any, mage: Any) -> None:
        """Test that the opponent's hand is listed."""
        mage.add_item(Excalibur())
        mage.add_item(ManaPotion())

        outcome = ScrollOfSight().use(warrior, mage)

        assert "Excalibur, Mana Potion" in outcome.message

    def test_simple_bandage(self, warrior: Any) -> None:
        """Test small heal."""
        warrior.set_health(100)
        SimpleBandage().use(warrior)
        assert warrior.health == 105

    def test_clay_amulet(self, warrior: Any) -> None:
        """Test a 15% shield."""
        ClayAmulet().use(warrior)

        (shield,) = warrior.shields
        assert shield.reduction == 0.15


class TestRareCards:
    """Tests for the Rare pool."""

    def test_iron_elixir(self, warrior: Any) -> None:
        """Test base attack immunity."""
        IronElixir().use(warrior)
        assert warrior.base_attack_immunity == 1

    def test_broken_staff_curses_target(self, warrior: Any, mage: Any) -> None:
        """Test that the curse lands on the target."""
        BrokenStaff().use(mage, warrior)

        assert warrior.next_attack_fails is True
        assert mage.next_attack_fails is False

    def test_broken_staff_voids_next_attack_on_target(self, warrior: Any, mage: Any) -> None:
        """Test that the next attack against the cursed target misses."""
        BrokenStaff().use(warrior, mage)

        missed = warrior.primary_attack(mage)

        assert missed.damage == 0
        assert missed.blocked is True
        assert missed.message == "Thorin attacks, but the attack fails!"
        assert mage.health == 80
        assert mage.next_attack_fails is False

        assert warrior.primary_attack(mage).damage == 18

    def test_shadow_cloak(self, mage: Any) -> None:
        """Test guaranteed dodge."""
        ShadowCloak().use(mage)
        assert mage.has_guaranteed_dodge is True

    def test_crystal_orb_reports_swap(self, mage: Any) -> None:
        """Test that the swap is left to the arena."""
        assert CrystalOrb().use(mage).effect == SessionEffect.SWAP_LOWEST

    def test_blood_essence_drains(self, warrior: Any, mage: Any) -> None:
        """Test direct drain that heals the user."""
        warrior.set_health(100)
        mage.add_shield(0.5, 1)

        BloodEssence().use(warrior, mage)

        assert mage.health == 75
        assert warrior.health == 105

    def test_thorn_shield(self, warrior: Any) -> None:
        """Test thorns on the user."""
        ThornShield().use(warrior)
        assert warrior.has_thorns is True


class TestEpicCards:
    """Tests for the Epic pool."""

    def test_forbidden_spellbook_halves_health(self, warrior: Any, mage: Any) -> None:
        """Test direct damage of half the target's health."""
        ForbiddenSpellbook().use(warrior, mage)
        assert mage.health == 40

    def test_forbidden_spellbook_once_per_target(self, warrior: Any, mage: Any) -> None:
        """Test that a second book has no power over the same target."""
        ForbiddenSpellbook().use(warrior, mage)

        outcome = ForbiddenSpellbook().use(warrior, mage)

        assert mage.health == 40
        assert "no power left" in outcome.message

    def test_sacred_relic(self, warrior: Any) -> None:
        """Test the relic flag."""
        SacredRelic().use(warrior)
        assert warrior.has_holy_relic is True

    def test_ankh_clears_hand(self, warrior: Any) -> None:
        """Test that the hand is discarded and an epic refill requested."""
        warrior.add_item(HealthPotion())
        warrior.add_item(ManaPotion())

        outcome = AnkhOfRebirth().use(warrior)

        assert warrior.inventory == []
        assert outcome.effect == SessionEffect.REFILL_EPIC

    def test_crown_of_thorns_on_user(self, warrior: Any, mage: Any) -> None:
        """Test that the wearer gains thorns."""
        CrownOfThorns().use(warrior, mage)

        assert warrior.has_thorns is True
        assert mage.has_thorns is False

    def test_scepter_blocks_cards(self, warrior: Any, mage: Any) -> None:
        """Test that the target cannot use cards for two turns."""
        ScepterOfDomination().use(warrior, mage)

        assert mage.card_block == 2
        assert mage.can_use_cards is False


class TestLegendaryCards:
    """Tests for the Legendary pool."""

    def test_chalice_heals_fully_with_penalty(self, warrior: Any) -> None:
        """Test a full heal paid for with a lasting 0.5x modifier."""
        warrior.set_health(10)

        ChaliceOfInfinity().use(warrior)

        assert warrior.health == 150
        (modifier,) = warrior.damage_modifiers
        assert modifier.multiplier == 0.5
        assert modifier.duration > 100

    def test_excalibur(self, warrior: Any) -> None:
        """Test a 2x modifier."""
        Excalibur().use(warrior)
        assert warrior.damage_modifiers[0].multiplier == 2.0

    def test_lich_grimoire_summons_minion(self, warrior: Any, mage: Any) -> None:
        """Test that the minion lives on the user and targets the opponent."""
        LichGrimoire().use(warrior, mage)

        (minion,) = warrior.persistent_effects
        assert isinstance(minion, MinionEffect)
        assert minion.target is mage
        assert minion.duration == 3
        assert minion.damage_per_turn == 10

    def test_eye_of_sauron_burns_first_card(self, warrior: Any, mage: Any) -> None:
        """Test that the opponent loses the first card in hand."""
        mage.add_item(Excalibur())
        mage.add_item(HealthPotion())

        outcome = EyeOfSauron().use(warrior, mage)

        assert [held.name for held in mage.inventory] == ["Health Potion"]
        assert "Excalibur" in outcome.message

    def test_eye_of_sauron_empty_hand(self, warrior: Any, mage: Any) -> None:
        """Test the eye against an empty hand."""
        assert "finds no cards" in EyeOfSauron().use(warrior, mage).message

    def test_invisibility_cloak(self, mage: Any) -> None:
        """Test invulnerability paired with an attack block."""
        InvisibilityCloak().use(mage)

        assert mage.invulnerability == 2
        assert mage.attack_block == 2
        assert mage.can_attack is False

    def test_thors_hammer(self, warrior: Any, mage: Any) -> None:
        """Test shielded damage and stun."""
        ThorsHammer().use(warrior, mage)

        assert mage.health == 40
        assert mage.is_stunned is True

    def test_philosophers_stone_reports_transmute(self, warrior: Any) -> None:
        """Test that the transmutation is left to the arena."""
        assert PhilosophersStone().use(warrior).effect == SessionEffect.TRANSMUTE


class TestMayhemCards:
    """Tests for the Mayhem and Super Mayhem pools."""

    def test_apocalypse_coin(self, warrior: Any, mage: Any) -> None:
        """Test both fighters drop to 1 HP and the flip is reported."""
        outcome = ApocalypseCoin().use(warrior, mage)

        assert warrior.health == 1
        assert mage.health == 1
        assert outcome.effect == SessionEffect.COIN_FLIP
        assert outcome.coin_flip_won in (True, False)

    def test_black_hole(self, warrior: Any, mage: Any) -> None:
        """Test both hands destroyed and cards disabled for the battle."""
        warrior.add_item(HealthPotion())
        mage.add_item(ManaPotion())

        BlackHole().use(warrior, mage)

        assert warrior.inventory == []
        assert mage.inventory == []
        assert warrior.can_use_cards is False
        assert mage.can_use_cards is False

    def test_supreme_wish_attacks_when_healthy(self, warrior: Any, mage: Any) -> None:
        """Test direct damage at or above half health."""
        warrior.set_health(75)
        mage.add_shield(0.5, 1)

        SupremeWish().use(warrior, mage)

        assert mage.health == 40
        assert warrior.health == 75

    def test_supreme_wish_heals_when_low(self, warrior: Any, mage: Any) -> None:
        """Test healing below half health."""
        warrior.set_health(74)

        SupremeWish().use(warrior, mage)

        assert warrior.health == 124
        assert mage.health == 80

    def test_time_reversal_reports_rewind(self, warrior: Any) -> None:
        """Test that the rewind is left to the arena."""
        assert TimeReversal().use(warrior).effect == SessionEffect.REWIND

    def test_the_snap(self, warrior: Any, mage: Any) -> None:
        """Test halved health and halved hands on both sides."""
        for _ in range(3):
            warrior.add_item(HealthPotion())
        mage.set_health(1)
        mage.add_item(ManaPotion())

        TheSnap().use(warrior, mage)

        assert warrior.health == 75
        assert mage.health == 1
        assert len(warrior.inventory) == 2
        assert len(mage.inventory) == 1

    def test_exodia(self, warrior: Any, mage: Any) -> None:
        """Test instant defeat of the opponent."""
        Exodia().use(warrior, mage)

        assert mage.health == 0
        assert mage.is_alive is False

    @pytest.mark.parametrize("card_type", [ApocalypseCoin, BlackHole, TheSnap, Exodia])
    def test_mayhem_cards_need_target(self, card_type: type, warrior: Any) -> None:
        """Test that targeted Mayhem cards do nothing alone."""
        outcome = card_type().use(warrior)

        assert "needs a target" in outcome.message
        assert warrior.health == 150
