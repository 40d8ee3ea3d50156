"""Tests for rarity tiers and the weighted rarity cascade."""

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError

from card_mayhem.models.enums import Rarity
from card_mayhem.models.rarity import (
    RARITY_TABLE,
    SAMPLING_ORDER,
    RarityInfo,
    get_rarity_info,
    rarity_for_roll,
    sample_rarity,
)


class _FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class TestRarityEnum:
    """Tests for the Rarity enumeration."""

    def test_tiers_are_ordered(self) -> None:
        """Test that tier increases from Common to Super Mayhem."""
        tiers = [rarity.tier for rarity in Rarity]
        assert tiers == list(range(7))
        assert Rarity.COMMON.tier == 0
        assert Rarity.SUPER_MAYHEM.tier == 6

    def test_display_name(self) -> None:
        """Test human-readable names."""
        assert Rarity.SUPER_MAYHEM.display_name == "Super Mayhem"
        assert Rarity.EPIC.display_name == "Epic"

    def test_unique_tiers(self) -> None:
        """Test that only the Mayhem tiers are once per battle."""
        unique = {rarity for rarity in Rarity if rarity.is_unique_tier}
        assert unique == {Rarity.MAYHEM, Rarity.SUPER_MAYHEM}


class TestRarityTable:
    """Tests for the static rarity metadata."""

    def test_every_tier_has_info(self) -> None:
        """Test that each tier is described exactly once."""
        assert set(RARITY_TABLE) == set(Rarity)
        for rarity, info in RARITY_TABLE.items():
            assert info.rarity == rarity

    def test_thresholds(self) -> None:
        """Test the draw thresholds of each tier."""
        assert get_rarity_info(Rarity.COMMON).threshold == 70
        assert get_rarity_info(Rarity.UNCOMMON).threshold == 50
        assert get_rarity_info(Rarity.RARE).threshold == 50
        assert get_rarity_info(Rarity.EPIC).threshold == 30
        assert get_rarity_info(Rarity.LEGENDARY).threshold == 20
        assert get_rarity_info(Rarity.MAYHEM).threshold == 4
        assert get_rarity_info(Rarity.SUPER_MAYHEM).threshold == 1

    def test_hex_color(self) -> None:
        """Test the CSS color rendering."""
        assert get_rarity_info(Rarity.LEGENDARY).hex_color == "#ff8000"
        assert get_rarity_info(Rarity.SUPER_MAYHEM).hex_color == "#ffd700"

    def test_table_is_read_only(self) -> None:
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            RARITY_TABLE[Rarity.COMMON] = RARITY_TABLE[Rarity.EPIC]  # type: ignore[index]

    def test_info_is_frozen(self) -> None:
        """Test that rarity metadata is immutable."""
        info = get_rarity_info(Rarity.RARE)
        with pytest.raises(ValidationError):
            info.threshold = 99  # type: ignore[misc]

    def test_threshold_bounds(self) -> None:
        """Test that thresholds must lie within 0-100."""
        with pytest.raises(ValidationError):
            RarityInfo(rarity=Rarity.RARE, threshold=150, color=0)


class TestRarityCascade:
    """Tests for mapping rolls to tiers."""

    def test_sampling_order_skips_uncommon(self) -> None:
        """Test that Uncommon is never reached by the cascade."""
        assert Rarity.UNCOMMON not in SAMPLING_ORDER
        assert Rarity.COMMON not in SAMPLING_ORDER
        assert SAMPLING_ORDER[0] == Rarity.SUPER_MAYHEM

    @pytest.mark.parametrize(
        ("roll", "expected"),
        [
            (0.0, Rarity.SUPER_MAYHEM),
            (0.99, Rarity.SUPER_MAYHEM),
            (1.0, Rarity.MAYHEM),
            (3.5, Rarity.MAYHEM),
            (4.0, Rarity.LEGENDARY),
            (19.9, Rarity.LEGENDARY),
            (20.0, Rarity.EPIC),
            (30.0, Rarity.RARE),
            (49.9, Rarity.RARE),
            (50.0, Rarity.COMMON),
            (99.9, Rarity.COMMON),
        ],
    )
    def test_rarity_for_roll(self, roll: float, expected: Rarity) -> None:
        """Test the boundaries of each band."""
        assert rarity_for_roll(roll) == expected

    def test_sample_rarity_scales_roll(self) -> None:
        """Test that the random fraction is scaled to a percentage."""
        assert sample_rarity(_FixedRandom(0.25)) == Rarity.EPIC
        assert sample_rarity(_FixedRandom(0.4)) == Rarity.RARE
        assert sample_rarity(_FixedRandom(0.02)) == Rarity.MAYHEM
        assert sample_rarity(_FixedRandom(0.9)) == Rarity.COMMON

    def test_sample_rarity_is_reproducible(self) -> None:
        """Test that equal seeds give equal sequences."""
        first = [sample_rarity(random.Random(5)) for _ in range(3)]
        second = [sample_rarity(random.Random(5)) for _ in range(3)]
        assert first == second

    def test_distribution(self) -> None:
        """Test the observed frequencies over many draws."""
        rng = random.Random(42)
        draws = [sample_rarity(rng) for _ in range(20000)]

        common_share = draws.count(Rarity.COMMON) / len(draws)
        rare_share = draws.count(Rarity.RARE) / len(draws)

        assert Rarity.UNCOMMON not in draws
        assert 0.47 < common_share < 0.53
        assert 0.17 < rare_share < 0.23
