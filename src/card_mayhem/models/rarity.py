"""Rarity table and weighted rarity sampling.

Each tier carries a draw threshold out of 100. Sampling rolls a value in
[0, 100) and walks the tiers from Super Mayhem down to Rare, returning
the first whose threshold the roll falls under, and Common otherwise.
Because the walk stops at Rare, the Common and Uncommon thresholds are
never consulted; the effective odds are 1% Super Mayhem, 3% Mayhem,
16% Legendary, 10% Epic, 20% Rare and 50% Common.
"""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from card_mayhem.models.enums import Rarity


class RarityInfo(BaseModel):
    """Static metadata for one rarity tier.

    Attributes:
        rarity: The tier this entry describes.
        threshold: Cumulative draw threshold out of 100.
        color: RGB display color as an integer (0xRRGGBB).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rarity: Rarity
    threshold: Annotated[int, Field(ge=0, le=100)]
    color: Annotated[int, Field(ge=0, le=0xFFFFFF)]

    @property
    def hex_color(self) -> str:
        """Get the display color as a CSS hex string.

        Returns:
            Color such as '#ff8000'.
        """
        return f"#{self.color:06x}"


RARITY_TABLE: MappingProxyType[Rarity, RarityInfo] = MappingProxyType(
    {
        Rarity.COMMON: RarityInfo(rarity=Rarity.COMMON, threshold=70, color=0x9D9D9D),
        Rarity.UNCOMMON: RarityInfo(rarity=Rarity.UNCOMMON, threshold=50, color=0x1EFF00),
        Rarity.RARE: RarityInfo(rarity=Rarity.RARE, threshold=50, color=0x0070DD),
        Rarity.EPIC: RarityInfo(rarity=Rarity.EPIC, threshold=30, color=0xA335EE),
        Rarity.LEGENDARY: RarityInfo(rarity=Rarity.LEGENDARY, threshold=20, color=0xFF8000),
        Rarity.MAYHEM: RarityInfo(rarity=Rarity.MAYHEM, threshold=4, color=0xFF0040),
        Rarity.SUPER_MAYHEM: RarityInfo(
            rarity=Rarity.SUPER_MAYHEM, threshold=1, color=0xFFD700
        ),
    }
)

SAMPLING_ORDER: tuple[Rarity, ...] = (
    Rarity.SUPER_MAYHEM,
    Rarity.MAYHEM,
    Rarity.LEGENDARY,
    Rarity.EPIC,
    Rarity.RARE,
)


def get_rarity_info(rarity: Rarity) -> RarityInfo:
    """Look up the metadata of a tier.

    Args:
        rarity: Tier to look up.

    Returns:
        The tier's RarityInfo.
    """
    return RARITY_TABLE[rarity]


def rarity_for_roll(roll: float) -> Rarity:
    """Map a roll in [0, 100) to a rarity tier.

    Args:
        roll: Uniform value in [0, 100).

    Returns:
        The first tier in sampling order whose threshold exceeds the roll,
        or Common.
    """
    for rarity in SAMPLING_ORDER:
        if roll < RARITY_TABLE[rarity].threshold:
            return rarity
    return Rarity.COMMON


def sample_rarity(rng: random.Random | None = None) -> Rarity:
    """Draw a rarity tier using the weighted cascade.

    Args:
        rng: Random source; the module-level generator when omitted.

    Returns:
        The sampled tier.
    """
    source = rng or random
    return rarity_for_roll(source.random() * 100)


__all__ = [
    "RarityInfo",
    "RARITY_TABLE",
    "SAMPLING_ORDER",
    "get_rarity_info",
    "rarity_for_roll",
    "sample_rarity",
]
