"""Card catalog and card factory.

Importing this package registers every card type, so the factory pools
are complete as soon as any card module is used.
"""

from __future__ import annotations

from card_mayhem.cards.base import (
    Card,
    CardOutcome,
    card,
    get_all_cards,
    get_card,
    get_cards_by_rarity,
)
from card_mayhem.cards.common import (
    BitterHerb,
    ClayAmulet,
    HealthPotion,
    ManaPotion,
    OilFlask,
    ScrollOfSight,
    SimpleBandage,
    Whetstone,
)
from card_mayhem.cards.epic import (
    AnkhOfRebirth,
    CrownOfThorns,
    ForbiddenSpellbook,
    SacredRelic,
    ScepterOfDomination,
)
from card_mayhem.cards.legendary import (
    ChaliceOfInfinity,
    Excalibur,
    EyeOfSauron,
    InvisibilityCloak,
    LichGrimoire,
    PhilosophersStone,
    ThorsHammer,
)
from card_mayhem.cards.mayhem import (
    ApocalypseCoin,
    BlackHole,
    Exodia,
    SupremeWish,
    TheSnap,
    TimeReversal,
)
from card_mayhem.cards.rare import (
    BloodEssence,
    BrokenStaff,
    CrystalOrb,
    IronElixir,
    ShadowCloak,
    ThornShield,
)
from card_mayhem.cards.factory import CardFactory


__all__ = [
    # Base
    "Card",
    "CardOutcome",
    "card",
    "get_all_cards",
    "get_card",
    "get_cards_by_rarity",
    # Factory
    "CardFactory",
    # Common
    "BitterHerb",
    "ClayAmulet",
    "HealthPotion",
    "ManaPotion",
    "OilFlask",
    "ScrollOfSight",
    "SimpleBandage",
    "Whetstone",
    # Rare
    "BloodEssence",
    "BrokenStaff",
    "CrystalOrb",
    "IronElixir",
    "ShadowCloak",
    "ThornShield",
    # Epic
    "AnkhOfRebirth",
    "CrownOfThorns",
    "ForbiddenSpellbook",
    "SacredRelic",
    "ScepterOfDomination",
    # Legendary
    "ChaliceOfInfinity",
    "Excalibur",
    "EyeOfSauron",
    "InvisibilityCloak",
    "LichGrimoire",
    "PhilosophersStone",
    "ThorsHammer",
    # Mayhem
    "ApocalypseCoin",
    "BlackHole",
    "Exodia",
    "SupremeWish",
    "TheSnap",
    "TimeReversal",
]
