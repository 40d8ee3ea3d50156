"""Structured results of battle actions.

Front ends use the coarse category of a result to choose an animation.
The category is inferred from the damage dealt and, failing that, from
keywords in the message text; it carries no gameplay meaning.
"""

from __future__ import annotations

from dataclasses import dataclass

from card_mayhem.models.enums import EffectCategory


HEAL_KEYWORDS: tuple[str, ...] = (
    "heal",
    "recover",
    "restore",
    "regenerat",
)

BUFF_KEYWORDS: tuple[str, ...] = (
    "shield",
    "modifier",
    "immune",
    "invulnerable",
    "dodge",
    "thorns",
    "next attack",
    "meditat",
)


def classify_action(message: str, damage: int = 0) -> EffectCategory:
    """Infer the effect category of an action.

    Args:
        message: Text describing the action.
        damage: Damage the action dealt.

    Returns:
        DAMAGE when damage was dealt, then HEAL or BUFF by keyword,
        otherwise NEUTRAL.
    """
    if damage > 0:
        return EffectCategory.DAMAGE

    text = message.lower()
    if any(keyword in text for keyword in HEAL_KEYWORDS):
        return EffectCategory.HEAL
    if any(keyword in text for keyword in BUFF_KEYWORDS):
        return EffectCategory.BUFF
    return EffectCategory.NEUTRAL


@dataclass(frozen=True)
class ActionResult:
    """Result of an attack or card use.

    Attributes:
        message: Human-readable description of what happened.
        damage: Damage dealt to the opponent (0 if none).
        blocked: Whether the action was stopped by a defensive status.
        success: False when the action was rejected and the turn did not pass.
    """

    message: str
    damage: int = 0
    blocked: bool = False
    success: bool = True

    @property
    def category(self) -> EffectCategory:
        """Get the presentation category of the result."""
        return classify_action(self.message, self.damage)


__all__ = [
    "ActionResult",
    "BUFF_KEYWORDS",
    "HEAL_KEYWORDS",
    "classify_action",
]
