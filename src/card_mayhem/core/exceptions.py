"""Custom exception hierarchy for the Card Mayhem battle engine.

All exceptions inherit from CardMayhemError, so callers at the
application boundary can handle every engine failure uniformly while
still reading the domain context carried in ``details``.

Example:
    >>> from card_mayhem.core.exceptions import InsufficientResourceError
    >>> raise InsufficientResourceError(
    ...     "Gandalf does not have enough mana", character="Gandalf", cost=45, current=10
    ... )
"""

from __future__ import annotations

from typing import Any


class CardMayhemError(Exception):
    """Base exception for all Card Mayhem errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception.

        Returns:
            String representation suitable for debugging.
        """
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(CardMayhemError):
    """Raised when settings are missing or invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with the offending key.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(CardMayhemError):
    """Base exception for battle rules violations.

    The arena catches this family at its public boundary and turns it
    into a battle log message, so a failed action never corrupts turn
    state.
    """


class CharacterDeadError(GameEngineError):
    """Raised when a defeated character acts or is targeted."""

    def __init__(
        self,
        message: str,
        *,
        character: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the name of the defeated character.

        Args:
            message: Human-readable error description.
            character: Name of the character with no health left.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        combined_details["character"] = character
        self.character = character
        super().__init__(message, details=combined_details)


class InsufficientResourceError(GameEngineError):
    """Raised when an action costs more mana than the character has.

    Attributes:
        cost: Mana the action required.
        current: Mana the character had when the action was attempted.
    """

    def __init__(
        self,
        message: str,
        *,
        cost: int,
        current: int,
        character: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the attempted cost and the available mana.

        Args:
            message: Human-readable error description.
            cost: Mana the action required.
            current: Mana the character had.
            character: Name of the acting character.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if character:
            combined_details["character"] = character
        combined_details["cost"] = cost
        combined_details["current"] = current
        self.cost = cost
        self.current = current
        super().__init__(message, details=combined_details)


class InventoryFullError(GameEngineError):
    """Raised when a card is added to a full hand."""

    def __init__(
        self,
        message: str,
        *,
        holder: str,
        capacity: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the hand owner and its capacity.

        Args:
            message: Human-readable error description.
            holder: Name of the character whose hand is full.
            capacity: Maximum number of cards in a hand.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        combined_details["holder"] = holder
        combined_details["capacity"] = capacity
        self.holder = holder
        super().__init__(message, details=combined_details)


class InvalidActionError(GameEngineError):
    """Raised for actions the rules forbid.

    Covers out-of-range card indices, blocked card use and a second use
    of a once-per-battle card.
    """

    def __init__(
        self,
        message: str,
        *,
        character: str | None = None,
        action: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid action error with actor context.

        Args:
            message: Human-readable error description.
            character: Name of the acting character.
            action: Short name of the attempted action.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if character:
            combined_details["character"] = character
        if action:
            combined_details["action"] = action
        super().__init__(message, details=combined_details)


# =============================================================================
# Roster Exceptions
# =============================================================================


class FighterNotFoundError(CardMayhemError):
    """Raised when a roster lookup by name finds nothing."""

    def __init__(
        self,
        message: str,
        *,
        name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the name that was searched for.

        Args:
            message: Human-readable error description.
            name: The fighter name that was not found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        combined_details["name"] = name
        self.name = name
        super().__init__(message, details=combined_details)


__all__ = [
    "CardMayhemError",
    "ConfigurationError",
    "GameEngineError",
    "CharacterDeadError",
    "InsufficientResourceError",
    "InventoryFullError",
    "InvalidActionError",
    "FighterNotFoundError",
]
