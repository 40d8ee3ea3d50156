"""Arena: the battle state machine.

The Arena runs a battle between two characters. It sequences turns,
dispatches attacks and card plays, detects the winner, keeps the bounded
turn history used for rewinding, and carries out the battle-level side
effects that cards report through their outcome.

Every public operation resolves completely before returning. Rules
violations raised by characters are caught at this boundary, logged,
and returned as unsuccessful results without passing the turn; the only
error that escapes is a failed fighter lookup.

Example:
    >>> arena = Arena.with_default_roster()
    >>> log = arena.run_auto_battle("Thorin", "Gandalf")
    >>> arena.winner is not None or arena.turn >= 100
    True
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from card_mayhem.cards.base import CardOutcome
from card_mayhem.cards.factory import CardFactory
from card_mayhem.core.config import BattleSettings, get_settings
from card_mayhem.core.constants import EPIC_REFILL_COUNT, MAX_INVENTORY
from card_mayhem.core.exceptions import (
    FighterNotFoundError,
    GameEngineError,
    InvalidActionError,
    InventoryFullError,
)
from card_mayhem.core.logging import bind_context, get_logger
from card_mayhem.engine.character import Character
from card_mayhem.engine.classes import create_character
from card_mayhem.engine.history import BattleSnapshot, HistoryRing
from card_mayhem.engine.results import ActionResult
from card_mayhem.models.enums import CharacterClass, Rarity, SessionEffect


if TYPE_CHECKING:
    from card_mayhem.cards.base import Card


logger = get_logger(__name__)

DEFAULT_ROSTER: tuple[tuple[str, CharacterClass], ...] = (
    ("Thorin", CharacterClass.WARRIOR),
    ("Gandalf", CharacterClass.MAGE),
    ("Legolas", CharacterClass.ARCHER),
    ("Arthas", CharacterClass.PALADIN),
    ("Kel'Thuzad", CharacterClass.NECROMANCER),
    ("Medivh", CharacterClass.SORCERER),
)

INACTIVE_MESSAGE = "The battle is not active!"


# =============================================================================
# Battle State and Log
# =============================================================================


class BattleState(StrEnum):
    """Lifecycle of an arena."""

    INACTIVE = "inactive"
    """No battle has been started yet."""

    ACTIVE = "active"
    """A battle is in progress."""

    FINISHED = "finished"
    """The last battle has ended, with or without a winner."""


class LogEntry(BaseModel):
    """One line of the battle log with both fighters' vitals at that moment.

    Attributes:
        turn: Turn number when the entry was written.
        action: Description of what happened.
        player1_health: First fighter's health.
        player2_health: Second fighter's health.
        player1_mana: First fighter's mana.
        player2_mana: Second fighter's mana.
        timestamp: When the entry was written.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    turn: Annotated[int, Field(ge=0)]
    action: str
    player1_health: Annotated[int, Field(ge=0)]
    player2_health: Annotated[int, Field(ge=0)]
    player1_mana: Annotated[int, Field(ge=0)]
    player2_mana: Annotated[int, Field(ge=0)]
    timestamp: datetime = Field(default_factory=datetime.now)


LogCallback = Callable[[LogEntry], None]


# =============================================================================
# Arena
# =============================================================================


class Arena:
    """Orchestrates battles between two characters.

    Attributes:
        factory: Card factory dealing and topping up hands.
    """

    def __init__(
        self,
        *,
        settings: BattleSettings | None = None,
        rng: random.Random | None = None,
        factory: CardFactory | None = None,
    ) -> None:
        """Initialize an arena with an empty roster.

        Args:
            settings: Battle settings; loaded from the environment when omitted.
            rng: Random source shared by the factory and both fighters.
                Seeded from ``settings.rng_seed`` when omitted.
            factory: Card factory; one sharing ``rng`` when omitted.
        """
        self._settings = settings or get_settings().battle
        self._rng = rng or random.Random(self._settings.rng_seed)
        self.factory = factory or CardFactory(self._rng)

        self._fighters: list[Character] = []
        self._player1: Character | None = None
        self._player2: Character | None = None
        self._turn = 0
        self._player1_turn = True
        self._state = BattleState.INACTIVE
        self._winner: Character | None = None
        self._log: list[LogEntry] = []
        self._history = HistoryRing(self._settings.history_size)
        self._log_callbacks: list[LogCallback] = []

    @classmethod
    def with_default_roster(
        cls,
        *,
        settings: BattleSettings | None = None,
        rng: random.Random | None = None,
    ) -> Arena:
        """Create an arena with one registered fighter of every class.

        Args:
            settings: Battle settings; loaded from the environment when omitted.
            rng: Random source for the arena.

        Returns:
            Arena whose roster holds Thorin, Gandalf, Legolas, Arthas,
            Kel'Thuzad and Medivh.
        """
        arena = cls(settings=settings, rng=rng)
        for name, character_class in DEFAULT_ROSTER:
            arena.register_fighter(create_character(name, character_class, rng=arena._rng))
        return arena

    # -------------------------------------------------------------------------
    # Read surface
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> BattleSettings:
        """Get the battle settings in use."""
        return self._settings

    @property
    def player1(self) -> Character | None:
        """Get the first fighter of the current battle."""
        return self._player1

    @property
    def player2(self) -> Character | None:
        """Get the second fighter of the current battle."""
        return self._player2

    @property
    def turn(self) -> int:
        """Get the current turn number."""
        return self._turn

    @property
    def is_player1_turn(self) -> bool:
        """Check if the first fighter is acting."""
        return self._player1_turn

    @property
    def state(self) -> BattleState:
        """Get the lifecycle state."""
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if a battle is in progress."""
        return self._state == BattleState.ACTIVE

    @property
    def winner(self) -> Character | None:
        """Get the winner of the last battle, if decided."""
        return self._winner

    @property
    def log(self) -> list[LogEntry]:
        """Get a copy of the battle log."""
        return self._log.copy()

    @property
    def history_length(self) -> int:
        """Get the number of snapshots available for rewinding."""
        return len(self._history)

    @property
    def current_player(self) -> Character | None:
        """Get the fighter whose turn it is."""
        return self._player1 if self._player1_turn else self._player2

    @property
    def opponent(self) -> Character | None:
        """Get the fighter waiting for its turn."""
        return self._player2 if self._player1_turn else self._player1

    def add_log_callback(self, callback: LogCallback) -> None:
        """Add a callback invoked with every new log entry.

        Args:
            callback: Function to call with the LogEntry.
        """
        self._log_callbacks.append(callback)

    # -------------------------------------------------------------------------
    # Roster
    # -------------------------------------------------------------------------

    @property
    def fighters(self) -> list[Character]:
        """Get a copy of the registered fighters."""
        return self._fighters.copy()

    def register_fighter(self, fighter: Character) -> None:
        """Add a fighter to the roster."""
        self._fighters.append(fighter)
        logger.info(
            "Fighter registered",
            fighter=fighter.name,
            character_class=fighter.character_class.value,
        )

    def find_fighter(self, name: str) -> Character:
        """Look a fighter up by name, ignoring case.

        Args:
            name: Fighter name.

        Returns:
            The registered fighter.

        Raises:
            FighterNotFoundError: If no fighter has that name.
        """
        lowered = name.lower()
        for fighter in self._fighters:
            if fighter.name.lower() == lowered:
                return fighter
        raise FighterNotFoundError(f"Fighter '{name}' not found!", name=name)

    # -------------------------------------------------------------------------
    # Battle lifecycle
    # -------------------------------------------------------------------------

    def start_battle(self, player1: Character, player2: Character) -> None:
        """Start a battle, resetting both fighters and dealing their hands.

        Args:
            player1: Fighter acting first.
            player2: Second fighter.

        Raises:
            InvalidActionError: If the same fighter is given twice.
        """
        if player1 is player2:
            raise InvalidActionError(
                f"{player1.name} cannot battle themselves!",
                character=player1.name,
                action="start_battle",
            )

        for fighter in (player1, player2):
            fighter.reset()
            fighter.rng = self._rng

        self._player1 = player1
        self._player2 = player2
        self._turn = 0
        self._player1_turn = True
        self._state = BattleState.ACTIVE
        self._winner = None
        self._log = []
        self._history.clear()

        for fighter in (player1, player2):
            fighter.clear_inventory()
            self._deal(fighter, self.factory.draw_many(self._settings.initial_hand_size))

        bind_context(battle_id=uuid4().hex)
        logger.info("Battle started", player1=player1.name, player2=player2.name)
        self._record(f"Battle started: {player1.name} vs {player2.name}!")

    def begin_turn(self) -> list[str]:
        """Start the next turn for the fighter whose turn it is.

        The turn counter advances and a snapshot is stored before the
        fighter's turn-start effects run. A stunned fighter loses the
        turn, which passes to the opponent. Otherwise the fighter's hand
        is topped up to the maximum.

        Returns:
            Messages produced by the turn start.
        """
        if not self.is_active:
            return [INACTIVE_MESSAGE]

        self._turn += 1
        self._save_state()

        actor = self._active_fighter()
        outcome = actor.start_turn()
        for message in outcome.messages:
            self._record(message)

        if outcome.skipped:
            self._end_turn()
            return list(outcome.messages)

        self._check_battle_end()
        if self.is_active:
            missing = MAX_INVENTORY - len(actor.inventory)
            self._deal(actor, self.factory.draw_many(missing))

        logger.debug("Turn begun", turn=self._turn, fighter=actor.name)
        return list(outcome.messages)

    def execute_attack(self, slot: int) -> ActionResult:
        """Perform the acting fighter's primary (1) or secondary (2) attack.

        Args:
            slot: 1 for the primary attack, 2 for the secondary.

        Returns:
            The attack result. Unsuccessful results leave the turn with
            the same fighter.
        """
        if not self.is_active:
            return ActionResult(INACTIVE_MESSAGE, success=False)

        actor = self._active_fighter()
        target = self._waiting_fighter()
        try:
            actor.ensure_can_fight()
            if not actor.can_attack:
                return ActionResult(
                    f"{actor.name} cannot attack right now!", blocked=True, success=False
                )
            if slot == 1:
                result = actor.primary_attack(target)
            elif slot == 2:
                result = actor.secondary_attack(target)
            else:
                raise InvalidActionError(
                    f"Unknown attack slot {slot}!",
                    character=actor.name,
                    action="execute_attack",
                )
        except GameEngineError as exc:
            return self._reject(actor, exc)

        self._record(result.message)
        self._check_battle_end()
        if self.is_active:
            self._end_turn()
        return result

    def use_card(self, index: int) -> ActionResult:
        """Play a card from the acting fighter's hand against the opponent.

        After the card resolves, any battle-level effect it reports is
        carried out here.

        Args:
            index: Position of the card in hand.

        Returns:
            The card result. Unsuccessful results leave the turn with
            the same fighter.
        """
        if not self.is_active:
            return ActionResult(INACTIVE_MESSAGE, success=False)

        actor = self._active_fighter()
        target = self._waiting_fighter()
        health_before = target.health
        try:
            outcome = actor.use_item(index, target)
        except GameEngineError as exc:
            return self._reject(actor, exc)

        damage = max(0, health_before - target.health)
        self._record(outcome.message)
        keep_priority = self._apply_session_effect(actor, outcome)

        self._check_battle_end()
        if self.is_active and not keep_priority:
            self._end_turn()
        return ActionResult(outcome.message, damage=damage)

    def rewind(self, turns_back: int | None = None) -> bool:
        """Restore both fighters from an earlier snapshot.

        The snapshot at ``max(0, len(history) - turns_back)`` is restored,
        the turn counter returns to its turn, and that snapshot and every
        later one are discarded.

        Args:
            turns_back: Snapshots to go back; the configured default when omitted.

        Returns:
            True if a snapshot was restored, False if none was available.
        """
        if turns_back is None:
            turns_back = self._settings.rewind_turns
        if self._player1 is None or self._player2 is None:
            return False

        index = max(0, len(self._history) - turns_back)
        if index >= len(self._history):
            return False

        snapshot = self._history[index]
        self._player1.restore_state(snapshot.player1)
        self._player2.restore_state(snapshot.player2)
        self._turn = snapshot.turn
        self._history.truncate(index)

        logger.info("Battle rewound", turns_back=turns_back, restored_turn=snapshot.turn)
        self._record(f"Time has been rewound to turn {snapshot.turn}!")
        return True

    def run_auto_battle(self, name1: str, name2: str) -> list[LogEntry]:
        """Fight two roster fighters automatically with random attacks.

        Args:
            name1: Name of the fighter acting first.
            name2: Name of the second fighter.

        Returns:
            The battle log.

        Raises:
            FighterNotFoundError: If either name is not in the roster.
        """
        fighter1 = self.find_fighter(name1)
        fighter2 = self.find_fighter(name2)
        self.start_battle(fighter1, fighter2)

        while self.is_active and self._turn < self._settings.max_auto_turns:
            self.begin_turn()
            if not self.is_active:
                break
            self.execute_attack(self._rng.choice((1, 2)))

        if self._winner is None:
            self._state = BattleState.FINISHED
            logger.info("Battle stopped at turn cap", turn=self._turn)
            self._record(f"The battle ends without a winner after {self._turn} turns.")
        return self.log

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _active_fighter(self) -> Character:
        fighter = self.current_player
        if fighter is None:
            raise GameEngineError("No battle has been started")
        return fighter

    def _waiting_fighter(self) -> Character:
        fighter = self.opponent
        if fighter is None:
            raise GameEngineError("No battle has been started")
        return fighter

    def _end_turn(self) -> None:
        self._player1_turn = not self._player1_turn

    def _save_state(self) -> None:
        if self._player1 is None or self._player2 is None:
            return
        self._history.push(
            BattleSnapshot(
                turn=self._turn,
                player1=self._player1.snapshot_state(),
                player2=self._player2.snapshot_state(),
            )
        )

    def _deal(self, fighter: Character, cards: list[Card]) -> None:
        for drawn in cards:
            try:
                fighter.add_item(drawn)
            except InventoryFullError:
                break

    def _check_battle_end(self) -> None:
        if self._player1 is None or self._player2 is None:
            return
        if not self._player1.is_alive:
            winner = self._player2
        elif not self._player2.is_alive:
            winner = self._player1
        else:
            return

        self._winner = winner
        self._state = BattleState.FINISHED
        logger.info("Battle ended", winner=winner.name, turn=self._turn)
        self._record(f"{winner.name} wins the battle!")

    def _reject(self, actor: Character, exc: GameEngineError) -> ActionResult:
        logger.warning(
            "Action rejected",
            fighter=actor.name,
            error=exc.message,
            error_type=type(exc).__name__,
        )
        self._record(exc.message)
        return ActionResult(exc.message, success=False)

    def _apply_session_effect(self, actor: Character, outcome: CardOutcome) -> bool:
        """Carry out the battle-level effect of a card.

        Args:
            actor: Fighter who played the card.
            outcome: The card's outcome.

        Returns:
            True if the actor keeps priority instead of passing the turn.
        """
        if outcome.effect is None:
            return False

        logger.debug("Session effect", effect=outcome.effect.value, fighter=actor.name)
        if outcome.effect == SessionEffect.COIN_FLIP:
            return bool(outcome.coin_flip_won)
        if outcome.effect == SessionEffect.REWIND:
            self.rewind(self._settings.rewind_turns)
        elif outcome.effect == SessionEffect.TRANSMUTE:
            self._transmute(actor)
        elif outcome.effect == SessionEffect.REFILL_EPIC:
            self._refill_epic(actor)
        elif outcome.effect == SessionEffect.SWAP_LOWEST:
            self._swap_lowest(actor)
        return False

    def _transmute(self, actor: Character) -> None:
        for index, held in enumerate(actor.inventory):
            if held.rarity in (Rarity.COMMON, Rarity.UNCOMMON):
                transmuted = self.factory.draw_mayhem()
                actor.replace_item(index, transmuted)
                self._record(f"{held.name} is transmuted into {transmuted.name}!")
                return
        self._record(f"{actor.name} has no common card to transmute.")

    def _refill_epic(self, actor: Character) -> None:
        drawn = 0
        for _ in range(EPIC_REFILL_COUNT):
            try:
                actor.add_item(self.factory.draw_epic())
            except InventoryFullError:
                break
            drawn += 1
        self._record(f"{actor.name} draws {drawn} Epic cards!")

    def _swap_lowest(self, actor: Character) -> None:
        hand = actor.inventory
        if not hand:
            self._record(f"{actor.name} has no card to swap.")
            return
        index = min(range(len(hand)), key=lambda position: hand[position].rarity.tier)
        drawn = self.factory.draw_random()
        replaced = actor.replace_item(index, drawn)
        self._record(f"{actor.name} swaps {replaced.name} for {drawn.name}!")

    def _record(self, action: str) -> None:
        entry = LogEntry(
            turn=self._turn,
            action=action,
            player1_health=self._player1.health if self._player1 else 0,
            player2_health=self._player2.health if self._player2 else 0,
            player1_mana=self._player1.mana if self._player1 else 0,
            player2_mana=self._player2.mana if self._player2 else 0,
        )
        self._log.append(entry)
        for callback in self._log_callbacks:
            try:
                callback(entry)
            except Exception:
                logger.exception("Log callback failed")


__all__ = [
    "Arena",
    "BattleState",
    "DEFAULT_ROSTER",
    "LogCallback",
    "LogEntry",
]
