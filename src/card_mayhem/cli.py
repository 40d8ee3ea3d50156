"""Command-line entry point: list the roster or run an automatic battle."""

from __future__ import annotations

import argparse
import sys

from card_mayhem.core.config import get_settings
from card_mayhem.core.exceptions import CardMayhemError, FighterNotFoundError
from card_mayhem.core.logging import clear_context, configure_logging
from card_mayhem.engine.arena import Arena


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(prog="card-mayhem", description="Card Mayhem battle engine")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("fighters", help="List the fighters in the default roster")

    p_battle = sub.add_parser("battle", help="Run an automatic battle between two fighters")
    p_battle.add_argument("fighter1", help="Name of the fighter acting first")
    p_battle.add_argument("fighter2", help="Name of the second fighter")
    p_battle.add_argument("--seed", type=int, default=None, help="Seed for a reproducible battle")
    p_battle.add_argument("--json-logs", action="store_true", help="Emit engine logs as JSON")
    p_battle.add_argument("--log-level", default=None, help="Override the configured log level")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        settings = get_settings()
    except CardMayhemError as exc:
        print(f"Configuration error: {exc.message}", file=sys.stderr)
        return 2

    configure_logging(
        level=getattr(args, "log_level", None) or settings.effective_log_level,
        json_format=getattr(args, "json_logs", False) or settings.json_logs,
        log_file=str(settings.log_file) if settings.log_file else None,
    )

    if args.command == "fighters":
        return _cmd_fighters()
    return _cmd_battle(args)


def _cmd_fighters() -> int:
    arena = Arena.with_default_roster()
    for fighter in arena.fighters:
        print(
            f"{fighter.name:<12} {fighter.character_class.display_name:<12} "
            f"HP {fighter.max_health:>3}  Mana {fighter.max_mana:>3}"
        )
    return 0


def _cmd_battle(args: argparse.Namespace) -> int:
    battle_settings = get_settings().battle
    if args.seed is not None:
        battle_settings = battle_settings.model_copy(update={"rng_seed": args.seed})

    arena = Arena.with_default_roster(settings=battle_settings)
    try:
        log = arena.run_auto_battle(args.fighter1, args.fighter2)
    except FighterNotFoundError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 2
    finally:
        clear_context()

    for entry in log:
        print(
            f"[T{entry.turn:>3}] {entry.action}  "
            f"(HP {entry.player1_health}/{entry.player2_health}, "
            f"Mana {entry.player1_mana}/{entry.player2_mana})"
        )

    if arena.winner is not None:
        print(f"\n=== WINNER: {arena.winner.name} ===")
    else:
        print("\n=== NO WINNER ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
