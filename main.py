#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py show [--difficulty {easy,medium,hard}] [--seed N]
"""
import argparse
import logging
import random
import sys
from typing import Optional, TextIO

from src.sweeper import (
    BASE_CONFIG,
    CoordinateError,
    Difficulty,
    GameManager,
    GameState,
    render_ansi,
    render_solution,
)

HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), q (quit)"


def new_game(args: argparse.Namespace) -> GameManager:
    """Create a game for the requested difficulty."""
    config = BASE_CONFIG.with_difficulty(Difficulty.parse(args.difficulty))
    rng = random.Random(args.seed) if args.seed is not None else None
    return GameManager(config, rng=rng)


def play(args: argparse.Namespace, stdin: TextIO = sys.stdin) -> None:
    """Play an interactive game on the terminal."""
    game = new_game(args)
    board = game.get_board()
    selected = game.config.selected
    print(f"Board: {board.size}x{board.size} with {selected.num_mines} mines")
    print(HELP_TEXT)

    while game.is_playing:
        print()
        print(render_ansi(board, show_coordinates=True))
        print("> ", end="", flush=True)
        line = stdin.readline()
        if not line:
            break
        command = parse_command(line)
        if command is None:
            print(HELP_TEXT)
            continue

        action, row, col = command
        if action == "q":
            break
        try:
            if action == "f":
                game.flag_block(row, col)
            else:
                game.reveal_block(row, col)
        except CoordinateError as exc:
            print(exc)

    print()
    print(render_ansi(board, show_coordinates=True))
    if game.get_game_state() == GameState.WON:
        print("\n*** WIN! ***")
    elif game.get_game_state() == GameState.LOST:
        print("\nGame Over")


def parse_command(line: str) -> Optional[tuple]:
    """
    Parse one line of player input.

    Returns:
        ``(action, row, col)`` for ``r``/``f`` commands, ``("q", -1, -1)``
        for quit, or None if the line is not understood.
    """
    parts = line.split()
    if not parts:
        return None
    action = parts[0].lower()
    if action == "q" and len(parts) == 1:
        return "q", -1, -1
    if action not in ("r", "f") or len(parts) != 3:
        return None
    try:
        return action, int(parts[1]), int(parts[2])
    except ValueError:
        return None


def show(args: argparse.Namespace) -> None:
    """Print a board layout, reveal the corner, and report the result."""
    game = new_game(args)
    print(render_solution(game.get_board()))

    game.reveal_block(0, 0)

    print()
    print(render_ansi(game.get_board()))
    if game.get_game_state() == GameState.LOST:
        print("\nGame Over")
    print(f"State: {game.get_game_state().name}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine activity"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("play", play, "Play an interactive game"),
        ("show", show, "Print a board and reveal its top-left corner"),
    ):
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.add_argument(
            "--difficulty",
            choices=[difficulty.name.lower() for difficulty in Difficulty],
            default="easy",
            help="Board preset",
        )
        subparser.add_argument(
            "--seed", type=int, default=None, help="Seed for mine placement"
        )
        subparser.set_defaults(handler=handler)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.handler(args)


if __name__ == "__main__":
    main()
