# main.py

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional, Tuple

from engine.rng import MODULUS
from engine.session import GameSession
from engine.state import GameStatus
from engine.utils import DIFFICULTIES, Difficulty, create_difficulty, create_point


# ---------------------------------------------------------------------------
# Helper functions for user input
# ---------------------------------------------------------------------------

def parse_move(user_input: str) -> Tuple[str, int, int]:
    """
    Parse a move string like:
      'r 3 4' or 'reveal 3 4' -> reveal cell (row=3, col=4)
      'f 3 4' or 'flag 3 4'   -> toggle flag
      'u' or 'undo'           -> undo the losing move
      'n' or 'new'            -> start a new game
      'q' or 'quit'           -> quit

    Returns: (action, row_index, col_index) where row/col are 0-based,
    or -1 for actions that take no cell.

    Raises ValueError on bad input.
    """
    tokens = user_input.strip().split()
    if not tokens:
        raise ValueError("Empty input.")

    action_token = tokens[0].lower()
    if action_token in {"q", "quit", "exit"}:
        return ("quit", -1, -1)
    if action_token in {"u", "undo"}:
        return ("undo", -1, -1)
    if action_token in {"n", "new"}:
        return ("new", -1, -1)

    if len(tokens) != 3:
        raise ValueError("Format must be: 'r row col' or 'f row col' (or 'u', 'n', 'q').")

    if action_token in {"r", "reveal", "o", "open"}:
        action = "reveal"
    elif action_token in {"f", "flag"}:
        action = "flag"
    else:
        raise ValueError("First token must be 'r'/'reveal', 'f'/'flag', 'u', 'n' or 'q'.")

    try:
        # User enters 1-based coordinates; convert to 0-based
        row = int(tokens[1]) - 1
        col = int(tokens[2]) - 1
    except ValueError:
        raise ValueError("Row and column must be integers.")

    return (action, row, col)


def resolve_difficulty(args: argparse.Namespace) -> Difficulty:
    """Custom dimensions win over the named preset when all three are given."""
    if args.rows is not None and args.cols is not None and args.mines is not None:
        return create_difficulty(args.rows, args.cols, args.mines)
    return DIFFICULTIES[args.difficulty]


def new_seed() -> int:
    return random.randrange(1, MODULUS)


def status_line(session: GameSession) -> str:
    view = session.view
    return (
        f"Status: {view.status.value} | "
        f"Flags remaining: {view.remaining_flags} | "
        f"Revealed: {view.counts.revealed}/{view.counts.total}"
    )


# ---------------------------------------------------------------------------
# Human game loop
# ---------------------------------------------------------------------------

def run_game(session: GameSession, difficulty: Difficulty, seed: Optional[int]) -> None:
    print("=== Minesweeper ===")
    print("Commands:")
    print("  r row col -> reveal cell (1-based indices)")
    print("  f row col -> toggle flag")
    print("  u         -> undo the move that lost the game")
    print("  n         -> new game")
    print("  q         -> quit")
    print()

    session.start_game(difficulty, seed if seed is not None else new_seed())
    announced = False

    while True:
        print(session.render())
        print(status_line(session))

        status = session.status
        if status.is_over and not announced:
            if status == GameStatus.WIN:
                print("\nYou opened all safe cells. You win!")
            else:
                print("\nYou hit a mine. Type 'u' to undo or 'n' for a new game.")
            announced = True

        user_input = input("\nEnter your move: ")

        try:
            action, row, col = parse_move(user_input)
        except ValueError as exc:
            print(f"Invalid move: {exc}")
            continue

        if action == "quit":
            print("Goodbye!")
            break
        if action == "new":
            session.start_game(difficulty, new_seed())
            announced = False
            continue
        if action == "undo":
            if status != GameStatus.LOSS:
                print("There is no losing move to undo.")
                continue
            session.undo_losing_move()
            announced = False
            continue

        point = create_point(x=col, y=row)
        if action == "reveal":
            session.reveal_cell(point)
        elif action == "flag":
            session.toggle_flag(point)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal.")
    parser.add_argument('--difficulty', type=str, default='easy', choices=sorted(DIFFICULTIES))
    parser.add_argument('--rows', type=int, default=None)
    parser.add_argument('--cols', type=int, default=None)
    parser.add_argument('--mines', type=int, default=None)
    parser.add_argument('--seed', type=int, default=None,
                        help='Mine layout seed; omitted picks a random one')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    run_game(GameSession(), resolve_difficulty(args), args.seed)


if __name__ == "__main__":
    main()
