# engine/actions.py
"""
Game state transitions.

Every function takes a GameState (or the inputs for a new one) and returns a
GameState. Rejected moves return the input object unchanged; accepted moves
return a new state whose grid shares untouched rows with the old one.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from board import (
    Cell,
    Grid,
    Point,
    CellStatus,
    count_mines,
    empty_grid,
    get_cell,
    is_win_grid,
    place_mines,
    reveal_all,
    reveal_point,
    toggle_flag_point,
)
from engine.rng import make_rng
from engine.state import GameState, GameStatus
from engine.utils import EMPTY_DIFFICULTY, Difficulty, validate_difficulty

logger = logging.getLogger(__name__)


def start_game(difficulty: Difficulty, rand_seed: int) -> GameState:
    """Create a game. Mines are not laid until the first reveal."""
    difficulty = validate_difficulty(difficulty)
    return GameState(
        difficulty=difficulty,
        grid=empty_grid(difficulty.height, difficulty.width),
        rand_seed=rand_seed,
    )


def reveal_cell(state: GameState, point: Point) -> GameState:
    """
    Reveal the cell at the point.

    - READY: mines are laid around the point first, so it is always safe.
    - RUNNING: a mine loses the game and keeps the old grid for undo.
    - Any other status, an off-grid point or a visible cell is ignored.
    """
    status = state.status
    cell = get_cell(state.grid, point)
    if cell is None or cell.is_visible:
        logger.debug("Ignoring reveal at %s: cell absent or already visible.", point)
        return state

    if status == GameStatus.READY:
        grid = place_mines(
            state.grid,
            point,
            state.difficulty.mines,
            make_rng(state.rand_seed),
        )
        return replace(state, grid=reveal_point(grid, point), saved_grid=None)

    if status != GameStatus.RUNNING:
        logger.debug("Ignoring reveal at %s: game is %s.", point, status.value)
        return state

    if cell.is_mine:
        return replace(state, grid=reveal_point(state.grid, point), saved_grid=state.grid)

    return replace(state, grid=reveal_point(state.grid, point))


def toggle_flag(state: GameState, point: Point) -> GameState:
    """Toggle the flag on a hidden or flagged cell."""
    grid = toggle_flag_point(state.grid, point)
    if grid is state.grid:
        return state
    return replace(state, grid=grid)


def undo_losing_move(state: GameState) -> GameState:
    """Restore the grid from just before the losing reveal."""
    status = state.status
    if status != GameStatus.LOSS or state.saved_grid is None:
        logger.warning(
            "Cannot undo: game status is %s, it must be %s with a saved grid.",
            status.value, GameStatus.LOSS.value,
        )
        return state
    return replace(state, grid=state.saved_grid, saved_grid=None)


def load_game(grid: Iterable[Iterable[Cell]], rand_seed: int) -> GameState:
    """
    Rebuild a game from a previously emitted grid.

    The difficulty is recomputed from the grid's shape and mine count.
    A grid with rows of different lengths cannot be played and yields a
    fresh waiting state. A grid whose safe cells are all revealed is
    finished off as a win.
    """
    rows: Grid = tuple(tuple(row) for row in grid)
    if any(len(row) != len(rows[0]) for row in rows):
        logger.warning("Cannot load a grid with rows of different lengths.")
        return reset()
    if rows and not rows[0]:
        rows = ()
    detonated = any(cell.status == CellStatus.DETONATED for row in rows for cell in row)
    if not detonated and is_win_grid(rows):
        rows = reveal_all(rows)

    difficulty = Difficulty(
        height=len(rows),
        width=len(rows[0]) if rows else 0,
        mines=count_mines(rows),
    )
    return GameState(difficulty=difficulty, grid=rows, rand_seed=rand_seed)


def reset() -> GameState:
    """Return to the waiting state with an empty difficulty."""
    return GameState(difficulty=EMPTY_DIFFICULTY, grid=(), rand_seed=1, saved_grid=None)
