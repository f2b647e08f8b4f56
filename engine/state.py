# engine/state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from board import CellStatus, Grid, iter_cells
from engine.utils import EMPTY_DIFFICULTY, Difficulty


class GameStatus(Enum):
    """Lifecycle of a game: waiting -> ready -> running -> win | loss."""
    WAITING = "waiting"
    READY = "ready"
    RUNNING = "running"
    WIN = "win"
    LOSS = "loss"

    @property
    def is_over(self) -> bool:
        return self in (GameStatus.WIN, GameStatus.LOSS)


@dataclass(frozen=True)
class CellCounts:
    """
    revealed  : revealed plus detonated cells
    flagged   : flagged cells
    detonated : detonated cells (0 or 1 in practice)
    total     : every cell of the grid
    """
    revealed: int = 0
    flagged: int = 0
    detonated: int = 0
    total: int = 0


@dataclass(frozen=True)
class GameView:
    """Values derived from a game state; never stored, always recomputed."""
    status: GameStatus
    counts: CellCounts
    remaining_flags: int


@dataclass(frozen=True)
class GameState:
    """
    Everything needed to continue a game.

    saved_grid holds the grid as it was just before a losing reveal, so the
    move can be undone once.
    """
    difficulty: Difficulty = EMPTY_DIFFICULTY
    grid: Grid = ()
    rand_seed: int = 1
    saved_grid: Optional[Grid] = None

    @property
    def view(self) -> GameView:
        return derive_view(self)

    @property
    def status(self) -> GameStatus:
        return calc_status(count_cells(self.grid))


def count_cells(grid: Grid) -> CellCounts:
    revealed = flagged = detonated = total = 0
    for cell in iter_cells(grid):
        total += 1
        if cell.status == CellStatus.REVEALED:
            revealed += 1
        elif cell.status == CellStatus.DETONATED:
            revealed += 1
            detonated += 1
        elif cell.status == CellStatus.FLAGGED:
            flagged += 1
    return CellCounts(revealed=revealed, flagged=flagged, detonated=detonated, total=total)


def calc_status(counts: CellCounts) -> GameStatus:
    if counts.total == 0:
        return GameStatus.WAITING
    if counts.revealed == 0:
        return GameStatus.READY
    if counts.detonated > 0:
        return GameStatus.LOSS
    if counts.total == counts.revealed:
        return GameStatus.WIN
    return GameStatus.RUNNING


def derive_view(state: GameState) -> GameView:
    counts = count_cells(state.grid)
    status = calc_status(counts)
    if status.is_over:
        remaining_flags = 0
    else:
        # Over-flagging is allowed and shows up as a negative count.
        remaining_flags = state.difficulty.mines - counts.flagged
    return GameView(status=status, counts=counts, remaining_flags=remaining_flags)
