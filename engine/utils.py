# engine/utils.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from board import Point

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Core data structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Difficulty:
    """Size of the grid and how many mines it holds."""
    height: int
    width: int
    mines: int

    @property
    def total_cells(self) -> int:
        return self.height * self.width


EMPTY_DIFFICULTY = Difficulty(height=0, width=0, mines=0)

# Default difficulty levels.
DIFFICULTIES: Dict[str, Difficulty] = {
    "easy": Difficulty(height=9, width=9, mines=10),
    "medium": Difficulty(height=16, width=16, mines=40),
    "hard": Difficulty(height=30, width=16, mines=99),
}


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def is_valid_difficulty(difficulty: Difficulty) -> bool:
    """Positive whole dimensions and at least one cell free of mines."""
    values = (difficulty.height, difficulty.width, difficulty.mines)
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return False
    if min(values) <= 0:
        return False
    return difficulty.mines < difficulty.total_cells


def validate_difficulty(difficulty: Difficulty) -> Difficulty:
    """Return the difficulty if usable, otherwise fall back to 'easy'."""
    if is_valid_difficulty(difficulty):
        return difficulty
    logger.warning(
        "height, width and mines must be positive whole numbers with "
        "mines < height*width (got %s). Defaulting to easy config.",
        difficulty,
    )
    return DIFFICULTIES["easy"]


def create_difficulty(height: int, width: int, mines: int) -> Difficulty:
    """Create a difficulty level for a minesweeper game."""
    return validate_difficulty(Difficulty(height=height, width=width, mines=mines))


def create_point(x: int, y: int) -> Point:
    return Point(x=x, y=y)
