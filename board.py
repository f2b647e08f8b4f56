from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

MINE = -1

# One full period of the linear-congruential generator.
MAX_ATTEMPTS_PER_MINE = 233280


class CellStatus(Enum):
    """Possible visible states of a cell."""
    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()
    DETONATED = auto()


@dataclass(frozen=True)
class Cell:
    """A single square on the Minesweeper grid."""
    status: CellStatus = CellStatus.HIDDEN
    mine_count: int = 0

    @property
    def is_mine(self) -> bool:
        return self.mine_count == MINE

    @property
    def is_hidden(self) -> bool:
        return self.status == CellStatus.HIDDEN

    @property
    def is_flagged(self) -> bool:
        return self.status == CellStatus.FLAGGED

    @property
    def is_revealed(self) -> bool:
        return self.status == CellStatus.REVEALED

    @property
    def is_visible(self) -> bool:
        """Revealed or detonated."""
        return self.status in (CellStatus.REVEALED, CellStatus.DETONATED)

    def display_char(self, show_all: bool = False) -> str:
        """
        Glyph for this cell.

        - '#'  : hidden
        - '🚩' : flagged
        - '1'..'8' : revealed, that many adjacent mines
        - '🌊' : revealed, no adjacent mines
        - '💣' : revealed mine (or any mine when show_all=True)
        - '💥' : the mine that was clicked
        """
        if show_all:
            return "💣" if self.is_mine else str(self.mine_count)

        if self.status == CellStatus.HIDDEN:
            return "#"
        if self.status == CellStatus.FLAGGED:
            return "🚩"
        if self.status == CellStatus.DETONATED:
            return "💥"

        if self.is_mine:
            return "💣"
        return str(self.mine_count) if self.mine_count > 0 else "🌊"


@dataclass(frozen=True)
class Point:
    """An x-y point of a grid; the cell lives at grid[y][x]."""
    x: int
    y: int


Grid = Tuple[Tuple[Cell, ...], ...]
RandomNumberGenerator = Callable[..., float]

HIDDEN_CELL = Cell()


# ------------------------------------------------------------------
# Core grid / cell helpers
# ------------------------------------------------------------------
def empty_grid(height: int, width: int) -> Grid:
    """Generate a grid of hidden cells with no mines laid yet."""
    row = tuple(HIDDEN_CELL for _ in range(width))
    return tuple(row for _ in range(height))


def grid_height(grid: Grid) -> int:
    return len(grid)


def grid_width(grid: Grid) -> int:
    return len(grid[0]) if grid else 0


def in_bounds(grid: Grid, point: Point) -> bool:
    return 0 <= point.y < grid_height(grid) and 0 <= point.x < grid_width(grid)


def get_cell(grid: Grid, point: Point) -> Optional[Cell]:
    """Cell at the point, or None when the point is off the grid."""
    if not in_bounds(grid, point):
        return None
    return grid[point.y][point.x]


def neighbors(grid: Grid, point: Point) -> Iterable[Point]:
    """Yield all neighbouring points (up to 8)."""
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            adjacent = Point(point.x + dx, point.y + dy)
            if in_bounds(grid, adjacent):
                yield adjacent


def iter_points(grid: Grid) -> Iterable[Point]:
    """Iterate over all points in row-major order."""
    for y in range(grid_height(grid)):
        for x in range(grid_width(grid)):
            yield Point(x, y)


def iter_cells(grid: Grid) -> Iterable[Cell]:
    for row in grid:
        yield from row


def count_mines(grid: Grid) -> int:
    return sum(1 for cell in iter_cells(grid) if cell.is_mine)


def _apply(grid: Grid, updates: Dict[Point, Cell]) -> Grid:
    """Return a new grid with the given cells replaced. Untouched rows are shared."""
    if not updates:
        return grid
    rows: Dict[int, List[Cell]] = {}
    for point, cell in updates.items():
        if point.y not in rows:
            rows[point.y] = list(grid[point.y])
        rows[point.y][point.x] = cell
    return tuple(
        tuple(rows[y]) if y in rows else row for y, row in enumerate(grid)
    )


# ------------------------------------------------------------------
# Mine placement and counts
# ------------------------------------------------------------------
def point_distance(a: Point, b: Point) -> float:
    """Diagonal-step distance: sqrt(2) per diagonal step, 1 per straight step."""
    dx = abs(b.x - a.x)
    dy = abs(b.y - a.y)
    diagonal = min(dx, dy)
    straight = max(dx, dy) - diagonal
    return math.sqrt(2) * diagonal + straight


def min_mine_distance(height: int, width: int) -> int:
    """Small grids only keep the seed cell clear; larger ones clear its ring too."""
    return 1 if height < 4 and width < 4 else 2


def place_mines(
    grid: Grid,
    seed_point: Point,
    num_mines: int,
    rng: RandomNumberGenerator,
) -> Grid:
    """
    Lay mines away from the seed point and compute every cell's mine count.

    Candidate points are drawn from the generator (x first, then y) and
    rejected when they are too close to the seed point or already mined.
    Cell statuses are left as they are.
    """
    height, width = grid_height(grid), grid_width(grid)
    min_distance = min_mine_distance(height, width)
    eligible = [
        p for p in iter_points(grid) if point_distance(seed_point, p) >= min_distance
    ]
    if num_mines > len(eligible):
        logger.warning(
            "Cannot lay %d mines on a %dx%d grid around %s; laying %d instead.",
            num_mines, height, width, seed_point, len(eligible),
        )
        num_mines = len(eligible)

    mines: Set[Point] = set()
    while len(mines) < num_mines:
        mine = _draw_mine_point(seed_point, mines, min_distance, height, width, rng)
        if mine is None:
            mine = next(p for p in eligible if p not in mines)
            logger.warning("Random mine search exhausted; laying mine at %s.", mine)
        mines.add(mine)

    updates: Dict[Point, Cell] = {}
    for point in iter_points(grid):
        cell = grid[point.y][point.x]
        if point in mines:
            count = MINE
        else:
            count = sum(1 for adjacent in neighbors(grid, point) if adjacent in mines)
        if cell.mine_count != count:
            updates[point] = replace(cell, mine_count=count)
    return _apply(grid, updates)


def _draw_mine_point(
    seed_point: Point,
    mines: Set[Point],
    min_distance: int,
    height: int,
    width: int,
    rng: RandomNumberGenerator,
) -> Optional[Point]:
    for _ in range(MAX_ATTEMPTS_PER_MINE):
        x = math.floor(rng() * width)
        y = math.floor(rng() * height)
        candidate = Point(x, y)
        if point_distance(seed_point, candidate) < min_distance:
            continue
        if candidate in mines:
            continue
        return candidate
    return None


# ------------------------------------------------------------------
# Reveal / flag transitions
# ------------------------------------------------------------------
def reveal_point(grid: Grid, point: Point) -> Grid:
    """
    Reveal the cell at the point.

    - Absent, revealed or detonated cells leave the grid untouched.
    - A mine detonates: it becomes DETONATED and every other mine REVEALED.
    - A safe cell is flood-filled; zero-count cells spread to their neighbours.
    - If every safe cell is then revealed, the rest of the grid is revealed.
    """
    cell = get_cell(grid, point)
    if cell is None or cell.is_visible:
        return grid

    if cell.is_mine:
        return _detonate(grid, point)

    grid = _flood_fill_reveal(grid, point)
    if is_win_grid(grid):
        grid = reveal_all(grid)
    return grid


def _detonate(grid: Grid, point: Point) -> Grid:
    updates: Dict[Point, Cell] = {}
    for p in iter_points(grid):
        cell = grid[p.y][p.x]
        if p == point:
            updates[p] = replace(cell, status=CellStatus.DETONATED)
        elif cell.is_mine and not cell.is_revealed:
            updates[p] = replace(cell, status=CellStatus.REVEALED)
    return _apply(grid, updates)


def _flood_fill_reveal(grid: Grid, start: Point) -> Grid:
    """Breadth-first reveal of a zero-count region plus its numbered border."""
    queue = deque([start])
    seen: Set[Point] = {start}
    updates: Dict[Point, Cell] = {}

    while queue:
        point = queue.popleft()
        cell = grid[point.y][point.x]
        if not cell.is_visible:
            updates[point] = replace(cell, status=CellStatus.REVEALED)

        if cell.mine_count != 0:
            continue
        for adjacent in neighbors(grid, point):
            if adjacent not in seen:
                seen.add(adjacent)
                queue.append(adjacent)

    return _apply(grid, updates)


def reveal_all(grid: Grid) -> Grid:
    """Mark every cell that is not yet visible as revealed."""
    updates = {
        p: replace(grid[p.y][p.x], status=CellStatus.REVEALED)
        for p in iter_points(grid)
        if not grid[p.y][p.x].is_visible
    }
    return _apply(grid, updates)


def is_win_grid(grid: Grid) -> bool:
    """True iff every non-mine cell is revealed."""
    return all(cell.is_mine or cell.is_revealed for cell in iter_cells(grid))


def toggle_flag_point(grid: Grid, point: Point) -> Grid:
    """
    Toggle a flag on the cell at the point.
    Only hidden and flagged cells can change.
    """
    cell = get_cell(grid, point)
    if cell is None:
        return grid

    if cell.is_hidden:
        status = CellStatus.FLAGGED
    elif cell.is_flagged:
        status = CellStatus.HIDDEN
    else:
        return grid
    return _apply(grid, {point: replace(cell, status=status)})


# ------------------------------------------------------------------
# Rendering helpers (terminal front-end can just print the result)
# ------------------------------------------------------------------
def to_display_grid(grid: Grid, show_all: bool = False) -> List[List[str]]:
    return [[cell.display_char(show_all=show_all) for cell in row] for row in grid]


def render_grid(grid: Grid, show_all: bool = False) -> str:
    """
    Render the grid as a multiline string, e.g.:

    ---------
    |#, 1, 🌊|
    |#, 🚩, 1|
    ---------
    """
    outer_line = "---" * grid_width(grid)
    lines = [outer_line]
    for row in to_display_grid(grid, show_all=show_all):
        lines.append("|" + ", ".join(row) + "|")
    lines.append(outer_line)
    return "\n".join(lines) + "\n"
