# tests/conftest.py
import pytest

from board import Cell, CellStatus

H, F, R = CellStatus.HIDDEN, CellStatus.FLAGGED, CellStatus.REVEALED


@pytest.fixture
def final_water_cell_grid():
    """
    3x3 grid with three mines in an L at the bottom-right corner.
    Revealing (0, 2) wins; revealing (2, 2) loses.
    """
    return (
        (Cell(R, 0), Cell(R, 1), Cell(R, 1)),
        (Cell(R, 1), Cell(R, 3), Cell(F, -1)),
        (Cell(H, 1), Cell(F, -1), Cell(H, -1)),
    )
