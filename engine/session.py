# engine/session.py
from __future__ import annotations

from typing import Iterable, Optional

from board import Cell, Point, render_grid
from engine import actions
from engine.state import GameState, GameStatus, GameView
from engine.utils import Difficulty


class GameSession:
    """
    Holds the current state of one game and forwards moves to the reducer.

    Typical usage:
        session = GameSession()
        session.start_game(DIFFICULTIES["easy"], rand_seed=42)
        session.reveal_cell(Point(4, 4))
        print(session.render())
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._state = state or actions.reset()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def view(self) -> GameView:
        return self._state.view

    @property
    def status(self) -> GameStatus:
        return self._state.status

    def start_game(self, difficulty: Difficulty, rand_seed: int) -> GameState:
        self._state = actions.start_game(difficulty, rand_seed)
        return self._state

    def reveal_cell(self, point: Point) -> GameState:
        self._state = actions.reveal_cell(self._state, point)
        return self._state

    def toggle_flag(self, point: Point) -> GameState:
        self._state = actions.toggle_flag(self._state, point)
        return self._state

    def undo_losing_move(self) -> GameState:
        self._state = actions.undo_losing_move(self._state)
        return self._state

    def load_game(self, grid: Iterable[Iterable[Cell]], rand_seed: int) -> GameState:
        self._state = actions.load_game(grid, rand_seed)
        return self._state

    def reset(self) -> GameState:
        self._state = actions.reset()
        return self._state

    def render(self, show_all: bool = False) -> str:
        return render_grid(self._state.grid, show_all=show_all)
