# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Optional, Literal, Protocol

Cell = Tuple[int, int]
Direction = Literal["up", "down", "left", "right"]

@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]      # head first
    committed_dir: Direction
    pending_dir: Direction
    food: Optional[Cell]         # None when the board has no open cell
    score: int
    is_over: bool
    is_started: bool
    rng_state: int
    tick_count: int
    seed: int
    reason: str | None           # "wall" | "self" once is_over
    grid_size: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

@dataclass(frozen=True)
class SessionSnapshot:
    """What a renderer gets after every state change."""
    state: GameState
    paused: bool
    status: str

class StateListener(Protocol):
    def __call__(self, snap: SessionSnapshot) -> None: ...
