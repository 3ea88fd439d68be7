# core/board.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import GameState

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3
GLYPHS = {EMPTY: ".", BODY: "o", HEAD: "H", FOOD: "F"}

def encode_board(s: GameState) -> np.ndarray:
    """(grid, grid) uint8 array indexed [y, x] with EMPTY/BODY/HEAD/FOOD codes."""
    n = s.grid_size
    grid = np.zeros((n, n), dtype=np.uint8)
    if s.food is not None:
        fx, fy = s.food
        grid[fy, fx] = FOOD
    for (x, y) in s.snake[1:]:
        grid[y, x] = BODY
    hx, hy = s.head
    grid[hy, hx] = HEAD
    return grid

def board_lines(s: GameState) -> List[str]:
    grid = encode_board(s)
    return ["".join(GLYPHS[int(v)] for v in row) for row in grid]
