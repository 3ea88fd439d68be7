# core/food.py
from __future__ import annotations
import math
from typing import Callable, Iterable, List, Optional
from config import GRID_SIZE
from .interfaces import Cell

def open_cells(snake: Iterable[Cell], grid_size: int = GRID_SIZE) -> List[Cell]:
    """Cells not covered by the snake, row-major (y outer, x inner)."""
    occ = set(snake)
    return [(x, y) for y in range(grid_size) for x in range(grid_size) if (x, y) not in occ]

def place_food(snake: Iterable[Cell], rng: Callable[[], float], grid_size: int = GRID_SIZE) -> Optional[Cell]:
    free = open_cells(snake, grid_size)
    if not free:
        return None  # board full; rng is left untouched
    idx = math.floor(rng() * len(free))
    # rng() hits exactly 1.0 when the LCG state is 2**32 - 1
    return free[min(idx, len(free) - 1)]
