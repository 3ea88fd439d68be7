# core/directions.py
from __future__ import annotations
from typing import Dict, Optional, Tuple
from .interfaces import Direction

UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

def is_direction(name: object) -> bool:
    return isinstance(name, str) and name in DIRECTIONS

def unit_vector(d: Direction) -> Tuple[int, int]:
    return DIRECTIONS[d]

def clamp_dir(current: Direction, requested: Optional[str]) -> Direction:
    """Resolve a requested turn against the current heading; 180° reversals keep current."""
    if not is_direction(requested) or requested == current:
        return current
    if OPPOSITE[current] == requested:
        return current
    return requested  # type: ignore[return-value]
