# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import time
from dataclasses import replace
from typing import Optional
from config import AppConfig
from .interfaces import GameState
from .directions import RIGHT, clamp_dir, unit_vector
from .food import place_food
from .rng import LcgRng, make_rng

DEFAULT_CONFIG = AppConfig()

def now_seed() -> int:
    """Wall-clock milliseconds, reduced to the 32-bit seed range."""
    return time.time_ns() // 1_000_000 % 2 ** 32

def init_state(seed: Optional[int] = None, cfg: AppConfig = DEFAULT_CONFIG) -> GameState:
    if seed is None:
        seed = now_seed()
    cx, cy = cfg.grid_size // 2, cfg.grid_size // 2
    snake = tuple((cx - i, cy) for i in range(cfg.start_len))
    rng = make_rng(seed)
    food = place_food(snake, rng, cfg.grid_size)
    return GameState(
        snake=snake,
        committed_dir=RIGHT,
        pending_dir=RIGHT,
        food=food,
        score=0,
        is_over=False,
        is_started=False,
        rng_state=rng.state,
        tick_count=0,
        seed=seed,
        reason=None,
        grid_size=cfg.grid_size,
    )

def next_state(state: GameState) -> GameState:
    """Advance one tick. Returns `state` itself when the game is over or not started."""
    if state.is_over or not state.is_started:
        return state

    d = clamp_dir(state.committed_dir, state.pending_dir)
    hx, hy = state.head
    dx, dy = unit_vector(d)
    new_head = (hx + dx, hy + dy)

    # collisions; the tail still counts even though it would move this tick
    n = state.grid_size
    if not (0 <= new_head[0] < n and 0 <= new_head[1] < n):
        return replace(state, is_over=True, committed_dir=d, pending_dir=d, reason="wall")
    if new_head in state.snake:
        return replace(state, is_over=True, committed_dir=d, pending_dir=d, reason="self")

    ate = state.food is not None and new_head == state.food
    snake = (new_head,) + state.snake
    if not ate:
        snake = snake[:-1]

    food, rng_state = state.food, state.rng_state
    if ate:
        rng = LcgRng(state.rng_state)
        food = place_food(snake, rng, n)
        rng_state = rng.state

    return replace(
        state,
        snake=snake,
        committed_dir=d,
        pending_dir=d,
        food=food,
        score=state.score + (1 if ate else 0),
        rng_state=rng_state,
        tick_count=state.tick_count + 1,
    )

def start(state: GameState) -> GameState:
    if state.is_started or state.is_over:
        return state
    return replace(state, is_started=True)

def with_pending(state: GameState, requested: Optional[str]) -> GameState:
    """Buffer a direction request relative to the committed heading."""
    d = clamp_dir(state.committed_dir, requested)
    if d == state.pending_dir:
        return state
    return replace(state, pending_dir=d)
