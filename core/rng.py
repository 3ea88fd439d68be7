# core/rng.py
from __future__ import annotations

_MOD = 2 ** 32
_MULT = 1664525
_INC = 1013904223
_MAX = 0xFFFFFFFF

def lcg_next(s: int) -> int:
    return (_MULT * s + _INC) % _MOD

class LcgRng:
    """
    Linear congruential generator with its state in the open.

    Each call advances the state and returns state / (2**32 - 1). The state is
    a plain int so it can live inside a frozen GameState and be resumed with
    LcgRng(state) on the next tick.
    """
    __slots__ = ("state",)

    def __init__(self, state: int):
        self.state = int(state) % _MOD

    def __call__(self) -> float:
        self.state = lcg_next(self.state)
        return self.state / _MAX

    def __repr__(self) -> str:
        return f"LcgRng(state={self.state})"

def make_rng(seed: int) -> LcgRng:
    return LcgRng(seed)
