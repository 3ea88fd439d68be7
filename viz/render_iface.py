# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from config import AppConfig
from core.interfaces import SessionSnapshot

NOT_STARTED = "not started"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game over"

def status_line(is_started: bool, is_over: bool, paused: bool) -> str:
    """Exactly one of four messages; game over > paused > running > not started."""
    if is_over:
        return GAME_OVER
    if paused:
        return PAUSED
    if is_started:
        return RUNNING
    return NOT_STARTED

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: SessionSnapshot) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
