# viz/renderer_headless.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from config import AppConfig
from core.board import board_lines
from core.interfaces import SessionSnapshot
from viz.render_iface import Renderer

@dataclass(frozen=True)
class TextFrame:
    lines: List[str]
    score: int
    status: str
    tick: int

    def render(self) -> str:
        return "\n".join([f"score={self.score} tick={self.tick} status={self.status}", *self.lines])

class HeadlessRenderer(Renderer):
    """Keeps a text rendering of every drawn frame; no window, no timing."""
    def __init__(self, max_frames: Optional[int] = None):
        self.cfg: Optional[AppConfig] = None
        self.frames: List[TextFrame] = []
        self._max_frames = max_frames

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames.clear()

    def draw(self, snap: SessionSnapshot) -> None:
        s = snap.state
        self.frames.append(TextFrame(board_lines(s), s.score, snap.status, s.tick_count))
        if self._max_frames is not None and len(self.frames) > self._max_frames:
            del self.frames[0]

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def last(self) -> Optional[TextFrame]:
        return self.frames[-1] if self.frames else None
