# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.interfaces import SessionSnapshot
from viz.render_iface import GAME_OVER, NOT_STARTED
import viz.renderer_colors as theme

HINTS = {
    NOT_STARTED: "Space or an arrow key to start",
    GAME_OVER: "R to restart",
}

def hud_lines(snap: SessionSnapshot, status_color=theme.TEXT):
    """(text, color) rows: score line, the bare status message, then a key hint if any."""
    pause_hint = "P: Resume" if snap.paused else "P: Pause"
    rows = [
        (f"Score: {snap.state.score}   {pause_hint}", theme.TEXT),
        (snap.status, status_color),
    ]
    if snap.status in HINTS:
        rows.append((HINTS[snap.status], theme.TEXT))
    return rows

class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._font: Optional[pg.font.Font] = None
        self._auto_flip = True
        self._grid = 0

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self._grid = cfg.grid_size
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        side = self._grid * self.cell
        self.surf = pg.display.set_mode((side, side))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface (no window, no flip)."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid = cfg.grid_size
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False

    def draw(self, snap: SessionSnapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        s = snap.state

        surf.fill(theme.BG)
        if self.cfg.render_grid_lines:
            self._draw_grid()

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            self._draw_hud(snap)

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    # internals
    def _draw_grid(self) -> None:
        assert self.surf is not None
        side = self._grid * self.cell
        for i in range(self._grid + 1):
            p = i * self.cell
            pg.draw.line(self.surf, theme.GRID, (p, 0), (p, side))
            pg.draw.line(self.surf, theme.GRID, (0, p), (side, p))

    def _draw_hud(self, snap: SessionSnapshot) -> None:
        assert self.surf is not None
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        color = theme.GAME_OVER if snap.status == GAME_OVER else theme.TEXT
        for i, (text, col) in enumerate(hud_lines(snap, color)):
            self.surf.blit(self._font.render(text, True, col), (6, 4 + 20 * i))
