# viz/keyboard.py
import pygame as pg
from core.directions import UP, DOWN, LEFT, RIGHT

KEY_DIRS = {
    pg.K_UP: UP, pg.K_w: UP,
    pg.K_DOWN: DOWN, pg.K_s: DOWN,
    pg.K_LEFT: LEFT, pg.K_a: LEFT,
    pg.K_RIGHT: RIGHT, pg.K_d: RIGHT,
}

class Keyboard:
    """Translates pygame events into GameSession calls. poll() returns "quit" or None."""
    def __init__(self, session):
        self.session = session

    def handle(self, e) -> str | None:
        if e.type == pg.QUIT:
            return "quit"
        if e.type != pg.KEYDOWN:
            return None
        if e.key == pg.K_ESCAPE:
            return "quit"
        if e.key in KEY_DIRS:
            # later keys overwrite pending_dir, so only the last one before a tick counts
            self.session.request_direction(KEY_DIRS[e.key])
        elif e.key == pg.K_SPACE:
            self.session.start_or_toggle()
        elif e.key == pg.K_p:
            self.session.toggle_pause()
        elif e.key == pg.K_r:
            self.session.restart()
        return None

    def poll(self):
        for e in pg.event.get():
            if self.handle(e) == "quit":
                return "quit"
        return None
