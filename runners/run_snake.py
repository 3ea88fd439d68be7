# runners/run_snake.py
import logging
from config import AppConfig
from core.game_log import CSVLogger, make_game_logger
from core.session import GameSession
from viz.keyboard import Keyboard
from viz.renderer_pygame import PygameRenderer

log = logging.getLogger(__name__)

def main(cfg: AppConfig) -> None:
    session = GameSession(cfg)
    csv_log = CSVLogger(cfg.game_log_path) if cfg.game_log_path else None
    session.add_listener(make_game_logger(csv_log))

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard(session)
    log.info("window open (%dx%d, tick=%dms)", cfg.grid_size, cfg.grid_size, cfg.tick_ms)

    try:
        while True:
            if kbd.poll() == "quit":
                break
            # the session ticks on its own thread; draw whatever is current
            rend.draw(session.snapshot())
            rend.tick(cfg.fps)
    finally:
        session.close()
        rend.close()
        if csv_log is not None:
            csv_log.close()
