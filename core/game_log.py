from __future__ import annotations
import csv, logging, os
from typing import Dict, Any, Protocol, Callable
from .interfaces import SessionSnapshot

log = logging.getLogger(__name__)

GAME_KEYS = ["game", "seed", "score", "ticks", "length", "reason"]

class Logger(Protocol):
    def log(self, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with a fixed schema; header written once per file."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames or list(GAME_KEYS)
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(
            self._file,
            fieldnames=self._fieldnames,
            extrasaction="ignore",
        )
        if self._file.tell() == 0:
            self._writer.writeheader()

    def log(self, scalars: Dict[str, Any]) -> None:
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

def make_game_logger(logger: Logger | None = None) -> Callable[[SessionSnapshot], None]:
    """
    Returns a session listener that records each finished game once:
      - INFO line through `logging`
      - one CSV row through `logger`, if given
    """
    games = 0
    logged = False  # current game already recorded

    def _on_change(snap: SessionSnapshot) -> None:
        nonlocal games, logged
        s = snap.state
        if not s.is_over:
            # a live game (every restart sends one) re-arms the logger
            logged = False
            return
        if logged:
            return
        logged = True
        games += 1
        log.info("game over: score=%d ticks=%d reason=%s seed=%d",
                 s.score, s.tick_count, s.reason, s.seed)
        if logger is not None:
            logger.log({
                "game": games,
                "seed": s.seed,
                "score": s.score,
                "ticks": s.tick_count,
                "length": len(s.snake),
                "reason": s.reason,
            })
            logger.flush()

    return _on_change
