# runners/run_replay.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Tuple
from config import AppConfig
from core.directions import is_direction
from core.game_log import CSVLogger, make_game_logger
from core.interfaces import GameState
from core.session import GameSession
from viz.renderer_headless import HeadlessRenderer

log = logging.getLogger(__name__)

def parse_moves(items: Iterable[str]) -> Dict[int, str]:
    """Parse "<tick>:<dir>" items; the direction is requested before that tick runs."""
    moves: Dict[int, str] = {}
    for item in items:
        tick_s, sep, d = item.partition(":")
        if not sep or not tick_s.strip().isdigit() or not is_direction(d.strip().lower()):
            raise ValueError(f"bad move {item!r}, expected <tick>:<up|down|left|right>")
        moves[int(tick_s)] = d.strip().lower()
    return moves

def replay(cfg: AppConfig, seed: int, moves: Dict[int, str], ticks: int,
           renderer: HeadlessRenderer | None = None) -> Tuple[GameState, List[GameState]]:
    """Run a timer-less session from `seed`; returns the final state and every ticked state."""
    session = GameSession(cfg, seed_source=lambda: seed, driver_factory=None)
    if renderer is not None:
        renderer.open(cfg)
        session.add_listener(renderer.draw)
    csv_log = CSVLogger(cfg.game_log_path) if cfg.game_log_path else None
    session.add_listener(make_game_logger(csv_log))

    history: List[GameState] = []
    try:
        session.start()
        for t in range(ticks):
            if t in moves:
                session.request_direction(moves[t])
            history.append(session.tick())
            if session.state.is_over:
                break
    finally:
        session.close()
        if csv_log is not None:
            csv_log.close()
    return session.state, history

def main(cfg: AppConfig, seed: int, move_items: List[str], ticks: int, show_frames: bool = True) -> GameState:
    rend = HeadlessRenderer()
    final, _ = replay(cfg, seed, parse_moves(move_items), ticks, renderer=rend)
    if show_frames:
        for frame in rend.frames:
            print(frame.render())
            print()
    print(f"seed={seed} score={final.score} ticks={final.tick_count} "
          f"length={len(final.snake)} over={final.is_over} reason={final.reason}")
    return final
