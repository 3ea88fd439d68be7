# core/session.py
from __future__ import annotations
import itertools, logging, threading
from typing import Callable, List, Optional
from config import AppConfig
from viz.render_iface import status_line
from .interfaces import GameState, SessionSnapshot, StateListener
from .directions import is_direction
from . import snake_rules

log = logging.getLogger(__name__)

class TickDriver:
    """Calls `on_tick` every `period_sec` on a daemon thread until stopped."""
    def __init__(self, on_tick: Callable[[], None], period_sec: float, name: str = "TickDriver"):
        self._on_tick = on_tick
        self._period = max(1e-3, float(period_sec))
        self._stop = threading.Event()
        self._t: Optional[threading.Thread] = None
        self._name = name

    def start(self) -> None:
        if self._t is not None:
            return
        self._t = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._t.start()

    def _run(self) -> None:
        # wait() returns True only once stop is set
        while not self._stop.wait(self._period):
            try:
                self._on_tick()
            except Exception:
                log.exception("tick failed; stopping driver")
                break

    def cancel(self) -> None:
        """Signal the thread to stop without waiting for it."""
        self._stop.set()

    def join(self, timeout: float = 2.0) -> None:
        t = self._t
        if t is not None and t is not threading.current_thread():
            t.join(timeout=timeout)

    @property
    def running(self) -> bool:
        return self._t is not None and self._t.is_alive() and not self._stop.is_set()


DriverFactory = Callable[[Callable[[], None], float], TickDriver]

def default_seed_source(cfg: AppConfig) -> Callable[[], int]:
    if cfg.seed is None:
        return snake_rules.now_seed
    counter = itertools.count(cfg.seed)
    return lambda: next(counter)


class GameSession:
    """
    Single owner of the game state.

    Every mutation goes through one lock, so ticks from the driver thread and
    input from the UI thread never interleave. Each driver is bound to the
    generation of the game it was started for; restart() bumps the generation,
    which makes any tick from the retired driver a no-op.

    driver_factory=None gives a session without a timer; call tick() yourself
    (headless replays and tests).
    """
    def __init__(
        self,
        cfg: AppConfig,
        seed_source: Optional[Callable[[], int]] = None,
        driver_factory: Optional[DriverFactory] = TickDriver,
    ):
        self.cfg = cfg
        self._seed_source = seed_source or default_seed_source(cfg)
        self._driver_factory = driver_factory
        self._lock = threading.RLock()
        self._listeners: List[StateListener] = []
        self._driver: Optional[TickDriver] = None
        self._generation = 0
        self._paused = False
        self._state = snake_rules.init_state(self._seed_source(), cfg)

    # ---- queries ----
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def paused(self) -> bool:
        return self._paused

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._snapshot()

    def add_listener(self, fn: StateListener) -> None:
        with self._lock:
            self._listeners.append(fn)

    def remove_listener(self, fn: StateListener) -> None:
        with self._lock:
            if fn in self._listeners:
                self._listeners.remove(fn)

    # ---- controller operations ----
    def start(self) -> None:
        with self._lock:
            if self._state.is_started or self._state.is_over:
                log.debug("start ignored (started=%s over=%s)", self._state.is_started, self._state.is_over)
                return
            self._state = snake_rules.start(self._state)
            log.info("game started (seed=%d)", self._state.seed)
            self._ensure_driver()
            self._notify()

    def request_direction(self, d: str) -> None:
        with self._lock:
            if not is_direction(d):
                log.debug("unknown direction %r ignored", d)
                return
            before = self._state
            self._state = snake_rules.with_pending(self._state, d)
            if not self._state.is_started and not self._state.is_over:
                self._state = snake_rules.start(self._state)
                log.info("game started by input (seed=%d)", self._state.seed)
            if self._state.is_started and not self._state.is_over:
                self._ensure_driver()
            if self._state is not before:
                self._notify()

    def toggle_pause(self) -> None:
        with self._lock:
            if not self._state.is_started or self._state.is_over:
                log.debug("pause ignored (started=%s over=%s)", self._state.is_started, self._state.is_over)
                return
            self._paused = not self._paused
            log.info("paused" if self._paused else "resumed")
            self._ensure_driver()
            self._notify()

    def start_or_toggle(self) -> None:
        with self._lock:
            if self._state.is_over:
                return
            if not self._state.is_started:
                self.start()
            else:
                self.toggle_pause()

    def restart(self) -> None:
        with self._lock:
            old = self._driver
            self._generation += 1
            if old is not None:
                old.cancel()
            self._driver = None
            self._state = snake_rules.init_state(self._seed_source(), self.cfg)
            self._paused = False
            log.info("restarted (seed=%d)", self._state.seed)
            self._ensure_driver()
            self._notify()
        if old is not None:
            old.join()

    def tick(self) -> GameState:
        with self._lock:
            return self._tick(self._generation)

    def close(self) -> None:
        with self._lock:
            old, self._driver = self._driver, None
            self._generation += 1
            if old is not None:
                old.cancel()
        if old is not None:
            old.join()

    # ---- internals ----
    def _tick(self, generation: int) -> GameState:
        if generation != self._generation or self._paused:
            return self._state
        prev = self._state
        self._state = snake_rules.next_state(prev)
        if self._state is not prev:
            self._notify()
        return self._state

    def _ensure_driver(self) -> None:
        if self._driver_factory is None:
            return
        if self._driver is not None:
            if self._driver.running:
                return
            # the previous thread died on an exception; replace it
            log.warning("tick driver stopped unexpectedly; starting a new one")
            self._driver.cancel()
            self._driver = None
        gen = self._generation

        def _on_tick() -> None:
            with self._lock:
                self._tick(gen)

        self._driver = self._driver_factory(_on_tick, self.cfg.tick_ms / 1000.0)
        self._driver.start()

    def _snapshot(self) -> SessionSnapshot:
        s = self._state
        return SessionSnapshot(
            state=s,
            paused=self._paused,
            status=status_line(s.is_started, s.is_over, self._paused),
        )

    def _notify(self) -> None:
        snap = self._snapshot()
        for fn in list(self._listeners):
            try:
                fn(snap)
            except Exception:
                log.exception("state listener %r failed", fn)
