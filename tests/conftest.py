# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(seed=1)

@pytest.fixture
def state_factory():
    from dataclasses import replace
    from core.snake_rules import init_state
    def make(seed=1, cfg=None, **fields):
        # fields override anything on the fresh state, e.g. snake=..., food=..., is_started=True
        from config import AppConfig
        s = init_state(seed, cfg or AppConfig())
        return replace(s, **fields)
    return make

class FakeDriver:
    """Stands in for TickDriver; the test fires ticks by hand."""
    instances = []

    def __init__(self, on_tick, period_sec):
        self.on_tick = on_tick
        self.period_sec = period_sec
        self.started = False
        self.cancelled = False
        self.joined = False
        self.alive = True
        FakeDriver.instances.append(self)

    @property
    def running(self):
        return self.started and self.alive and not self.cancelled

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def join(self, timeout=2.0):
        self.joined = True

@pytest.fixture
def fake_driver():
    FakeDriver.instances = []
    return FakeDriver

@pytest.fixture
def session_factory(cfg):
    from core.session import GameSession
    made = []
    def make(config=None, **kwargs):
        kwargs.setdefault("driver_factory", None)
        s = GameSession(config or cfg, **kwargs)
        made.append(s)
        return s
    yield make
    for s in made:
        s.close()
