import pygame as pg
import pytest

from config import AppConfig
from core.board import BODY, EMPTY, FOOD, HEAD, board_lines, encode_board
from core.interfaces import SessionSnapshot
from viz.render_iface import status_line
from viz.renderer_headless import HeadlessRenderer
from viz.renderer_pygame import PygameRenderer, hud_lines
import viz.renderer_colors as theme

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

@pytest.mark.parametrize("started,over,paused,expected", [
    (False, False, False, "not started"),
    (True, False, False, "running"),
    (True, False, True, "paused"),
    (True, True, False, "game over"),
    (True, True, True, "game over"),
])
def test_status_priority(started, over, paused, expected):
    assert status_line(started, over, paused) == expected

def test_encode_board(state_factory):
    s = state_factory(food=(0, 0))
    grid = encode_board(s)
    assert grid.shape == (20, 20)
    assert grid[10, 10] == HEAD
    assert grid[10, 9] == BODY and grid[10, 8] == BODY
    assert grid[0, 0] == FOOD
    assert grid[5, 5] == EMPTY
    assert int((grid != EMPTY).sum()) == 4

def test_board_lines_without_food(state_factory):
    s = state_factory(food=None)
    lines = board_lines(s)
    assert len(lines) == 20
    assert lines[10][8:11] == "ooH"
    assert "F" not in "".join(lines)

def test_headless_renderer_keeps_frames(session_factory):
    rend = HeadlessRenderer()
    rend.open(AppConfig())
    s = session_factory()
    s.add_listener(rend.draw)
    s.start()
    s.tick()
    assert len(rend.frames) == 2
    assert rend.last.status == "running"
    assert rend.last.tick == 1
    assert rend.last.render().startswith("score=0 tick=1 status=running")

def test_headless_renderer_frame_cap(state_factory):
    rend = HeadlessRenderer(max_frames=2)
    rend.open(AppConfig())
    snap = SessionSnapshot(state_factory(), paused=False, status="not started")
    for _ in range(5):
        rend.draw(snap)
    assert len(rend.frames) == 2

def _pixel(surf, cell, x, y):
    return _rgb(surf.get_at((x * cell + cell // 2, y * cell + cell // 2)))

def test_pygame_renderer_draws_cells(state_factory):
    cfg = AppConfig(render_cell=8, render_grid_lines=False, render_show_hud=False)
    surf = pg.Surface((20 * 8, 20 * 8))
    rend = PygameRenderer()
    rend.attach_surface(surf, cfg)
    s = state_factory(food=(2, 3))
    rend.draw(SessionSnapshot(s, paused=False, status="not started"))
    assert _pixel(surf, 8, 2, 3) == _rgb(theme.FOOD)
    assert _pixel(surf, 8, 10, 10) == _rgb(theme.HEAD)
    assert _pixel(surf, 8, 9, 10) == _rgb(theme.BODY)
    assert _pixel(surf, 8, 0, 19) == _rgb(theme.BG)

def test_pygame_renderer_hud_and_grid(state_factory):
    cfg = AppConfig(render_cell=8)
    surf = pg.Surface((20 * 8, 20 * 8))
    rend = PygameRenderer()
    rend.attach_surface(surf, cfg)
    s = state_factory(is_started=True, is_over=True, reason="wall", food=None)
    rend.draw(SessionSnapshot(s, paused=False, status="game over"))
    # vertical grid line at x=8, below the HUD and away from the snake
    assert _rgb(surf.get_at((8, 100))) == _rgb(theme.GRID)

def test_pygame_renderer_requires_open(state_factory):
    rend = PygameRenderer()
    with pytest.raises(AssertionError):
        rend.draw(SessionSnapshot(state_factory(), paused=False, status="not started"))

def test_pygame_renderer_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)

@pytest.mark.parametrize("status,hint", [
    ("not started", "Space or an arrow key to start"),
    ("game over", "R to restart"),
    ("running", None),
    ("paused", None),
])
def test_hud_status_row_is_bare_message(state_factory, status, hint):
    snap = SessionSnapshot(state_factory(), paused=status == "paused", status=status)
    rows = [text for text, _ in hud_lines(snap)]
    assert rows[1] == status
    if hint is None:
        assert len(rows) == 2
    else:
        assert rows[2] == hint
    assert ("P: Resume" in rows[0]) == (status == "paused")
