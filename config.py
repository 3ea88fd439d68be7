# config.py
from dataclasses import dataclass, replace
from typing import Optional

GRID_SIZE = 20
TICK_MS = 120
START_LENGTH = 3

@dataclass(frozen=True, slots=True)
class AppConfig:
    # engine (fixed for the lifetime of a session)
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    start_len: int = START_LENGTH
    seed: Optional[int] = None

    # render
    fps: int = 60
    render_cell: int = 24
    render_title: str = "Snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True

    # logging
    log_level: str = "INFO"
    game_log_path: Optional[str] = None

    def __post_init__(self):
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.start_len < 1:
            raise ValueError(f"start_len must be positive, got {self.start_len}")
        # snake starts at the centre and extends to the left
        if self.start_len > self.grid_size // 2 + 1:
            raise ValueError(
                f"start_len={self.start_len} does not fit a {self.grid_size}x{self.grid_size} grid"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
