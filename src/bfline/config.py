from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError


VERSION = "1.2"

MIN_CELLS = 30000
DEFAULT_CELLS = 30000
DEFAULT_MAX_LINE = 4096
DEFAULT_MAX_DEPTH = 8

# ASCII range; cells saturate instead of wrapping
CELL_MIN = 0
CELL_MAX = 127


@dataclass(frozen=True)
class EngineConfig:
    cells: int = DEFAULT_CELLS
    max_line: int = DEFAULT_MAX_LINE
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.cells < MIN_CELLS:
            raise ConfigError(f"tape capacity must be at least {MIN_CELLS} cells, got {self.cells}")
        if self.max_line < 2:
            raise ConfigError(f"maximum line length must be at least 2, got {self.max_line}")
        if self.max_depth < 1:
            raise ConfigError(f"maximum loop depth must be at least 1, got {self.max_depth}")
