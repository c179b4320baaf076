from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .config import EngineConfig
from .lexer import LineBuffer
from .loops import LoopStack


@dataclass
class MachineState:
    config: EngineConfig = field(default_factory=EngineConfig)
    tape: Optional[np.ndarray] = None
    cursor: int = 0
    loops: Optional[LoopStack] = None
    line: LineBuffer = field(default_factory=LineBuffer)
    is_tracing: bool = False

    def __post_init__(self) -> None:
        if self.tape is None:
            self.tape = np.zeros(self.config.cells, dtype=np.uint8)
        if self.loops is None:
            self.loops = LoopStack(capacity=self.config.max_depth)

    @property
    def cell(self) -> int:
        return int(self.tape[self.cursor])

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape[self.cursor] = value

    def load_line(self, text: str) -> None:
        self.line = LineBuffer(text)

    def dump(self, count: int = 100, *, width: int = 8) -> str:
        cells = self.tape[:max(0, min(count, len(self.tape)))]
        rows = []
        for i in range(0, len(cells), width):
            rows.append(" ".join(str(int(v)) for v in cells[i:i + width]))
        return "\n".join(rows)
