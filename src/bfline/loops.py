from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .errors import LoopCloseWithoutOpen, LoopStackOverflow, UnmatchedLoopOpen, make_fatal
from .lexer import END_OF_LINE


def find_matching_close(text: str, start: int) -> int:
    """Index of the ']' closing the '[' that sits just before ``start``.

    Only the current line is searched. Raises UnmatchedLoopOpen when the line
    ends before the nesting depth returns to zero.
    """
    depth = 1
    i = start
    n = len(text)
    while i < n and text[i] != END_OF_LINE:
        c = text[i]
        if c == '[':
            depth += 1
        elif c == ']':
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise make_fatal(UnmatchedLoopOpen, index=start - 1, line=text)


@dataclass(frozen=True)
class LoopFrame:
    start: int
    end: int


class LoopStack:
    def __init__(self, capacity: int = 8):
        self.capacity = capacity
        self._frames: List[LoopFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> Optional[LoopFrame]:
        return self._frames[-1] if self._frames else None

    def reenter_or_noop(self, start: int) -> bool:
        # True when the body of this loop is being re-run after a back-edge
        top = self.top
        return top is not None and top.start == start

    def enter(self, start: int, end: int, *, line: str = '') -> LoopFrame:
        if len(self._frames) >= self.capacity:
            raise make_fatal(LoopStackOverflow, index=start, line=line, capacity=self.capacity)
        frame = LoopFrame(start, end)
        self._frames.append(frame)
        return frame

    def exit(self, index: int, *, line: str = '') -> LoopFrame:
        if not self._frames:
            raise make_fatal(LoopCloseWithoutOpen, index=index, line=line)
        return self._frames.pop()

    def jump_back(self, index: int, *, line: str = '') -> int:
        if not self._frames:
            raise make_fatal(LoopCloseWithoutOpen, index=index, line=line)
        return self._frames[-1].start
