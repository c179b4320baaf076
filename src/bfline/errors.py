from __future__ import annotations

import sys

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO


class FatalKind(Enum):
    UNMATCHED_LOOP_OPEN = "missing ']' for '['"
    LOOP_CLOSE_WITHOUT_OPEN = "missing '[' before ']'"
    LOOP_STACK_OVERFLOW = "loop stack overflow"
    LOOP_OPEN_AT_END_OF_LINE = "loop still open at end of line"


class WarningKind(Enum):
    CELL_OVERFLOW = "Cell value at the top of the ASCII range"
    CELL_UNDERFLOW = "Cell value already at zero"
    CURSOR_RIGHT_BOUND = "Cursor already at the last cell"
    CURSOR_LEFT_BOUND = "Cursor already at the first cell"
    INPUT_OUT_OF_RANGE = "Input character outside ASCII range, stored as 127"


def _build_context(line: str, index: int) -> str:
    text = line.rstrip('\n')
    caret = ' ' * max(0, min(index, len(text))) + '^'
    return f"  | {text}\n  | {caret}"


def _hint_for(kind: FatalKind, *, capacity: Optional[int]) -> Optional[str]:
    if kind is FatalKind.UNMATCHED_LOOP_OPEN:
        return 'Loops must be closed on the same line they are opened on.'
    if kind is FatalKind.LOOP_CLOSE_WITHOUT_OPEN:
        return 'Check for an extra "]" or a "[" that was skipped.'
    if kind is FatalKind.LOOP_STACK_OVERFLOW:
        return f'At most {capacity} loops can be open at the same time.'
    return None


@dataclass
class BFLineError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigError(BFLineError):
    pass


@dataclass
class FatalError(BFLineError):
    """Unrecoverable engine condition; ends the whole session.

    The message is assembled from the structured fields by ``format()`` so
    callers can inspect ``kind`` and ``index`` without parsing text.
    """

    kind: FatalKind = FatalKind.UNMATCHED_LOOP_OPEN
    index: int = 0
    line: str = ''
    capacity: Optional[int] = None

    def __str__(self) -> str:
        return self.format()

    def format(self, *, context: bool = True) -> str:
        if self.kind is FatalKind.LOOP_STACK_OVERFLOW:
            head = f"Error: {self.kind.value}, limit '[...]' to : {self.capacity}"
        else:
            head = f"Error: {self.kind.value} at index : {self.index}"
        if not context or not self.line:
            return head
        hint = _hint_for(self.kind, capacity=self.capacity)
        hint_block = f"\nHint: {hint}" if hint else ""
        return f"{head}\n{_build_context(self.line, self.index)}{hint_block}"


@dataclass
class UnmatchedLoopOpen(FatalError):
    kind: FatalKind = FatalKind.UNMATCHED_LOOP_OPEN


@dataclass
class LoopCloseWithoutOpen(FatalError):
    kind: FatalKind = FatalKind.LOOP_CLOSE_WITHOUT_OPEN


@dataclass
class LoopStackOverflow(FatalError):
    kind: FatalKind = FatalKind.LOOP_STACK_OVERFLOW


@dataclass
class LoopOpenAtEndOfLine(FatalError):
    kind: FatalKind = FatalKind.LOOP_OPEN_AT_END_OF_LINE


def make_fatal(cls, *, index: int, line: str = '', capacity: Optional[int] = None) -> FatalError:
    err = cls(message='', index=index, line=line, capacity=capacity)
    err.message = err.format(context=False)
    return err


@dataclass(frozen=True)
class EngineWarning:
    kind: WarningKind
    index: int
    cursor: int

    @property
    def message(self) -> str:
        return self.kind.value


@dataclass
class DiagnosticSink:
    """Diagnostic stream shared by the engine and the session driver."""

    stream: Optional[TextIO] = None
    warnings: List[EngineWarning] = field(default_factory=list)
    fatal: Optional[FatalError] = None

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stderr

    def warn(self, kind: WarningKind, *, index: int, cursor: int) -> EngineWarning:
        w = EngineWarning(kind=kind, index=index, cursor=cursor)
        self.warnings.append(w)
        print(f"Warning: {w.message}", file=self._out())
        return w

    def report_fatal(self, err: FatalError) -> None:
        self.fatal = err
        print(err.format(), file=self._out())

    def trace(self, message: str) -> None:
        print(message, file=self._out())
