from __future__ import annotations

import sys

from typing import Optional, TextIO

from .errors import DiagnosticSink, LoopOpenAtEndOfLine, make_fatal
from .lexer import TokenKind, next_token
from .ops_control import ControlFlowMixin
from .ops_io import InputSource, IOMixin
from .ops_memory import MemoryOpsMixin
from .state import MachineState


class ExecutionEngine(MemoryOpsMixin, IOMixin, ControlFlowMixin):
    """
    Line-at-a-time Brainfuck executor.

    The engine works on a MachineState owned by the caller; tape, cursor and
    loop stack persist between calls to run_line while the line buffer is
    replaced each time.

    Differences from classic Brainfuck:
    - cells saturate at 0 and 127 instead of wrapping, with a warning
    - the cursor stops at either end of the tape, with a warning
    - a loop must open and close on the same line
    - at most ``max_depth`` loops may be open at once
    """

    def __init__(
        self,
        state: Optional[MachineState] = None,
        *,
        output: Optional[TextIO] = None,
        source: Optional[InputSource] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ):
        self.state = state if state is not None else MachineState()
        self.output = output if output is not None else sys.stdout
        self.input = source if source is not None else InputSource()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticSink()
        self.dispatch = {
            TokenKind.CELL_INCREMENT: self._op_increment,
            TokenKind.CELL_DECREMENT: self._op_decrement,
            TokenKind.CURSOR_RIGHT: self._op_move_right,
            TokenKind.CURSOR_LEFT: self._op_move_left,
            TokenKind.WRITE_OUTPUT: self._op_write,
            TokenKind.READ_INPUT: self._op_read,
            TokenKind.LOOP_OPEN: self._op_loop_open,
            TokenKind.LOOP_CLOSE: self._op_loop_close,
        }

    def _warn(self, kind, index):
        self.diagnostics.warn(kind, index=index, cursor=self.state.cursor)

    def _trace(self, message):
        if self.state.is_tracing:
            self.diagnostics.trace(message)

    # ===== Main loop =====

    def run_line(self, text: str) -> int:
        """Execute one line against the current state.

        Returns the number of operators executed. Fatal conditions are raised
        as FatalError subclasses and leave the state as it was at the failure.
        """
        st = self.state
        st.load_line(text)
        executed = 0

        while True:
            tok = next_token(st.line)
            if tok.kind is TokenKind.END_OF_LINE:
                break
            self.dispatch[tok.kind](tok)
            executed += 1
            self._trace(f"{tok.index:4d} {tok.kind.value} C:{st.cursor} V:{st.cell}")

        top = st.loops.top
        if top is not None:
            raise make_fatal(LoopOpenAtEndOfLine, index=top.start, line=text)
        return executed
