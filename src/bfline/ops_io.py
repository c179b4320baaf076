from __future__ import annotations

import sys

from typing import List, Optional, TextIO

from .config import CELL_MAX
from .errors import WarningKind
from .lexer import END_OF_LINE


class InputSource:
    """Character source shared by line acquisition and the ',' operator.

    Supports pushing characters back so an exhausted stream can hand out one
    more end-of-line marker instead of blocking. Bytes the stream cannot
    decode arrive as surrogate escapes (code points above 127) instead of
    raising.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._pushback: List[str] = []
        reconfigure = getattr(self.stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")

    def read_char(self) -> str:
        """Next character, or '' once the stream is exhausted."""
        if self._pushback:
            return self._pushback.pop()
        return self.stream.read(1)

    def unread(self, ch: str) -> None:
        self._pushback.append(ch)

    def readline(self, limit: int = -1) -> str:
        """Next line including its newline, '' at end of input.

        With ``limit`` > 0 at most ``limit`` characters are returned and the
        rest of a longer line is left for the following call.
        """
        out = []
        while limit < 0 or len(out) < limit:
            if self._pushback:
                ch = self._pushback.pop()
            else:
                break
            out.append(ch)
            if ch == END_OF_LINE:
                return ''.join(out)
        if limit < 0:
            rest = self.stream.readline()
        elif len(out) < limit:
            rest = self.stream.readline(limit - len(out))
        else:
            rest = ''
        return ''.join(out) + rest


class IOMixin:
    # ===== Output =====

    def _op_write(self, tok):
        self.output.write(chr(self.state.cell))
        self.output.flush()

    # ===== Input =====

    def _op_read(self, tok):
        st = self.state
        self.output.write(f"\t<? INPUT [{st.cursor}]> ")
        self.output.flush()

        ch = self.input.read_char()
        if ch == '':
            # exhausted: store 0 and leave a newline behind so nothing blocks
            st.cell = 0
            self.input.unread(END_OF_LINE)
        else:
            code = ord(ch)
            if code > CELL_MAX:
                self._warn(WarningKind.INPUT_OUT_OF_RANGE, tok.index)
                code = CELL_MAX
            st.cell = code
            if ch == END_OF_LINE:
                return

        self._discard_input_line()

    def _discard_input_line(self):
        while True:
            ch = self.input.read_char()
            if ch == '' or ch == END_OF_LINE:
                return
