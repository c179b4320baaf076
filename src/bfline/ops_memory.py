from __future__ import annotations

from .config import CELL_MAX, CELL_MIN
from .errors import WarningKind


class MemoryOpsMixin:
    # ===== Cell arithmetic (saturating) =====

    def _op_increment(self, tok):
        st = self.state
        if st.cell >= CELL_MAX:
            self._warn(WarningKind.CELL_OVERFLOW, tok.index)
            return
        st.cell = st.cell + 1

    def _op_decrement(self, tok):
        st = self.state
        if st.cell <= CELL_MIN:
            self._warn(WarningKind.CELL_UNDERFLOW, tok.index)
            return
        st.cell = st.cell - 1

    # ===== Cursor movement (bounded) =====

    def _op_move_right(self, tok):
        st = self.state
        if st.cursor >= len(st.tape) - 1:
            self._warn(WarningKind.CURSOR_RIGHT_BOUND, tok.index)
            return
        st.cursor += 1

    def _op_move_left(self, tok):
        st = self.state
        if st.cursor <= 0:
            self._warn(WarningKind.CURSOR_LEFT_BOUND, tok.index)
            return
        st.cursor -= 1
