from __future__ import annotations

from .loops import find_matching_close


class ControlFlowMixin:
    def _op_loop_open(self, tok):
        st = self.state
        buf = st.line
        end = find_matching_close(buf.text, tok.index + 1)

        if st.cell == 0:
            buf.pos = end + 1
            self._trace(f"skip [{tok.index}..{end}]")
            return

        # back-edge from our own ']' lands here; the frame is already on the stack
        if st.loops.reenter_or_noop(tok.index):
            return

        st.loops.enter(tok.index, end, line=buf.text)
        self._trace(f"enter [{tok.index}..{end}] depth={st.loops.depth}")

    def _op_loop_close(self, tok):
        st = self.state
        buf = st.line

        if st.cell != 0:
            buf.pos = st.loops.jump_back(tok.index, line=buf.text)
            return

        frame = st.loops.exit(tok.index, line=buf.text)
        self._trace(f"exit [{frame.start}..{frame.end}] depth={st.loops.depth}")
