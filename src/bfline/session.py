from __future__ import annotations

import sys

from typing import Optional, TextIO

from .config import VERSION, EngineConfig
from .engine import ExecutionEngine
from .errors import DiagnosticSink, FatalError
from .ops_io import InputSource
from .state import MachineState


class Session:
    """Interactive driver: prompt, read a line, run it, repeat until end of input."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        banner: bool = True,
        trace: bool = False,
    ):
        self.config = config if config is not None else EngineConfig()
        self.state = MachineState(config=self.config, is_tracing=trace)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.source = InputSource(stdin)
        self.diagnostics = DiagnosticSink(stderr)
        self.engine = ExecutionEngine(
            self.state,
            output=self.stdout,
            source=self.source,
            diagnostics=self.diagnostics,
        )
        self.banner = banner

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def print_banner(self) -> None:
        self._write(f"BrainFuck Interpreter - version : {VERSION}\n")
        self._write("Exit: Ctrl + D\n")

    def prompt(self) -> None:
        st = self.state
        self._write(f"\n<C:[{st.cursor}] V:[{st.cell}] BFI> ")

    def read_line(self) -> str:
        # longer lines come back in pieces, each run as its own line
        return self.source.readline(self.config.max_line - 1)

    def run(self) -> int:
        """Run until end of input. Returns the process exit status."""
        if self.banner:
            self.print_banner()

        while True:
            self.prompt()
            line = self.read_line()
            if line == '':
                break
            try:
                self.engine.run_line(line)
            except FatalError as e:
                self.diagnostics.report_fatal(e)
                return 1
        return 0
