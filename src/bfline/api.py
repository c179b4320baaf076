from __future__ import annotations

import io

from dataclasses import dataclass
from typing import List, Optional

from .config import EngineConfig
from .engine import ExecutionEngine
from .errors import DiagnosticSink, EngineWarning
from .ops_io import InputSource
from .session import Session
from .state import MachineState


@dataclass(frozen=True)
class RunResult:
    output: str
    warnings: List[EngineWarning]
    state: MachineState
    executed: int


@dataclass(frozen=True)
class SessionResult:
    exit_status: int
    output: str
    diagnostics: str
    state: MachineState


def execute_line(
    source: str,
    *,
    state: Optional[MachineState] = None,
    input_data: str = "",
    config: Optional[EngineConfig] = None,
) -> RunResult:
    """Run one line against ``state`` (a fresh one if omitted).

    Warnings are collected silently; fatal errors propagate.
    """
    if state is None:
        state = MachineState(config=config if config is not None else EngineConfig())
    out = io.StringIO()
    sink = DiagnosticSink(io.StringIO())
    engine = ExecutionEngine(state, output=out, source=InputSource(io.StringIO(input_data)), diagnostics=sink)
    executed = engine.run_line(source)
    return RunResult(output=out.getvalue(), warnings=list(sink.warnings), state=state, executed=executed)


def run_lines(
    text: str,
    *,
    config: Optional[EngineConfig] = None,
    banner: bool = False,
) -> SessionResult:
    """Drive a whole session over in-memory streams.

    ``text`` is everything that would arrive on stdin: program lines and
    the answers to any ',' prompts, interleaved in the order they are read.
    """
    stdout = io.StringIO()
    stderr = io.StringIO()
    session = Session(
        config,
        stdin=io.StringIO(text),
        stdout=stdout,
        stderr=stderr,
        banner=banner,
    )
    status = session.run()
    return SessionResult(
        exit_status=status,
        output=stdout.getvalue(),
        diagnostics=stderr.getvalue(),
        state=session.state,
    )
