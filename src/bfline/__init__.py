from .api import RunResult, SessionResult, execute_line, run_lines
from .config import EngineConfig
from .engine import ExecutionEngine
from .errors import (
    BFLineError,
    ConfigError,
    FatalError,
    LoopCloseWithoutOpen,
    LoopOpenAtEndOfLine,
    LoopStackOverflow,
    UnmatchedLoopOpen,
)
from .session import Session
from .state import MachineState

__all__ = [
    'ExecutionEngine',
    'MachineState',
    'Session',
    'EngineConfig',
    'BFLineError',
    'ConfigError',
    'FatalError',
    'UnmatchedLoopOpen',
    'LoopCloseWithoutOpen',
    'LoopStackOverflow',
    'LoopOpenAtEndOfLine',
    'RunResult',
    'SessionResult',
    'execute_line',
    'run_lines',
]
