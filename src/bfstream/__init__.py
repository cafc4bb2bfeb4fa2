
from .api import RunOptions, RunResult, run_bytes, run_file, run_string
from .checker import check_balance
from .cursor import SourceCursor
from .engine import Interpreter
from .errors import (
    BFError,
    MalformedProgramError,
    SourceLoadError,
    TapeUnderflowError,
    UnbalancedLoopError,
)
from .tape import Tape

__all__ = [
    'Interpreter',
    'SourceCursor',
    'Tape',
    'check_balance',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_bytes',
    'run_file',
    'BFError',
    'SourceLoadError',
    'MalformedProgramError',
    'UnbalancedLoopError',
    'TapeUnderflowError',
]
