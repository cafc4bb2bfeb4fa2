from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .checker import check_balance
from .cursor import SourceCursor
from .engine import Interpreter
from .errors import make_source_load_error


@dataclass(frozen=True)
class RunOptions:
    strict: bool = False
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: bytes
    pointer: int
    steps: int
    trace: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.output.decode('latin-1')


def run_string(source: str, *, options: Optional[RunOptions] = None) -> RunResult:
    opts = options if options is not None else RunOptions()
    if opts.strict:
        check_balance(source)
    interp = Interpreter(SourceCursor(source), trace=opts.trace)
    output = interp.run()
    return RunResult(
        output=output,
        tape=interp.tape.snapshot(),
        pointer=interp.tape.pointer,
        steps=interp.state.steps,
        trace=list(interp.state.trace),
    )


def run_bytes(data: bytes, *, options: Optional[RunOptions] = None) -> RunResult:
    return run_string(data.decode('latin-1'), options=options)


def run_file(path: str | Path, *, options: Optional[RunOptions] = None) -> RunResult:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise make_source_load_error(path=str(path), cause=exc) from exc
    return run_bytes(data, options=options)
