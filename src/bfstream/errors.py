from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, position: int) -> Tuple[int, int]:
    line = source.count('\n', 0, position) + 1
    line_start = source.rfind('\n', 0, position) + 1
    return line, position - line_start + 1


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'unbalanced':
        if 'unmatched' in msg and ']' in msg:
            return "Remove the stray ']' or add the '[' that should open this loop."
        if 'unclosed' in msg:
            return "Every '[' needs a matching ']' later in the program."
        return None
    if kind == 'underflow':
        return "Cells only exist to the right of the start cell. Add a '>' before moving left."
    if kind == 'load':
        if 'no such file' in msg:
            return 'Check the path; it is resolved relative to the current directory.'
        if 'permission' in msg:
            return 'Check that the program file is readable.'
        return None
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceLoadError(BFError):
    path: str
    cause: str


@dataclass
class MalformedProgramError(BFError):
    line: int
    column: int
    context: str


@dataclass
class UnbalancedLoopError(MalformedProgramError):
    pass


@dataclass
class TapeUnderflowError(MalformedProgramError):
    pass


def _render(kind_label: str, message: str, source: str, position: int, *, kind: str):
    line, column = _locate(source, position)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(message, kind=kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    text = f"{kind_label}: {message} (line {line}, column {column})\n{ctx}{hint_block}"
    return text, line, column, ctx


def make_unbalanced_error(*, message: str, source: str, position: int) -> UnbalancedLoopError:
    text, line, column, ctx = _render('MalformedProgram', message, source, position, kind='unbalanced')
    return UnbalancedLoopError(message=text, line=line, column=column, context=ctx)


def make_underflow_error(*, source: str, position: int) -> TapeUnderflowError:
    text, line, column, ctx = _render(
        'TapeUnderflow', "pointer moved left of cell 0", source, position, kind='underflow'
    )
    return TapeUnderflowError(message=text, line=line, column=column, context=ctx)


def make_source_load_error(*, path: str, cause: BaseException) -> SourceLoadError:
    reason = getattr(cause, 'strerror', None) or str(cause)
    hint = _hint_for(reason, kind='load')
    hint_block = f"\nHint: {hint}" if hint else ""
    return SourceLoadError(
        message=f"SourceLoadError: cannot read {path!r}: {reason}{hint_block}",
        path=path,
        cause=reason,
    )
