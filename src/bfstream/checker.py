from __future__ import annotations

from typing import List

from .errors import make_unbalanced_error


def check_balance(source: str) -> None:
    """Raises UnbalancedLoopError if the '[' / ']' pairs in source do not match.

    Only delimiters are inspected; everything else is a comment.
    """
    open_positions: List[int] = []
    for pos, ch in enumerate(source):
        if ch == '[':
            open_positions.append(pos)
        elif ch == ']':
            if not open_positions:
                raise make_unbalanced_error(message="unmatched ']'", source=source, position=pos)
            open_positions.pop()

    if open_positions:
        raise make_unbalanced_error(
            message=f"unclosed '[' ({len(open_positions)} open at end of program)",
            source=source,
            position=open_positions[-1],
        )
