from __future__ import annotations

from typing import Optional, Tuple


class SourceCursor:
    """Sequential, restartable view over a program's command characters.

    The source is never mutated; loops re-enter their body by seeking back
    to a position recorded when the loop was opened.
    """

    def __init__(self, source: str):
        self.source = source
        self.position = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "SourceCursor":
        # latin-1 maps every byte to exactly one character
        return cls(data.decode('latin-1'))

    def __len__(self) -> int:
        return len(self.source)

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.source)

    def next(self) -> Optional[str]:
        """Returns the command at the cursor and advances, or None at the end."""
        if self.position >= len(self.source):
            return None
        ch = self.source[self.position]
        self.position += 1
        return ch

    def seek(self, position: int) -> None:
        self.position = position

    def location(self, position: int) -> Tuple[int, int]:
        line = self.source.count('\n', 0, position) + 1
        column = position - (self.source.rfind('\n', 0, position) + 1) + 1
        return line, column
