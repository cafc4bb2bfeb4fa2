from __future__ import annotations


class Tape:
    """Byte cells that grow lazily to the right, plus the active pointer."""

    def __init__(self):
        self.cells = bytearray(1)
        self._ptr = 0

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def pointer(self) -> int:
        return self._ptr

    def current(self) -> int:
        return self.cells[self._ptr]

    def cell(self, index: int) -> int:
        return self.cells[index]

    def increment(self) -> None:
        self.cells[self._ptr] = (self.cells[self._ptr] + 1) & 0xFF

    def decrement(self) -> None:
        self.cells[self._ptr] = (self.cells[self._ptr] - 1) & 0xFF

    def move_right(self) -> None:
        self._ptr += 1
        if self._ptr == len(self.cells):
            self.cells.append(0)

    def move_left(self) -> None:
        if self._ptr == 0:
            raise IndexError("tape underflow: pointer is already at cell 0")
        self._ptr -= 1

    def seek(self, index: int) -> None:
        # Only used to return to a loop-counter cell, which always exists.
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell {index} does not exist (tape length {len(self.cells)})")
        self._ptr = index

    def snapshot(self) -> bytes:
        return bytes(self.cells)
