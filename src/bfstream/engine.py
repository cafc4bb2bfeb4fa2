from __future__ import annotations

from typing import Optional

from .cursor import SourceCursor
from .errors import make_underflow_error
from .state import ExecutionState, LoopFrame
from .tape import Tape


class Interpreter:
    """Runs a program straight off its source text.

    Loops are not pre-compiled: '[' records where its body starts and which
    cell it tests, and ']' either falls through or seeks the cursor back.
    Open loops live on an explicit frame stack, so nesting depth is not
    limited by the Python call stack.
    """

    def __init__(self, cursor: SourceCursor, tape: Optional[Tape] = None, *, trace: bool = False):
        self.cursor = cursor
        self.tape = tape if tape is not None else Tape()
        self.state = ExecutionState(is_tracing=trace)
        self.halted = False

    @property
    def output(self) -> bytes:
        return bytes(self.state.output)

    def reset(self) -> None:
        self.cursor.seek(0)
        self.tape = Tape()
        self.state.reset()
        self.halted = False

    def step(self) -> bool:
        """Runs one source character. Returns False once the program has ended."""
        if self.halted:
            return False
        cmd = self.cursor.next()
        if cmd is None:
            self.halted = True
            self.state.add_trace("end of source")
            return False
        self.dispatch(cmd)
        return not self.halted

    def run(self) -> bytes:
        while self.step():
            pass
        return self.output

    def dispatch(self, cmd: str) -> None:
        tape = self.tape
        pos = self.cursor.position - 1
        if cmd == '>':
            tape.move_right()
        elif cmd == '<':
            try:
                tape.move_left()
            except IndexError as exc:
                raise make_underflow_error(
                    source=self.cursor.source, position=pos
                ) from exc
        elif cmd == '+':
            tape.increment()
        elif cmd == '-':
            tape.decrement()
        elif cmd == '.':
            self.state.output.append(tape.current())
        elif cmd == '[':
            self._open_loop()
        elif cmd == ']':
            self._close_loop()
        else:
            # Anything else is a comment
            return

        self.state.steps += 1
        if self.state.is_tracing:
            self.state.add_trace(
                f"{pos:6d} {cmd} ptr={tape.pointer} cell={tape.current()}"
            )

    def _open_loop(self) -> None:
        if self.tape.current() != 0:
            self.state.frames.append(LoopFrame(start=self.cursor.position, counter=self.tape.pointer))
        else:
            self._skip_block()

    def _skip_block(self) -> None:
        """Moves the cursor past the ']' matching the '[' just read."""
        depth = 1
        while depth > 0:
            ch = self.cursor.next()
            if ch is None:
                self.halted = True
                self.state.add_trace("end of source inside skipped loop")
                return
            if ch == '[':
                depth += 1
            elif ch == ']':
                depth -= 1

    def _close_loop(self) -> None:
        frames = self.state.frames
        if not frames:
            # Stray ']' with nothing to repeat: stop here.
            self.halted = True
            self.state.add_trace(f"unmatched ']' at {self.cursor.position - 1}, halting")
            return
        frame = frames[-1]
        if self.tape.cell(frame.counter) == 0:
            frames.pop()
        else:
            self.cursor.seek(frame.start)
            self.tape.seek(frame.counter)
