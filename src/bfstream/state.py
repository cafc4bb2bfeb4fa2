from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class LoopFrame:
    start: int  # cursor position just after '['
    counter: int  # cell tested at every ']'


@dataclass
class ExecutionState:
    output: bytearray = field(default_factory=bytearray)
    frames: List[LoopFrame] = field(default_factory=list)
    steps: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def reset(self) -> None:
        self.output.clear()
        self.frames.clear()
        self.steps = 0
        self.trace.clear()

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
