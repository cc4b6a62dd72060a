from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class ExecutionState:
    cells: bytearray = field(default_factory=lambda: bytearray(1))
    cell_ptr: int = 0
    instruction_ptr: int = 0
    is_debugging: bool = False
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    @property
    def current_cell(self) -> int:
        return self.cells[self.cell_ptr]

    @current_cell.setter
    def current_cell(self, value: int) -> None:
        self.cells[self.cell_ptr] = value

    def set_cell_pointer(self, ptr: int) -> None:
        self.ensure_cell(ptr)
        self.cell_ptr = ptr

    def ensure_cell(self, ptr: int) -> None:
        needed = ptr - len(self.cells) + 1
        if needed > 0:
            self.cells.extend(bytes(needed))

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
