from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ---------------- Operands ----------------
@dataclass(frozen=True)
class Literal:
    value: int  # 0..255

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CurrentCell:
    def __str__(self) -> str:
        return 'V'


Operand = Union[Literal, CurrentCell]

DEFAULT_OPERAND = Literal(1)


def resolve(operand: Operand, current_cell: int) -> int:
    """Return the byte an operand stands for, given the live cell value."""
    if isinstance(operand, CurrentCell):
        return current_cell
    return operand.value


# ---------------- Instructions ----------------
ADD = 'add'
SUB = 'sub'
MUL = 'mul'
DIV = 'div'

LEFT = 'left'
RIGHT = 'right'

CELL_EQUALS_ZERO = 'cell == 0'
CELL_NOT_EQUALS_ZERO = 'cell != 0'


@dataclass(frozen=True)
class ApplyArithmetic:
    op: str  # ADD, SUB, MUL or DIV
    operand: Operand = DEFAULT_OPERAND

    def __str__(self) -> str:
        return f"{self.op} {self.operand}"


@dataclass(frozen=True)
class MovePointer:
    direction: str  # LEFT or RIGHT
    operand: Operand = DEFAULT_OPERAND

    def __str__(self) -> str:
        return f"move {self.direction} {self.operand}"


@dataclass(frozen=True)
class SetPointer:
    operand: Operand = DEFAULT_OPERAND

    def __str__(self) -> str:
        return f"pointer = {self.operand}"


@dataclass(frozen=True)
class JumpIf:
    target: int
    condition: str  # CELL_EQUALS_ZERO or CELL_NOT_EQUALS_ZERO

    def __str__(self) -> str:
        return f"jump to {self.target} if {self.condition}"


@dataclass(frozen=True)
class Print:
    def __str__(self) -> str:
        return 'print'


@dataclass(frozen=True)
class Read:
    def __str__(self) -> str:
        return 'read'


@dataclass(frozen=True)
class SetCell:
    operand: Operand = DEFAULT_OPERAND

    def __str__(self) -> str:
        return f"cell = {self.operand}"


@dataclass(frozen=True)
class Breakpoint:
    def __str__(self) -> str:
        return 'breakpoint'


Instruction = Union[ApplyArithmetic, MovePointer, SetPointer, JumpIf, Print, Read, SetCell, Breakpoint]
