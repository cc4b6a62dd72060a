from __future__ import annotations

import sys
from typing import Optional, Sequence

from .debugger import DebuggerMixin
from .errors import (
    DivisionByZeroError,
    EndOfInputError,
    EzfuckRuntimeError,
    PointerUnderflowError,
    make_runtime_error,
)
from .instructions import (
    ADD,
    CELL_EQUALS_ZERO,
    DIV,
    LEFT,
    MUL,
    SUB,
    ApplyArithmetic,
    Breakpoint,
    Instruction,
    JumpIf,
    MovePointer,
    Print,
    Read,
    SetCell,
    SetPointer,
    resolve,
)
from .state import ExecutionState


def apply_math_operator(current: int, op: str, value: int) -> int:
    if op == ADD:
        return (current + value) & 0xFF
    if op == SUB:
        return (current - value) & 0xFF
    if op == MUL:
        return (current * value) & 0xFF
    if op == DIV:
        return current // value
    raise ValueError(f"Unknown arithmetic operator: {op}")


class TapeMachine(DebuggerMixin):
    """
    Executes compiled ezfuck instructions against an ExecutionState.

    The instruction pointer advances by one after every instruction; a
    taken jump overwrites it first, so jump targets point at the matching
    bracket and execution resumes one past it. The run ends when the
    instruction pointer reaches the end of the list.

    Streams default to sys.stdin/sys.stdout, looked up at use time.
    """

    def __init__(self, in_stream=None, out_stream=None, *, allow_debugging: bool = False, window: int = 3):
        self._in_stream = in_stream
        self._out_stream = out_stream
        self.allow_debugging = allow_debugging
        self.window = window

    @property
    def in_stream(self):
        return sys.stdin if self._in_stream is None else self._in_stream

    @property
    def out_stream(self):
        return sys.stdout if self._out_stream is None else self._out_stream

    # ===== Main loop =====

    def run(self, instructions: Sequence[Instruction], state: Optional[ExecutionState] = None) -> ExecutionState:
        if state is None:
            state = ExecutionState()

        while state.instruction_ptr < len(instructions):
            if state.is_debugging:
                if not self._start_debugger(instructions, state):
                    continue
            else:
                self.execute(instructions[state.instruction_ptr], state)
            state.instruction_ptr += 1

        return state

    def execute(self, instruction: Instruction, state: ExecutionState, allow_debugging: Optional[bool] = None) -> None:
        if allow_debugging is None:
            allow_debugging = self.allow_debugging

        state.add_trace(
            f"ip={state.instruction_ptr} cell_ptr={state.cell_ptr} cell={state.current_cell} {instruction}"
        )

        if isinstance(instruction, ApplyArithmetic):
            value = resolve(instruction.operand, state.current_cell)
            if instruction.op == DIV and value == 0:
                raise make_runtime_error(DivisionByZeroError, message='Division by zero', state=state)
            state.current_cell = apply_math_operator(state.current_cell, instruction.op, value)

        elif isinstance(instruction, MovePointer):
            offset = resolve(instruction.operand, state.current_cell)
            if instruction.direction == LEFT:
                offset = -offset
            new_ptr = state.cell_ptr + offset
            if new_ptr < 0:
                raise make_runtime_error(PointerUnderflowError, message='Cell pointer became negative', state=state)
            state.set_cell_pointer(new_ptr)

        elif isinstance(instruction, SetPointer):
            state.set_cell_pointer(resolve(instruction.operand, state.current_cell))

        elif isinstance(instruction, JumpIf):
            is_zero = state.current_cell == 0
            if is_zero == (instruction.condition == CELL_EQUALS_ZERO):
                state.instruction_ptr = instruction.target

        elif isinstance(instruction, Print):
            self._print_value(state.current_cell)

        elif isinstance(instruction, Read):
            state.current_cell = self._read_value(state)

        elif isinstance(instruction, SetCell):
            state.current_cell = resolve(instruction.operand, state.current_cell)

        elif isinstance(instruction, Breakpoint):
            if allow_debugging:
                state.is_debugging = True
                state.add_trace(f"debugger: paused after ip={state.instruction_ptr}")

        else:
            raise TypeError(f"Unknown instruction: {instruction!r}")

    # ===== I/O =====

    def _print_value(self, cell: int) -> None:
        out = self.out_stream
        out.write(chr(cell))
        out.flush()

    def _read_value(self, state: ExecutionState) -> int:
        ch = self.in_stream.read(1)
        if not ch:
            raise make_runtime_error(EndOfInputError, message='Reached end of input while reading', state=state)
        if isinstance(ch, bytes):
            return ch[0]
        value = ord(ch)
        if value > 0xFF:
            raise make_runtime_error(
                EzfuckRuntimeError,
                message=f"Input character {ch!r} does not fit in a cell",
                state=state,
            )
        return value
