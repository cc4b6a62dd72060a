from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Type, TypeVar


def _line_and_column(source: str, offset: int) -> Tuple[int, int]:
    offset = max(0, min(offset, len(source)))
    before = source[:offset]
    line = before.count('\n') + 1
    column = offset - (before.rfind('\n') + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column_1: int, *, context: int = 2) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column_1 - 1)}^")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'compile':
        if 'cannot be given a value' in msg:
            return 'The symbols [ ] . , ! never take an operand; remove the number or V after it.'
        if 'must come after a command' in msg:
            return 'Operands attach to the symbol right before them, e.g. +5 or >V.'
        if 'could not parse' in msg:
            return 'Numeric operands are bytes: use a value between 0 and 255.'
        if 'missing a matching' in msg:
            return 'Every [ needs a ] after it, and every ] needs a [ before it.'
        return None
    if kind == 'runtime':
        if 'cell pointer became negative' in msg:
            return 'The tape starts at cell 0 and only extends to the right.'
        if 'division by zero' in msg:
            return 'Check the divisor; /V divides by the current cell, which may be 0.'
        if 'end of input' in msg:
            return 'The program read more characters than were provided on input.'
        return None
    return None


@dataclass
class EzfuckError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class EzfuckCompileError(EzfuckError):
    line: int
    column: int
    context: str


@dataclass
class EzfuckRuntimeError(EzfuckError):
    instruction_ptr: int
    cell_ptr: int


class PointerUnderflowError(EzfuckRuntimeError):
    pass


class DivisionByZeroError(EzfuckRuntimeError):
    pass


class EndOfInputError(EzfuckRuntimeError):
    pass


E = TypeVar('E', bound=EzfuckRuntimeError)


def make_compile_error(*, message: str, source: str, offset: int) -> EzfuckCompileError:
    line, column = _line_and_column(source, offset)
    lines = source.split('\n')
    ctx = _build_context(lines, line, column)
    hint = _hint_for(message, kind='compile')
    hint_block = f"\nHint: {hint}" if hint else ""
    return EzfuckCompileError(
        message=f"CompileError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        line=line,
        column=column,
        context=ctx,
    )


def make_runtime_error(cls: Type[E], *, message: str, state) -> E:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=(
            f"RuntimeError: {message} "
            f"(instruction {state.instruction_ptr}, cell {state.cell_ptr}){hint_block}"
        ),
        instruction_ptr=state.instruction_ptr,
        cell_ptr=state.cell_ptr,
    )
