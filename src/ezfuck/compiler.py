from __future__ import annotations

from typing import Dict, List, Tuple

from .assembler import Command, assemble, check_valueless
from .errors import make_compile_error
from .instructions import (
    ADD,
    CELL_EQUALS_ZERO,
    CELL_NOT_EQUALS_ZERO,
    DIV,
    LEFT,
    MUL,
    RIGHT,
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
)
from .lexer import tokenize

LoopMap = Tuple[Dict[int, int], Dict[int, int]]

_ARITHMETIC = {'+': ADD, '-': SUB, '*': MUL, '/': DIV}
_MOVES = {'<': LEFT, '>': RIGHT}


def find_loop_indices(commands: List[Command], source: str = '') -> LoopMap:
    """Match brackets by stack discipline.

    Returns (start_to_end, end_to_start), both keyed by command index.
    """
    start_to_end: Dict[int, int] = {}
    end_to_start: Dict[int, int] = {}
    loop_start_stack: List[int] = []

    for i, command in enumerate(commands):
        if command.symbol == '[':
            loop_start_stack.append(i)
        elif command.symbol == ']':
            if not loop_start_stack:
                raise make_compile_error(
                    message=f"] missing a matching [ at command {i}",
                    source=source,
                    offset=command.offset,
                )
            start_i = loop_start_stack.pop()
            start_to_end[start_i] = i
            end_to_start[i] = start_i

    if loop_start_stack:
        first = loop_start_stack[0]
        raise make_compile_error(
            message=f"[ missing a matching ]: commands {loop_start_stack}",
            source=source,
            offset=commands[first].offset,
        )

    return start_to_end, end_to_start


def compile_commands(commands: List[Command], allow_debugging: bool = False, source: str = '') -> List[Instruction]:
    check_valueless(commands, source)

    # Breakpoints are dropped before loop resolution so that jump targets
    # are computed in instruction-index space.
    if not allow_debugging:
        commands = [c for c in commands if c.symbol != '!']

    start_to_end, end_to_start = find_loop_indices(commands, source)

    instructions: List[Instruction] = []
    for i, command in enumerate(commands):
        symbol = command.symbol
        operand = command.defaulted_operand()
        instruction: Instruction
        if symbol in _ARITHMETIC:
            instruction = ApplyArithmetic(_ARITHMETIC[symbol], operand)
        elif symbol in _MOVES:
            instruction = MovePointer(_MOVES[symbol], operand)
        elif symbol == '@':
            instruction = SetPointer(operand)
        elif symbol == '[':
            instruction = JumpIf(start_to_end[i], CELL_EQUALS_ZERO)
        elif symbol == ']':
            instruction = JumpIf(end_to_start[i], CELL_NOT_EQUALS_ZERO)
        elif symbol == '.':
            instruction = Print()
        elif symbol == ',':
            instruction = Read()
        elif symbol == '^':
            instruction = SetCell(operand)
        elif symbol == '!':
            instruction = Breakpoint()
        else:
            raise ValueError(f"Unknown command symbol: {symbol!r}")
        instructions.append(instruction)

    return instructions


def compile_to_instructions(source: str, allow_debugging: bool = False) -> List[Instruction]:
    """Run the whole front end: scan, classify, assemble, resolve loops, lower."""
    tokens = tokenize(source)
    commands = assemble(tokens, source)
    return compile_commands(commands, allow_debugging, source)
