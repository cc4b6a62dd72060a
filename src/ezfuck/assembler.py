from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .errors import make_compile_error
from .instructions import DEFAULT_OPERAND, CurrentCell, Literal, Operand
from .lexer import VALUELESS_COMMAND_SYMBOLS, CommandToken, CurrentCellReference, IntegerLiteral, Token


@dataclass(frozen=True)
class Command:
    symbol: str
    operand: Optional[Operand] = None
    offset: int = 0

    def has_operand(self) -> bool:
        return self.operand is not None

    def defaulted_operand(self) -> Operand:
        return DEFAULT_OPERAND if self.operand is None else self.operand


def assemble(tokens: List[Token], source: str = '') -> List[Command]:
    """Pair each command symbol with the operand token that follows it, if any."""
    commands: List[Command] = []
    pending: Optional[CommandToken] = None

    for token in tokens:
        if isinstance(token, CommandToken):
            if pending is not None:
                commands.append(Command(pending.symbol, None, pending.offset))
            pending = token
            continue

        if isinstance(token, IntegerLiteral):
            operand: Operand = Literal(token.value)
            what = f"Integer literal {token.value}"
        elif isinstance(token, CurrentCellReference):
            operand = CurrentCell()
            what = '"V"'
        else:
            raise TypeError(f"Unexpected token: {token!r}")

        if pending is None:
            raise make_compile_error(
                message=f"{what} must come after a command",
                source=source,
                offset=token.offset,
            )
        commands.append(Command(pending.symbol, operand, pending.offset))
        pending = None

    if pending is not None:
        commands.append(Command(pending.symbol, None, pending.offset))

    return commands


def check_valueless(commands: List[Command], source: str = '') -> None:
    for command in commands:
        if command.symbol in VALUELESS_COMMAND_SYMBOLS and command.has_operand():
            raise make_compile_error(
                message=f"Command {command.symbol!r} cannot be given a value. Given {command.operand}.",
                source=source,
                offset=command.offset,
            )
