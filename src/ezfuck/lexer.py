from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from .errors import make_compile_error

COMMAND_SYMBOLS = frozenset('+-*/<>[]^.,!@')
VALUELESS_COMMAND_SYMBOLS = frozenset('[],.!')
NUMERIC_LITERAL_SYMBOLS = frozenset('0123456789')
CURRENT_CELL_SYMBOLS = frozenset('V')

MAX_LITERAL = 255


@dataclass(frozen=True)
class Lexeme:
    text: str
    offset: int  # index of the first character in the source


@dataclass(frozen=True)
class CommandToken:
    symbol: str
    offset: int = 0


@dataclass(frozen=True)
class IntegerLiteral:
    value: int
    offset: int = 0


@dataclass(frozen=True)
class CurrentCellReference:
    offset: int = 0


Token = Union[CommandToken, IntegerLiteral, CurrentCellReference]


def scan(source: str) -> List[Lexeme]:
    """Split source text into lexemes.

    Command symbols and the current-cell marker are always single-character
    lexemes. Consecutive digits merge into one lexeme. Any other character is
    dropped, but still ends a digit run.
    """
    lexemes: List[Lexeme] = []
    partial: List[str] = []
    partial_start = 0
    last_ch = ' '

    def flush():
        if partial:
            lexemes.append(Lexeme(''.join(partial), partial_start))
            partial.clear()

    for offset, ch in enumerate(source):
        if ch in COMMAND_SYMBOLS or ch in CURRENT_CELL_SYMBOLS:
            flush()
            lexemes.append(Lexeme(ch, offset))
        elif ch in NUMERIC_LITERAL_SYMBOLS:
            if last_ch not in NUMERIC_LITERAL_SYMBOLS:
                flush()
                partial_start = offset
            partial.append(ch)
        last_ch = ch

    flush()
    return lexemes


def classify(lexeme: Lexeme, source: str = '') -> Token:
    text = lexeme.text
    if len(text) == 1 and text in COMMAND_SYMBOLS:
        return CommandToken(text, lexeme.offset)
    if text and text[0] in NUMERIC_LITERAL_SYMBOLS:
        if not text.isdigit() or int(text) > MAX_LITERAL:
            raise make_compile_error(
                message=f"Could not parse {text} as integer literal",
                source=source,
                offset=lexeme.offset,
            )
        return IntegerLiteral(int(text), lexeme.offset)
    if text and text[0] in CURRENT_CELL_SYMBOLS:
        return CurrentCellReference(lexeme.offset)
    raise make_compile_error(message=f"Unknown lexeme: {text!r}", source=source, offset=lexeme.offset)


def evaluate_lexemes(lexemes: List[Lexeme], source: str = '') -> List[Token]:
    return [classify(lexeme, source) for lexeme in lexemes]


def tokenize(source: str) -> List[Token]:
    return evaluate_lexemes(scan(source), source)
