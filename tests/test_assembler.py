#!/usr/bin/env python3
"""
Command assembly: pairing symbols with operands.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from ezfuck.assembler import Command, assemble, check_valueless
from ezfuck.compiler import compile_to_instructions
from ezfuck.errors import EzfuckCompileError
from ezfuck.instructions import CurrentCell, Literal
from ezfuck.lexer import CommandToken, CurrentCellReference, IntegerLiteral, tokenize


def test_assemble_pairs_operands():
    tokens = [
        CommandToken("+"),
        CommandToken("+"),
        IntegerLiteral(123),
        CommandToken("-"),
        CurrentCellReference(),
    ]
    assert assemble(tokens) == [
        Command("+"),
        Command("+", Literal(123)),
        Command("-", CurrentCell()),
    ]


def test_trailing_symbol_is_finalized():
    commands = assemble(tokenize("+5>"))
    assert [c.symbol for c in commands] == ["+", ">"]
    assert commands[1].operand is None


def test_default_operand_is_one():
    (command,) = assemble(tokenize("^"))
    assert command.defaulted_operand() == Literal(1)


def test_operand_without_command():
    with pytest.raises(EzfuckCompileError) as exc:
        assemble(tokenize("5+"), "5+")
    assert "must come after a command" in str(exc.value)

    with pytest.raises(EzfuckCompileError):
        assemble(tokenize("V"), "V")


def test_two_operands_in_a_row():
    """The second literal has no pending symbol left to attach to."""
    with pytest.raises(EzfuckCompileError):
        assemble(tokenize("+1V"), "+1V")


@pytest.mark.parametrize("source", ["[5]", "[]3", ".V", ",1", "!2"])
def test_valueless_symbols_reject_operands(source):
    with pytest.raises(EzfuckCompileError) as exc:
        check_valueless(assemble(tokenize(source), source), source)
    assert "cannot be given a value" in str(exc.value)


def test_breakpoint_operand_rejected_even_without_debugging():
    with pytest.raises(EzfuckCompileError):
        compile_to_instructions("!3", allow_debugging=False)
