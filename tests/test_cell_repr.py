#!/usr/bin/env python3
"""
Tape rendering used by the debugger and the interactive session.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from ezfuck.cell_repr import produce_cells_repr


def test_single_zero_cell():
    assert produce_cells_repr(bytearray(1), 0) == (
        "     V  \n"
        "i | 000 |\n"
        "d | 000 |\n"
        "a |     |\n"
    )


def test_renders_up_to_pointer():
    assert produce_cells_repr(bytearray([72, 0]), 1) == (
        "           V  \n"
        "i | 000 | 001 |\n"
        "d | 072 | 000 |\n"
        "a |  H  |     |\n"
    )


def test_renders_up_to_last_nonzero_cell():
    text = produce_cells_repr(bytearray([0, 0, 65, 0, 0]), 0)
    assert "| 002 |\n" in text
    assert "003" not in text
    assert "a |     |     |  A  |\n" in text


def test_control_characters_shown_blank():
    text = produce_cells_repr(bytearray([10]), 0)
    assert text.endswith("a |     |\n")


def test_empty_tape():
    assert produce_cells_repr(bytearray(), 0) == ""


def test_delete_and_c1_controls_shown_blank():
    text = produce_cells_repr(bytearray([127, 159, 200]), 0)
    assert text.endswith("a |     |     |  \xc8  |\n")
