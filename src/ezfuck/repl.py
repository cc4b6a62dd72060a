from __future__ import annotations

import sys
from typing import Optional

from .cell_repr import produce_cells_repr
from .compiler import compile_to_instructions
from .debugger import PROMPT, QUIT_SENTINEL
from .machine import TapeMachine
from .state import ExecutionState


def start_repl(in_stream=None, out_stream=None, state: Optional[ExecutionState] = None) -> ExecutionState:
    """Read-compile-run loop over one persistent tape.

    Ends on end of input or on a line starting with ``!``.
    """
    in_stream = sys.stdin if in_stream is None else in_stream
    out_stream = sys.stdout if out_stream is None else out_stream
    if state is None:
        state = ExecutionState()
    machine = TapeMachine(in_stream, out_stream, allow_debugging=False)

    while True:
        out_stream.write(produce_cells_repr(state.cells, state.cell_ptr))
        out_stream.write(PROMPT)
        out_stream.flush()

        line = in_stream.readline()
        if not line or line.startswith(QUIT_SENTINEL):
            break

        instructions = compile_to_instructions(line, allow_debugging=False)
        out_stream.write('Output: ')
        machine.run(instructions, state)
        state.instruction_ptr = 0
        out_stream.write('\n')

    return state
