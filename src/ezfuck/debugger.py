from __future__ import annotations

from typing import List, Sequence

from .cell_repr import produce_cells_repr
from .compiler import compile_to_instructions
from .instructions import Instruction
from .state import ExecutionState

PROMPT = 'EZ> '
QUIT_SENTINEL = '!'


def produce_instructions_repr(instructions: Sequence[Instruction], instruction_ptr: int, show_n_around: int) -> str:
    if not instructions:
        return ''

    start = max(0, instruction_ptr - show_n_around)
    end = min(instruction_ptr + show_n_around, len(instructions) - 1)
    width = len(str(len(instructions)))

    lines: List[str] = []
    for i in range(start, end + 1):
        marker = '> ' if i == instruction_ptr else '  '
        lines.append(f"{i:0{width}d} {marker}{instructions[i]}\n")
    return ''.join(lines)


class DebuggerMixin:
    """Interactive stepping for TapeMachine.

    Once a breakpoint has set ``state.is_debugging``, every following
    instruction is routed through ``_start_debugger`` instead of being run
    directly. Each pause shows the tape and the instructions around the
    pointer, then reads one line:

    - a line starting with ``!`` leaves debugging mode; the paused
      instruction is left for the outer loop to run normally
    - any other non-empty line is compiled (without breakpoints) and run
      against the same tape, after which both pointers are put back
    - then the paused instruction itself is executed, with breakpoints off

    Returns True when the paused instruction was executed here.
    """

    def _start_debugger(self, instructions: Sequence[Instruction], state: ExecutionState) -> bool:
        out = self.out_stream
        out.write('\n')
        out.write(produce_cells_repr(state.cells, state.cell_ptr))
        out.write(produce_instructions_repr(instructions, state.instruction_ptr, self.window))
        out.write(PROMPT)
        out.flush()

        line = self.in_stream.readline()

        if line.startswith(QUIT_SENTINEL):
            state.is_debugging = False
            state.add_trace(f"debugger: resumed at ip={state.instruction_ptr}")
            return False

        if line:
            dbg_instructions = compile_to_instructions(line, allow_debugging=False)
            state.add_trace(f"debugger: running {len(dbg_instructions)} instruction(s)")

            saved_instruction_ptr = state.instruction_ptr
            saved_cell_ptr = state.cell_ptr
            state.instruction_ptr = 0
            state.is_debugging = False

            self.run(dbg_instructions, state)

            state.is_debugging = True
            state.cell_ptr = saved_cell_ptr
            state.instruction_ptr = saved_instruction_ptr
            out.write('\n')

        if state.instruction_ptr < len(instructions):
            self.execute(instructions[state.instruction_ptr], state, allow_debugging=False)

        out.write('\n')
        out.flush()
        return True
