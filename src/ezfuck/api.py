from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .compiler import compile_to_instructions
from .instructions import Instruction
from .machine import TapeMachine
from .state import ExecutionState


@dataclass(frozen=True)
class CompileOptions:
    allow_debugging: bool = False


@dataclass(frozen=True)
class RunOptions:
    allow_debugging: bool = False
    trace: bool = False
    window: int = 3


@dataclass(frozen=True)
class CompileResult:
    instructions: Tuple[Instruction, ...]
    source: str


@dataclass(frozen=True)
class RunResult:
    state: ExecutionState
    output: Optional[str]  # None when the caller supplied its own output stream


def compile_string(source: str, *, options: Optional[CompileOptions] = None) -> CompileResult:
    allow_debugging = False if options is None else options.allow_debugging
    instructions = compile_to_instructions(source, allow_debugging=allow_debugging)
    return CompileResult(instructions=tuple(instructions), source=source)


def compile_file(path: str | Path, *, options: Optional[CompileOptions] = None, encoding: str = "utf-8") -> CompileResult:
    p = Path(path)
    return compile_string(p.read_text(encoding=encoding), options=options)


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    input_data: Optional[str] = None,
    in_stream=None,
    out_stream=None,
) -> RunResult:
    """Compile and run a program on a fresh tape.

    ``input_data`` is a shortcut for an in-memory input stream. Without an
    ``out_stream`` the program output is captured and returned.
    """
    opts = RunOptions() if options is None else options
    result = compile_string(source, options=CompileOptions(allow_debugging=opts.allow_debugging))

    if input_data is not None:
        in_stream = io.StringIO(input_data)
    captured = io.StringIO() if out_stream is None else None

    machine = TapeMachine(
        in_stream,
        captured if captured is not None else out_stream,
        allow_debugging=opts.allow_debugging,
        window=opts.window,
    )
    state = ExecutionState(is_tracing=opts.trace)
    machine.run(result.instructions, state)

    return RunResult(state=state, output=None if captured is None else captured.getvalue())


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, encoding: str = "utf-8", **kwargs) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), options=options, **kwargs)
