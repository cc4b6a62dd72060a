

from .compiler import compile_to_instructions, find_loop_indices
from .lexer import scan, tokenize
from .machine import TapeMachine
from .repl import start_repl
from .state import ExecutionState
from .errors import (
    EzfuckCompileError,
    EzfuckError,
    EzfuckRuntimeError,
)
from .api import CompileOptions, CompileResult, RunOptions, RunResult, compile_file, compile_string, run_file, run_string

__all__ = [
    'compile_to_instructions',
    'find_loop_indices',
    'scan',
    'tokenize',
    'TapeMachine',
    'start_repl',
    'ExecutionState',
    'EzfuckError',
    'EzfuckCompileError',
    'EzfuckRuntimeError',
    'CompileOptions',
    'CompileResult',
    'RunOptions',
    'RunResult',
    'compile_string',
    'compile_file',
    'run_string',
    'run_file',
]
