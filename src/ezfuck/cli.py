from __future__ import annotations

import argparse
import io
import sys
from typing import List, Optional

from .api import CompileOptions, compile_file
from .errors import EzfuckError
from .machine import TapeMachine
from .repl import start_repl
from .state import ExecutionState


def _dump(instructions, out) -> None:
    for i, instruction in enumerate(instructions):
        out.write(f"{i}: {instruction}\n")


def _byte_stream(stream, *, writing: bool = False):
    """Wrap a standard stream so that one character is exactly one byte."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None or buffer is stream:
        return stream
    if writing:
        stream.flush()
    return io.TextIOWrapper(buffer, encoding="latin-1", newline="", write_through=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ezfuck",
        description="ezfuck interpreter. Runs a file, or starts an interactive session without one.",
    )
    parser.add_argument("path", nargs="?", help="Program file to run (breakpoints enabled)")
    parser.add_argument("--no-debug", action="store_true", help="Ignore ! breakpoints in the program")
    parser.add_argument("--dump", action="store_true", help="Print the compiled instructions and exit")
    parser.add_argument("--trace", action="store_true", help="Write an execution trace to stderr after the run")
    parser.add_argument("--window", type=int, default=3, help="Instructions shown around the pointer when paused")
    args = parser.parse_args(argv)

    state = ExecutionState(is_tracing=args.trace)
    stdin = _byte_stream(sys.stdin)
    stdout = _byte_stream(sys.stdout, writing=True)
    try:
        if args.path is None:
            start_repl(stdin, stdout, state)
            return 0

        allow_debugging = not args.no_debug
        result = compile_file(
            args.path,
            options=CompileOptions(allow_debugging=allow_debugging),
            encoding="latin-1",
        )
        if args.dump:
            _dump(result.instructions, stdout)
            return 0

        machine = TapeMachine(stdin, stdout, allow_debugging=allow_debugging, window=max(0, args.window))
        machine.run(result.instructions, state)
        return 0
    except OSError as e:
        print(f"Couldn't read {args.path}: {e}", file=sys.stderr)
        return 1
    except EzfuckError as e:
        stdout.flush()
        print(str(e), file=sys.stderr)
        return 1
    finally:
        for stream in (stdin, stdout):
            if stream is not sys.stdin and stream is not sys.stdout:
                stream.detach()
        if args.trace:
            for line in state.trace:
                print(line, file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
