from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .api import RunOptions, RunResult, run_file
from .errors import MalformedProgramError, SourceLoadError

DUMP_CELLS = 64


def _dump_tape(result: RunResult) -> None:
    cells = result.tape[:DUMP_CELLS]
    for i in range(0, len(cells), 8):
        row = " ".join(f"{b:3d}" for b in cells[i:i + 8])
        print(f"  {i:04d}: {row}")
    print(f"  pointer={result.pointer} length={len(result.tape)}")


def run_programs(paths: List[str], options: RunOptions, *, dump: bool = False, verbose: bool = False) -> int:
    failures = 0
    for path in paths:
        start = time.perf_counter()
        try:
            result = run_file(path, options=options)
        except (SourceLoadError, MalformedProgramError) as e:
            failures += 1
            print(f"Error occurred for program: {path!r}\n{e}")
            continue
        elapsed = time.perf_counter() - start

        print(f"Program: {path!r} output: {result.text!r}")
        if dump:
            _dump_tape(result)
        if options.trace:
            for line in result.trace:
                sys.stderr.write(line + "\n")
        if verbose:
            sys.stderr.write(f"{path}: {result.steps} steps in {elapsed * 1000:.2f} ms\n")
            sys.stderr.flush()
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfstream",
        description="Run Brainfuck programs straight from their source text.",
    )
    parser.add_argument("programs", nargs="*", help="Program files to run, in order")
    parser.add_argument("--strict", action="store_true", help="Reject programs with unbalanced [ ] before running")
    parser.add_argument("--trace", action="store_true", help="Write one trace line per executed command to stderr")
    parser.add_argument("--dump", action="store_true", help=f"Print the first {DUMP_CELLS} tape cells after each run")
    parser.add_argument("--verbose", action="store_true", help="Report step counts and timing on stderr")
    args = parser.parse_args(argv)

    options = RunOptions(strict=args.strict, trace=args.trace)
    return run_programs(args.programs, options, dump=args.dump, verbose=args.verbose)
