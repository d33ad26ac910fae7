from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .compiler import CompilerOptions, ExpressionCompiler
from .errors import CompileError
from .tape import StepLimitExceeded, TapeMachine


def _read_source(path: str) -> str:
    source_path = Path(path)
    if not source_path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    return source_path.read_text(encoding="utf-8")


def _write_output(path: str, data: str) -> None:
    output_path = Path(path)
    output_path.write_text(data, encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile NAME=EXPRESSION into a tape program that prints NAME=<value>"
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="File holding the NAME=EXPRESSION line (default: read standard input)",
    )
    parser.add_argument("-e", "--expression", help="Compile this NAME=EXPRESSION text directly")
    parser.add_argument(
        "-o",
        "--emit",
        help="Destination file for the emitted program (default: print to stdout)",
    )
    parser.add_argument(
        "--run",
        action="store_true",
        help="Execute the program after compiling and print what it outputs",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Abort --run after this many executed instructions",
    )
    parser.add_argument(
        "--label-cell",
        type=int,
        default=CompilerOptions.label_cell,
        help="Cell used to print the NAME= label (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log compilation details to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.expression is not None and args.source is not None:
        parser.error("pass either a source file or --expression, not both")

    try:
        if args.expression is not None:
            source_text = args.expression
        elif args.source is not None:
            source_text = _read_source(args.source)
        else:
            source_text = sys.stdin.read()
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        compiler = ExpressionCompiler(CompilerOptions(label_cell=args.label_cell))
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        program = compiler.compile(source_text)
    except CompileError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.emit:
        _write_output(args.emit, program)
    elif not args.run:
        sys.stdout.write(program)
        sys.stdout.write("\n")

    if args.run:
        machine = TapeMachine()
        try:
            output = machine.run(program, max_steps=args.max_steps)
        except StepLimitExceeded as exc:
            print(str(exc), file=sys.stderr)
            return 1
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
