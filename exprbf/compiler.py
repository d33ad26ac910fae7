from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .emitter import TapeEmitter
from .errors import MalformedInput
from .nodes import Expr
from .parser import MAX_DEPTH, MAX_LITERAL, Parser
from .printer import DIGIT_OFFSET, emit_label, emit_print_decimal

logger = logging.getLogger(__name__)

RESULT_CELL = 0


@dataclass(frozen=True)
class CompilerOptions:
    # printed before any arithmetic, may overlap expression scratch
    label_cell: int = 10
    digit_offset: int = DIGIT_OFFSET
    max_depth: int = MAX_DEPTH
    # each literal costs one instruction per unit
    max_literal: int = MAX_LITERAL

    def __post_init__(self) -> None:
        if self.label_cell < 0:
            raise ValueError(f"label_cell must be non-negative, got {self.label_cell}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.max_literal < 0:
            raise ValueError(f"max_literal must be non-negative, got {self.max_literal}")


@dataclass(frozen=True)
class Compilation:
    name: str
    expression: str
    tree: Expr
    program: str


def split_assignment(source: str) -> Tuple[str, str]:
    """Split ``NAME=EXPRESSION`` on the first ``=`` after trimming whitespace."""
    text = source.strip()
    name, separator, expression = text.partition("=")
    if not separator:
        raise MalformedInput(source)
    return name, expression


class ExpressionCompiler:
    def __init__(self, options: Optional[CompilerOptions] = None) -> None:
        self.options = options or CompilerOptions()

    def compile(self, source: str) -> str:
        return self.compile_source(source).program

    def compile_source(self, source: str) -> Compilation:
        name, expression = split_assignment(source)
        return self.compile_assignment(name, expression)

    def compile_assignment(self, name: str, expression: str) -> Compilation:
        # Parse everything up front so a bad expression never yields partial output.
        tree = Parser(self.options.max_depth, self.options.max_literal).parse(expression)
        logger.debug(f"Parsed {expression!r} as {tree.render()}")
        program = self.generate(name, tree)
        return Compilation(name=name, expression=expression, tree=tree, program=program)

    def generate(self, name: str, tree: Expr) -> str:
        emitter = TapeEmitter()
        emit_label(emitter, f"{name}=", self.options.label_cell)
        label_size = len(emitter)
        tree.generate(emitter, RESULT_CELL)
        expression_size = len(emitter) - label_size
        emit_print_decimal(emitter, RESULT_CELL, self.options.digit_offset)
        program = emitter.text()
        logger.debug(
            f"Emitted {len(program)} instructions "
            f"(label {label_size}, expression {expression_size}, "
            f"printer {len(program) - label_size - expression_size})"
        )
        return program


def compile_expression(source: str, options: Optional[CompilerOptions] = None) -> str:
    return ExpressionCompiler(options).compile(source)


__all__ = [
    "Compilation",
    "CompilerOptions",
    "ExpressionCompiler",
    "RESULT_CELL",
    "compile_expression",
    "split_assignment",
]
