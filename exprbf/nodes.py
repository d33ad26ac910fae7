from __future__ import annotations

from dataclasses import dataclass, field

from .arith import emit_add, emit_mul, emit_sub
from .emitter import TapeEmitter

# === AST Nodes ===

OPERATORS = ("+", "-", "*")


class Expr:
    # height of the tree rooted here; generation and rendering recurse this deep
    depth = 1

    def generate(self, emitter: TapeEmitter, cell: int) -> None:
        """Emit code leaving this expression's value in ``cell``.

        Cells above ``cell`` are free to use as scratch.
        """
        raise NotImplementedError

    def render(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class NumberLiteral(Expr):
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"number literal must be non-negative, got {self.value}")

    def generate(self, emitter: TapeEmitter, cell: int) -> None:
        emitter.move_to(cell)
        emitter.zero()
        emitter.inc(self.value)

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BinaryOperation(Expr):
    operator: str
    left: Expr
    right: Expr
    depth: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.operator not in OPERATORS:
            raise ValueError(f"unsupported operator {self.operator!r}")
        object.__setattr__(self, "depth", 1 + max(self.left.depth, self.right.depth))

    def generate(self, emitter: TapeEmitter, cell: int) -> None:
        self.left.generate(emitter, cell)
        self.right.generate(emitter, cell + 1)
        if self.operator == "+":
            emit_add(emitter, cell + 1, cell)
        elif self.operator == "-":
            emit_sub(emitter, cell + 1, cell)
        else:
            # cell+2 accumulates the product, cell+3 keeps a copy of the multiplier
            emit_mul(emitter, cell, cell + 1, cell + 2, cell + 3)

    def render(self) -> str:
        return f"({self.left.render()} {self.operator} {self.right.render()})"


__all__ = [
    "BinaryOperation",
    "Expr",
    "NumberLiteral",
    "OPERATORS",
]
