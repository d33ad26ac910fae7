from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

# Instructions that touch the current cell only; anything else must go through
# the pointer-tracking primitives below.
_RAW_INSTRUCTIONS = frozenset("+-.")


class TapeEmitter:
    """Accumulates tape instructions while tracking where the pointer will be.

    ``pointer`` is the compile-time model of the real tape pointer. Every
    primitive that moves the real pointer updates it in the same call, so the
    model and the executed program never drift apart.
    """

    def __init__(self) -> None:
        self.output: List[str] = []
        self.pointer = 0
        self._open_loops: List[int] = []

    def move_to(self, cell: int) -> None:
        if cell < 0:
            raise ValueError(f"cannot move to negative cell {cell}")
        delta = cell - self.pointer
        if delta > 0:
            self.output.append(">" * delta)
        elif delta < 0:
            self.output.append("<" * (-delta))
        self.pointer = cell

    def zero(self) -> None:
        self.output.append("[-]")

    def inc(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"increment count must be non-negative, got {amount}")
        if amount:
            self.output.append("+" * amount)

    def dec(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"decrement count must be non-negative, got {amount}")
        if amount:
            self.output.append("-" * amount)

    def write(self) -> None:
        self.output.append(".")

    def emit(self, instructions: str) -> None:
        invalid = set(instructions) - _RAW_INSTRUCTIONS
        if invalid:
            raise ValueError(
                f"raw emission only accepts '+', '-' and '.', got {''.join(sorted(invalid))!r}"
            )
        if instructions:
            self.output.append(instructions)

    def open_loop(self, cell: int) -> None:
        self.move_to(cell)
        self.output.append("[")
        self._open_loops.append(cell)

    def close_loop(self) -> None:
        if not self._open_loops:
            raise RuntimeError("close_loop called without a matching open_loop")
        cell = self._open_loops.pop()
        self.move_to(cell)
        self.output.append("]")

    @contextmanager
    def loop(self, cell: int) -> Iterator[None]:
        """Wrap the instructions emitted inside the block in ``[`` ... ``]`` on ``cell``.

        The body may leave the pointer anywhere; the pointer is moved back to
        ``cell`` before the loop is closed.
        """
        self.open_loop(cell)
        yield
        self.close_loop()

    @property
    def depth(self) -> int:
        return len(self._open_loops)

    def text(self) -> str:
        if self._open_loops:
            raise RuntimeError(f"loop opened on cell {self._open_loops[-1]} was never closed")
        return "".join(self.output)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self.output)


__all__ = ["TapeEmitter"]
