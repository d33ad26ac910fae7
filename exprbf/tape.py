from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

INSTRUCTIONS = "><+-.[]"


class StepLimitExceeded(RuntimeError):
    """Raised when a tape program exceeds the configured step budget."""


@dataclass
class TapeMachine:
    """Reference interpreter for the seven-symbol tape instruction set.

    Cells wrap modulo ``cell_size``. Characters outside the instruction
    alphabet are ignored, so annotated programs still run.
    """

    tape_length: int = 30000
    cell_size: int = 256

    tape: List[int] = field(init=False, repr=False)
    pointer: int = field(init=False, repr=False)
    output_buffer: List[int] = field(init=False, repr=False)
    steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.tape = [0] * self.tape_length
        self.pointer = 0
        self.output_buffer = []
        self.steps = 0

    def run(self, program: str, max_steps: Optional[int] = None) -> str:
        """Run ``program`` and return its output decoded as UTF-8.

        Byte sequences that are not valid UTF-8 come back as U+FFFD, so this
        is lossy for arbitrary bytes; use ``run_bytes`` for the exact output.
        """
        return self.run_bytes(program, max_steps=max_steps).decode("utf-8", errors="replace")

    def run_bytes(self, program: str, max_steps: Optional[int] = None) -> bytes:
        self.reset()
        code = [char for char in program if char in INSTRUCTIONS]
        jump_map = self._build_jump_map(code)
        pc = 0
        while pc < len(code):
            if max_steps is not None and self.steps >= max_steps:
                raise StepLimitExceeded(f"tape program exceeded {max_steps} steps")
            pc = self._execute_instruction(code[pc], pc, jump_map)
            self.steps += 1
        return bytes(self.output_buffer)

    def _execute_instruction(self, command: str, pc: int, jump_map: Dict[int, int]) -> int:
        new_pc = pc + 1
        if command == ">":
            self.pointer += 1
            if self.pointer >= self.tape_length:
                raise IndexError("Pointer moved beyond the tape length.")
        elif command == "<":
            self.pointer -= 1
            if self.pointer < 0:
                raise IndexError("Pointer moved before start of tape.")
        elif command == "+":
            self.tape[self.pointer] = (self.tape[self.pointer] + 1) % self.cell_size
        elif command == "-":
            self.tape[self.pointer] = (self.tape[self.pointer] - 1) % self.cell_size
        elif command == ".":
            self.output_buffer.append(self.tape[self.pointer] % 256)
        elif command == "[":
            if self.tape[self.pointer] == 0:
                new_pc = jump_map[pc] + 1
        elif command == "]":
            if self.tape[self.pointer] != 0:
                new_pc = jump_map[pc] + 1
        return new_pc

    def _build_jump_map(self, code: List[str]) -> Dict[int, int]:
        jump_map: Dict[int, int] = {}
        stack: List[int] = []
        for index, char in enumerate(code):
            if char == "[":
                stack.append(index)
            elif char == "]":
                if not stack:
                    raise ValueError(f"Unmatched ']' at instruction {index}")
                start = stack.pop()
                jump_map[start] = index
                jump_map[index] = start
        if stack:
            raise ValueError(f"Unmatched '[' at instruction {stack.pop()}")
        return jump_map


__all__ = [
    "INSTRUCTIONS",
    "StepLimitExceeded",
    "TapeMachine",
]
