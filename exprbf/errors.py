from __future__ import annotations


class CompileError(Exception):
    """Base class for every failure reported while compiling an assignment."""


class MalformedInput(CompileError):
    def __init__(self, source: str) -> None:
        super().__init__("usage: NAME=EXPRESSION")
        self.source = source


class InvalidNumber(CompileError):
    def __init__(self, text: str, position: int) -> None:
        super().__init__(f"invalid number: '{text}'")
        self.text = text
        self.position = position


class NumberTooLarge(CompileError):
    def __init__(self, text: str, position: int, limit: int) -> None:
        super().__init__(f"number too large: '{text}' (limit {limit})")
        self.text = text
        self.position = position
        self.limit = limit


class ExpressionTooDeep(CompileError):
    def __init__(self, position: int, limit: int) -> None:
        super().__init__(f"expression nested deeper than {limit} levels at position {position}")
        self.position = position
        self.limit = limit


__all__ = [
    "CompileError",
    "ExpressionTooDeep",
    "InvalidNumber",
    "MalformedInput",
    "NumberTooLarge",
]
