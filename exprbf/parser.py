from __future__ import annotations

from typing import Optional, Tuple

from .errors import ExpressionTooDeep, InvalidNumber, NumberTooLarge
from .nodes import BinaryOperation, Expr, NumberLiteral

DIGITS = "0123456789"
# Bounds the parser, code generator and renderer recursion well below the
# interpreter's default limit.
MAX_DEPTH = 200
# Literals are emitted as unary increments.
MAX_LITERAL = 65535
_DELIMITERS = "+-*()"


class Parser:
    """Recursive-descent parser for ``+``, ``-``, ``*`` and parentheses.

    Grammar::

        Expr   := Term (('+' | '-') Term)*
        Term   := Factor ('*' Factor)*
        Factor := '(' Expr ')' | Digits

    A missing ``)`` is accepted silently. Whitespace is not skipped.
    Parenthesis nesting and tree height are capped at ``max_depth`` and
    literals at ``max_literal``.
    """

    def __init__(self, max_depth: int = MAX_DEPTH, max_literal: int = MAX_LITERAL) -> None:
        self.max_depth = max_depth
        self.max_literal = max_literal

    def parse(self, text: str) -> Expr:
        node, consumed = self.parse_prefix(text)
        if consumed != len(text):
            raise InvalidNumber(self._offending_text(consumed), consumed)
        return node

    def parse_prefix(self, text: str) -> Tuple[Expr, int]:
        self.text = text
        self.pos = 0
        self.nesting = 0
        node = self._parse_expr()
        return node, self.pos

    def _peek(self) -> Optional[str]:
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def _advance(self) -> Optional[str]:
        char = self._peek()
        if char is not None:
            self.pos += 1
        return char

    def _parse_expr(self) -> Expr:
        node = self._parse_term()
        while self._peek() in ("+", "-"):
            operator = self._advance()
            right = self._parse_term()
            node = self._combine(operator, node, right)
        return node

    def _parse_term(self) -> Expr:
        node = self._parse_factor()
        while self._peek() == "*":
            self._advance()
            right = self._parse_factor()
            node = self._combine("*", node, right)
        return node

    def _parse_factor(self) -> Expr:
        if self._peek() == "(":
            if self.nesting >= self.max_depth:
                raise ExpressionTooDeep(self.pos, self.max_depth)
            self._advance()
            self.nesting += 1
            node = self._parse_expr()
            self.nesting -= 1
            if self._peek() == ")":
                self._advance()
            return node
        start = self.pos
        while self._peek() is not None and self._peek() in DIGITS:
            self._advance()
        if self.pos == start:
            raise InvalidNumber(self._offending_text(start), start)
        digits = self.text[start:self.pos]
        # leading zeros carry no value
        significant = digits.lstrip("0") or "0"
        if len(significant) > len(str(self.max_literal)) or int(significant) > self.max_literal:
            raise NumberTooLarge(digits, start, self.max_literal)
        return NumberLiteral(value=int(significant))

    def _combine(self, operator: str, left: Expr, right: Expr) -> Expr:
        node = BinaryOperation(operator=operator, left=left, right=right)
        if node.depth > self.max_depth:
            raise ExpressionTooDeep(self.pos, self.max_depth)
        return node

    def _offending_text(self, start: int) -> str:
        end = start
        while end < len(self.text) and self.text[end] not in _DELIMITERS:
            end += 1
        if end == start:
            # a lone operator or parenthesis where a number was expected
            end = min(start + 1, len(self.text))
        return self.text[start:end]


def parse_expression(text: str) -> Expr:
    return Parser().parse(text)


__all__ = ["DIGITS", "MAX_DEPTH", "MAX_LITERAL", "Parser", "parse_expression"]
