"""
Closed-grammar arithmetic for formula expressions.

Expressions are parsed into a small AST (Number, UnaryOp, BinaryOp) by a
recursive-descent parser and evaluated from there. The grammar only admits
numeric literals, ``+ - * /``, parentheses and whitespace::

    expr    := term (('+' | '-') term)*
    term    := unary (('*' | '/') unary)*
    unary   := ('+' | '-') unary | primary
    primary := NUMBER | '(' expr ')'

Binary operators are left associative; unary signs bind tighter than
``*`` and ``/``. Every other token is rejected with FormulaSyntaxError.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from gridcalc.exceptions import FormulaEvaluationError, FormulaSyntaxError
from gridcalc.formula.tokenizer import Token, TokenType, tokenize


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise FormulaEvaluationError("Division by zero")
    return left / right


BINARY_OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


class Node:
    """Base class for expression nodes."""

    def evaluate(self) -> float:
        raise NotImplementedError


@dataclass
class Number(Node):
    value: float

    def evaluate(self) -> float:
        return self.value


@dataclass
class UnaryOp(Node):
    op: str
    operand: Node

    def evaluate(self) -> float:
        value = self.operand.evaluate()
        return -value if self.op == "-" else value


@dataclass
class BinaryOp(Node):
    op: str
    left: Node
    right: Node

    def evaluate(self) -> float:
        result = BINARY_OPERATORS[self.op](self.left.evaluate(), self.right.evaluate())
        if not math.isfinite(result):
            raise FormulaEvaluationError(f"Arithmetic overflow in {self.op!r}")
        return result


class Parser:
    """Recursive-descent parser over a token list.

    Whitespace tokens are dropped up front. REFERENCE tokens must already be
    resolved to NUMBER tokens; an unresolved one is a syntax error.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens: List[Token] = [t for t in tokens if t.type is not TokenType.WHITESPACE]
        self.pos = 0

    def parse(self) -> Node:
        if not self.tokens:
            raise FormulaSyntaxError("Empty expression")
        node = self._expr()
        if self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            raise FormulaSyntaxError(f"Unexpected token {token.text!r}", token.start)
        return node

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _match_operator(self, *ops: str) -> str | None:
        token = self._peek()
        if token is not None and token.type is TokenType.OPERATOR and token.text in ops:
            self.pos += 1
            return token.text
        return None

    def _expr(self) -> Node:
        node = self._term()
        while True:
            op = self._match_operator("+", "-")
            if op is None:
                return node
            node = BinaryOp(op, node, self._term())

    def _term(self) -> Node:
        node = self._unary()
        while True:
            op = self._match_operator("*", "/")
            if op is None:
                return node
            node = BinaryOp(op, node, self._unary())

    def _unary(self) -> Node:
        op = self._match_operator("+", "-")
        if op is not None:
            return UnaryOp(op, self._unary())
        return self._primary()

    def _primary(self) -> Node:
        token = self._peek()
        if token is None:
            raise FormulaSyntaxError("Unexpected end of expression")
        if token.type is TokenType.NUMBER:
            self.pos += 1
            return Number(token.value)
        if token.type is TokenType.LPAREN:
            self.pos += 1
            node = self._expr()
            closing = self._peek()
            if closing is None or closing.type is not TokenType.RPAREN:
                raise FormulaSyntaxError("Missing closing parenthesis", token.start)
            self.pos += 1
            return node
        raise FormulaSyntaxError(f"Unexpected token {token.text!r}", token.start)


def parse(tokens: Sequence[Token]) -> Node:
    return Parser(tokens).parse()


def evaluate_tokens(tokens: Sequence[Token]) -> float:
    """Parse and evaluate an already-resolved token stream.

    Raises:
        FormulaSyntaxError: If the tokens do not form a valid expression
        FormulaEvaluationError: On division by zero or overflow
    """
    return parse(tokens).evaluate()


def evaluate_expression(text: str) -> float:
    """Evaluate a reference-free arithmetic expression, e.g. ``"(1 + 2) * 3"``."""
    return evaluate_tokens(tokenize(text))
