"""
Formula tokenizer.

Splits formula text into a flat list of tokens in a single left-to-right
scan. The token texts concatenate back to the input exactly, so the same
scan serves both the evaluator (which swaps reference tokens for numbers)
and the reference adjuster (which swaps them for relocated labels).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

FORMULA_PREFIX = "="


def is_formula(content: str) -> bool:
    """Content is a formula iff it is a string starting with ``=``."""
    return isinstance(content, str) and content.startswith(FORMULA_PREFIX)


class TokenType(Enum):
    REFERENCE = "reference"
    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    WHITESPACE = "whitespace"
    UNKNOWN = "unknown"


# Alternation order matters: a reference always starts with a letter, so it
# never competes with NUMBER for the same position.
_TOKEN_RE = re.compile(
    r"(?P<reference>[A-Z]+[0-9]+)"
    r"|(?P<number>[0-9]+\.?[0-9]*|\.[0-9]+)"
    r"|(?P<operator>[-+*/])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<whitespace>\s+)"
    r"|(?P<unknown>.)",
    re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    """A slice of formula text.

    Attributes:
        type: Token category
        text: Exact source text of the token
        start: Offset of the token in the scanned text
        value: Numeric value for NUMBER tokens (also set on references the
            evaluator has resolved)
    """
    type: TokenType
    text: str
    start: int
    value: Optional[float] = None

    @property
    def is_reference(self) -> bool:
        return self.type is TokenType.REFERENCE

    def resolved(self, value: float) -> "Token":
        """Return a NUMBER token carrying ``value`` in place of this one."""
        return Token(TokenType.NUMBER, self.text, self.start, float(value))


def tokenize(text: str) -> List[Token]:
    """Scan ``text`` into tokens covering every character."""
    tokens: List[Token] = []
    for match in _TOKEN_RE.finditer(text):
        kind = TokenType(match.lastgroup)
        token_text = match.group()
        value = float(token_text) if kind is TokenType.NUMBER else None
        tokens.append(Token(kind, token_text, match.start(), value))
    return tokens


def reference_tokens(text: str) -> List[Token]:
    return [token for token in tokenize(text) if token.is_reference]


def untokenize(tokens: List[Token]) -> str:
    return "".join(token.text for token in tokens)
