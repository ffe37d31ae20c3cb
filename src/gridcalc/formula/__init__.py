"""
Formula module.

Tokenizing, evaluating and relocating cell formulas. ``evaluate`` is the
read side used for every rendered cell; ``adjust_references`` is the write
side used by fill-drag.
"""

from gridcalc.formula.evaluator import (
    DisplayError,
    DisplayValue,
    ROUND_DIGITS,
    coerce_literal,
    display_value,
    evaluate,
    format_display,
    is_formula,
    references,
)
from gridcalc.formula.references import adjust_references, shift_reference
from gridcalc.formula.arithmetic import evaluate_expression
from gridcalc.formula.tokenizer import Token, TokenType, tokenize

__all__ = [
    "DisplayError",
    "DisplayValue",
    "ROUND_DIGITS",
    "coerce_literal",
    "display_value",
    "evaluate",
    "format_display",
    "is_formula",
    "references",
    "adjust_references",
    "shift_reference",
    "evaluate_expression",
    "Token",
    "TokenType",
    "tokenize",
]
