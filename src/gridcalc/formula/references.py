"""
Reference relocation for fill-drag and copy.

``adjust_references`` shifts every cell reference of a formula by a row and
column delta. Rows are shifted without any lower bound, so a large negative
delta can produce a reference such as ``A0`` or ``A-2`` (which then evaluates
to ``#ERROR!``). A reference whose column would fall left of column A is left
exactly as written.
"""

from gridcalc.formula.tokenizer import FORMULA_PREFIX, Token, is_formula, tokenize, untokenize
from gridcalc.spreadsheet.model import LABEL_RE, decode_column, encode_column


def shift_reference(label: str, row_delta: int, col_delta: int) -> str:
    """Shift one ``[A-Z]+[0-9]+`` reference; returns it unchanged if the column would be <= 0."""
    letters, digits = LABEL_RE.fullmatch(label).groups()
    new_col = decode_column(letters) + 1 + col_delta
    if new_col <= 0:
        return label
    return f"{encode_column(new_col - 1)}{int(digits) + row_delta}"


def adjust_references(formula: str, row_delta: int, col_delta: int) -> str:
    """Rewrite the references of ``formula`` for a cell ``row_delta``/``col_delta`` away.

    Literal content (not starting with ``=``) is returned unchanged, as is
    every non-reference part of a formula.

    Example:
        >>> adjust_references("=A1+B1", 1, 0)
        '=A2+B2'
    """
    if not is_formula(formula):
        return formula

    tokens = [
        Token(t.type, shift_reference(t.text, row_delta, col_delta), t.start) if t.is_reference else t
        for t in tokenize(formula[len(FORMULA_PREFIX):])
    ]
    return FORMULA_PREFIX + untokenize(tokens)
