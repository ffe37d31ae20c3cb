"""
Exception classes for gridcalc.

These exceptions are used throughout the gridcalc package to signal error
conditions in address handling and formula evaluation. Formula errors never
leave ``gridcalc.formula.evaluate``: the evaluator converts them into the
``#CIRCULAR!`` / ``#ERROR!`` display values.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridcalc.spreadsheet.model import CellAddress


class InvalidAddressError(ValueError):
    """Raised when a cell label or coordinate pair is not a valid address.

    Examples:
        - Labels that do not match ``[A-Z]+[0-9]+`` ("a1", "1A", "A")
        - Row number 0 in a label ("A0")
        - Negative row or column indices
        - Addresses outside the extent of a session's sheet
    """
    pass


class FormulaError(Exception):
    """Base class for errors raised while evaluating a formula."""
    pass


class FormulaSyntaxError(FormulaError):
    """Raised when a formula expression does not match the arithmetic grammar.

    The grammar accepts numeric literals, ``+ - * /``, parentheses and
    whitespace. Anything else (function names, ``^``, commas, quotes,
    lower-case references, an empty expression) is a syntax error.
    """

    def __init__(self, message: str, position: int = -1) -> None:
        super().__init__(message)
        self.position = position


class FormulaEvaluationError(FormulaError):
    """Raised on an arithmetic fault or an unresolvable reference.

    Examples:
        - Division by zero
        - A result that overflows to infinity
        - A reference that cannot be decoded to an address ("A0")
    """
    pass


class CircularReferenceError(FormulaError):
    """Raised when a formula re-enters an address already being evaluated.

    Attributes:
        address: The address that was re-entered
    """

    def __init__(self, address: "CellAddress") -> None:
        super().__init__(f"Circular reference through {address}")
        self.address = address
