"""
gridcalc - A spreadsheet cell and formula engine.

This package stores raw cell content, evaluates arithmetic formulas across
cell references with cycle detection, and relocates formula references when
a cell is fill-dragged or copied.

Usage:
    >>> import gridcalc
    >>> store = gridcalc.CellStore()
    >>> store.set("A1", "5")
    >>> store.set("B1", "=A1+3")
    >>> gridcalc.display_value("B1", store)
    8.0
    >>> gridcalc.adjust_references("=A1+B1", 1, 0)
    '=A2+B2'

Key components:
- CellAddress / Range: zero-based addresses and "A1"-style labels
- CellStore: sparse raw content keyed by address
- evaluate: display value of a cell's content (number, text or error sentinel)
- adjust_references: formula relocation for fill-drag
- Selection: anchor/focus selection model
- Session: editing host with commit-on-select and fill-drag
"""

from .exceptions import *
from .spreadsheet import (
    CellAddress,
    CellStore,
    FillRange,
    Range,
    Selection,
    SetCell,
    Sheet,
    decode_address,
    decode_column,
    drag_rect,
    encode_address,
    encode_column,
    plan_fill,
)
from .formula import (
    DisplayError,
    adjust_references,
    display_value,
    evaluate,
    format_display,
    is_formula,
    references,
)
from .executor import LocalExecutor, FormualizerExecutor
from .session import Session

# Version
__version__ = "0.1.0"

__all__ = [
    'CellAddress',
    'CellStore',
    'FillRange',
    'Range',
    'Selection',
    'SetCell',
    'Sheet',
    'decode_address',
    'decode_column',
    'drag_rect',
    'encode_address',
    'encode_column',
    'plan_fill',
    'DisplayError',
    'adjust_references',
    'display_value',
    'evaluate',
    'format_display',
    'is_formula',
    'references',
    'LocalExecutor',
    'FormualizerExecutor',
    'Session',
    'InvalidAddressError',
    'FormulaError',
    'FormulaSyntaxError',
    'FormulaEvaluationError',
    'CircularReferenceError',
]
