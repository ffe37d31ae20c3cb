"""
Spreadsheet module.

This module provides the addressing, storage and selection abstractions of
the engine, plus the write operations (SetCell, FillRange) a host applies
to a store.
"""

from gridcalc.spreadsheet.model import (
    CellAddress,
    Range,
    Sheet,
    decode_address,
    decode_column,
    encode_address,
    encode_column,
)
from gridcalc.spreadsheet.store import CellStore
from gridcalc.spreadsheet.selection import Selection, drag_rect
from gridcalc.spreadsheet.operations import (
    FillRange,
    SetCell,
    SpreadsheetOp,
    plan_fill,
)

__all__ = [
    "CellAddress",
    "Range",
    "Sheet",
    "decode_address",
    "decode_column",
    "encode_address",
    "encode_column",
    "CellStore",
    "Selection",
    "drag_rect",
    "FillRange",
    "SetCell",
    "SpreadsheetOp",
    "plan_fill",
]
