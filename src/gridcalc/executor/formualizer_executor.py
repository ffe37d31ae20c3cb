"""
Reference executor backed by formualizer.

Replays the same spreadsheet operations as LocalExecutor into an in-memory
formualizer Workbook and reads evaluated values back. formualizer is a full
Excel-compatible engine, so for acyclic arithmetic grids it serves as an
independent check on gridcalc's evaluator.

Literal cells are written the way a spreadsheet would type them: text that
reads as a number becomes a number, empty text becomes an empty cell, and
anything else stays text. Formula cells are installed verbatim.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List

import formualizer as fz

from gridcalc.formula.evaluator import DisplayError, is_numeric_literal
from gridcalc.formula.tokenizer import is_formula
from gridcalc.spreadsheet.model import Range
from gridcalc.spreadsheet.operations import FillRange, SetCell, SpreadsheetOp, plan_fill
from gridcalc.spreadsheet.store import CellStore

SHEET_NAME = "Sheet1"


class FormualizerExecutor:
    """In-process executor using formualizer.

    FillRange operations are planned against a shadow CellStore holding the
    raw content written so far, then installed cell by cell.

    Usage::

        executor = FormualizerExecutor()
        executor.execute([SetCell(0, 0, "5"), SetCell(0, 1, "=A1+3")])
        executor.read_sheet(Range.from_a1("A1:B1"))  # [[5.0, 8.0]]
    """

    def __init__(self, sheet_name: str = SHEET_NAME) -> None:
        self.wb = fz.Workbook()
        self.sheet_name = sheet_name
        self.wb.add_sheet(sheet_name)
        self._raw = CellStore()

    def execute(self, operations: Iterable[SpreadsheetOp]) -> None:
        for op in operations:
            if isinstance(op, SetCell):
                self._execute_set_cell(op)
            elif isinstance(op, FillRange):
                for write in plan_fill(self._raw, op.origin, op.target):
                    self._execute_set_cell(write)
            else:
                raise TypeError(f"Unsupported operation: {op!r}")

    def read_sheet(self, rect: Range) -> List[List[Any]]:
        """Evaluate and read back all cells of ``rect``.

        Error values read back as ``"#ERROR!"``; empty cells as ``""``.
        """
        matrix: List[List[Any]] = []
        for r in range(rect.row + 1, rect.row_end + 2):  # formualizer is 1-indexed
            row: List[Any] = []
            for c in range(rect.col + 1, rect.col_end + 2):
                row.append(_normalize(self.wb.evaluate_cell(self.sheet_name, r, c)))
            matrix.append(row)
        while matrix and all(cell == "" for cell in matrix[-1]):
            matrix.pop()
        return matrix

    def _execute_set_cell(self, op: SetCell) -> None:
        self._raw.set(op.address, op.content)
        r = op.row + 1
        c = op.col + 1
        if is_formula(op.content):
            self.wb.set_formula(self.sheet_name, r, c, op.content)
        else:
            self.wb.sheet(self.sheet_name).set_value(r, c, _to_literal(op.content))


def _to_literal(content: str) -> fz.LiteralValue:
    """Convert literal cell content to a formualizer LiteralValue."""
    if content == "":
        return fz.LiteralValue.empty()
    if is_numeric_literal(content):
        return fz.LiteralValue.number(float(content))
    return fz.LiteralValue.text(content)


def _normalize(value: Any) -> Any:
    """Normalise a cell value returned by formualizer.

    * ``None`` -> ``""``
    * Error dicts -> ``"#ERROR!"``
    * NaN -> ``"#ERROR!"``
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        return DisplayError.ERROR.value
    if isinstance(value, float) and math.isnan(value):
        return DisplayError.ERROR.value
    return value
