"""
Abstract executor interface for spreadsheet backends.

The Executor protocol defines the contract that every backend must satisfy:
apply a sequence of spreadsheet operations, then read back evaluated cells.
Concrete implementations are LocalExecutor (this package's evaluator over a
CellStore) and FormualizerExecutor (an in-memory formualizer workbook).
"""

from typing import Any, Iterable, List, Protocol

from gridcalc.spreadsheet.model import Range
from gridcalc.spreadsheet.operations import SpreadsheetOp


class Executor(Protocol):
    """Protocol for spreadsheet execution backends."""

    def execute(self, operations: Iterable[SpreadsheetOp]) -> Any:
        """Apply operations in order.

        Returns:
            Backend-specific. LocalExecutor returns the SetCell writes it
            performed; FormualizerExecutor returns None.
        """
        ...

    def read_sheet(self, rect: Range) -> List[List[Any]]:
        """Evaluate and read back every cell of ``rect``.

        Returns a 2D list (rows x cols) with trailing all-empty rows
        trimmed. Empty cells read as ``""``.
        """
        ...
