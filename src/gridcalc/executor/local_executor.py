"""
Local executor backed by gridcalc's own evaluator.

Replays spreadsheet operations into a CellStore and reads display values
back through ``gridcalc.formula.evaluate``. FillRange operations are
expanded with ``plan_fill`` against the store as it stands when the fill is
reached, so earlier SetCell operations in the same batch are visible.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from gridcalc.formula.evaluator import DisplayValue, display_value
from gridcalc.spreadsheet.model import CellAddress, Range
from gridcalc.spreadsheet.operations import FillRange, SetCell, SpreadsheetOp, plan_fill
from gridcalc.spreadsheet.store import CellStore

logger = logging.getLogger(__name__)


class LocalExecutor:
    """In-process executor over a CellStore.

    Usage::

        executor = LocalExecutor()
        executor.execute([SetCell(0, 0, "5"), SetCell(0, 1, "=A1+3")])
        executor.read_sheet(Range.from_a1("A1:B1"))  # [["5", 8.0]]
    """

    def __init__(self, store: Optional[CellStore] = None) -> None:
        self.store = store if store is not None else CellStore()

    def execute(self, operations: Iterable[SpreadsheetOp]) -> List[SetCell]:
        """Apply operations in order and return the SetCell writes performed."""
        written: List[SetCell] = []
        for op in operations:
            if isinstance(op, SetCell):
                writes = [op]
            elif isinstance(op, FillRange):
                writes = plan_fill(self.store, op.origin, op.target)
            else:
                raise TypeError(f"Unsupported operation: {op!r}")
            for write in writes:
                self.store.set(write.address, write.content)
            written.extend(writes)
        logger.debug("Applied %d cell writes", len(written))
        return written

    def display(self, address: CellAddress) -> DisplayValue:
        return display_value(address, self.store)

    def read_sheet(self, rect: Range) -> List[List[Any]]:
        """Display values of every cell in ``rect``."""
        matrix: List[List[Any]] = []
        for r in range(rect.row, rect.row_end + 1):
            matrix.append([
                display_value(CellAddress(r, c), self.store)
                for c in range(rect.col, rect.col_end + 1)
            ])
        return _trim_trailing_empty_rows(matrix)


def _trim_trailing_empty_rows(matrix: List[List[Any]]) -> List[List[Any]]:
    while matrix and all(cell == "" for cell in matrix[-1]):
        matrix.pop()
    return matrix
