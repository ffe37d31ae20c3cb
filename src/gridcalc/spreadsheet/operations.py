"""
Spreadsheet operation classes.

This module defines the write operations a host applies to a cell store:
- SetCell: Store raw content (literal or formula) in one cell
- FillRange: Fill-drag a source cell's content across a rectangle

FillRange is expanded into SetCell operations by ``plan_fill``; executors
only ever write SetCell operations to their store.
"""

import logging
from dataclasses import dataclass
from typing import List, Union

from gridcalc.formula.references import adjust_references
from gridcalc.formula.tokenizer import is_formula
from gridcalc.spreadsheet.model import CellAddress
from gridcalc.spreadsheet.selection import drag_rect
from gridcalc.spreadsheet.store import CellStore

logger = logging.getLogger(__name__)


@dataclass
class SetCell:
    """Store raw content in a single cell.

    Attributes:
        row: Target row (0-indexed)
        col: Target column (0-indexed)
        content: Raw cell content (formulas start with '=')
    """
    row: int
    col: int
    content: str

    @property
    def address(self) -> CellAddress:
        return CellAddress(self.row, self.col)


@dataclass
class FillRange:
    """Fill-drag the content of ``origin`` over the rectangle up to ``target``.

    Attributes:
        origin: The source cell the drag started from
        target: The cell the drag ended on
    """
    origin: CellAddress
    target: CellAddress


# Type alias for all operation types
SpreadsheetOp = Union[SetCell, FillRange]


def plan_fill(store: CellStore, origin: CellAddress, target: CellAddress) -> List[SetCell]:
    """Expand a fill-drag into one SetCell per destination cell.

    The destination rectangle is the bounding box of ``origin`` and
    ``target``, walked row-major with the origin itself skipped. A formula
    source is relocated by each cell's offset from the origin; a literal
    source is copied unchanged. A drag that ends where it started produces
    no operations.

    Args:
        store: Store holding the source content
        origin: Cell the drag started from
        target: Cell the drag ended on

    Returns:
        The SetCell operations, in row-major order
    """
    origin = CellAddress.coerce(origin)
    target = CellAddress.coerce(target)
    rect = drag_rect(origin, target)
    if rect.is_single_cell():
        return []

    source = store.get(origin)
    formula = is_formula(source)
    ops: List[SetCell] = []
    for cell in rect.cells():
        if cell == origin:
            continue
        if formula:
            content = adjust_references(source, cell.row - origin.row, cell.col - origin.col)
        else:
            content = source
        ops.append(SetCell(cell.row, cell.col, content))

    logger.debug("Planned fill %s from %s: %d cells", rect.to_a1(), origin, len(ops))
    return ops
