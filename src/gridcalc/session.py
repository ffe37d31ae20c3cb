"""
Interactive editing session.

A Session is the hosting layer a grid UI talks to. It owns the sheet
extent, the cell store, the selection, the active cell with its edit
buffer, and the fill-drag state, and it decides when an edit is committed:

- selecting another cell commits the active cell's pending edit
- ``enter()`` commits and moves one row down
- a fill-drag commits the pending edit before it starts

Display values are computed on every read; nothing is cached between edits.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import pandas as pd

from gridcalc.exceptions import InvalidAddressError
from gridcalc.executor.local_executor import LocalExecutor
from gridcalc.formula.evaluator import DisplayValue
from gridcalc.spreadsheet.model import ROW_GROWTH, CellAddress, Range, Sheet
from gridcalc.spreadsheet.operations import FillRange, SetCell
from gridcalc.spreadsheet.selection import Selection, drag_rect
from gridcalc.spreadsheet.store import AddressLike, CellStore
from gridcalc.utils.frames import grid_to_frame

logger = logging.getLogger(__name__)


class Session:
    """Editing session over a single sheet.

    Usage::

        session = Session()
        session.select("A1")
        session.edit("5")
        session.enter()              # commits A1, moves to A2
        session.edit("=A1*2")
        session.select("B1")         # commits A2
        session.display("A2")        # 10.0

    Attributes:
        sheet: Grid extent; addresses outside it are rejected
        store: Raw cell content
        selection: Anchor/focus selection
        active: The cell being edited, or None
        edit_value: Pending text for the active cell
    """

    def __init__(self, sheet: Optional[Sheet] = None, store: Optional[CellStore] = None) -> None:
        self.sheet = sheet if sheet is not None else Sheet()
        self.store = store if store is not None else CellStore()
        self.selection = Selection()
        self.executor = LocalExecutor(self.store)
        self.active: Optional[CellAddress] = None
        self.edit_value = ""
        self.drag_origin: Optional[CellAddress] = None
        self.drag_target: Optional[CellAddress] = None

    # -- selection and editing ------------------------------------------

    def select(self, address: AddressLike, extend: bool = False) -> None:
        """Make ``address`` the active cell, committing any pending edit first.

        Reselecting the active cell keeps its pending edit. With ``extend``
        the selection grows from its anchor to ``address``.
        """
        address = self._check(address)
        if self.active is not None and self.active != address:
            self.commit()
        self.selection.select(address, extend=extend)
        if address != self.active:
            self.active = address
            self.edit_value = self.store.get(address)

    def edit(self, text: str) -> None:
        """Replace the pending text of the active cell."""
        if self.active is None:
            raise ValueError("No active cell to edit")
        self.edit_value = text

    def commit(self) -> bool:
        """Write the pending text to the store if it differs from the stored content.

        Returns:
            True if the store was written
        """
        if self.active is None or self.store.get(self.active) == self.edit_value:
            return False
        logger.debug("Committing %s = %r", self.active, self.edit_value)
        self.executor.execute([SetCell(self.active.row, self.active.col, self.edit_value)])
        return True

    def enter(self) -> None:
        """Commit the active cell and move one row down (stays put on the last row)."""
        if self.active is None:
            return
        self.commit()
        below = self.active.offset(rows=1)
        if self.sheet.contains(below):
            self.select(below)

    @property
    def range_label(self) -> str:
        return self.selection.range_label()

    def is_selected(self, address: AddressLike) -> bool:
        return self.selection.contains(CellAddress.coerce(address))

    # -- fill-drag ------------------------------------------------------

    @property
    def dragging(self) -> bool:
        return self.drag_origin is not None

    def begin_drag(self, address: AddressLike) -> None:
        """Start a fill-drag from ``address``."""
        address = self._check(address)
        self.commit()
        self.drag_origin = address
        self.drag_target = address

    def drag_to(self, address: AddressLike) -> None:
        if not self.dragging:
            raise ValueError("No fill-drag in progress")
        self.drag_target = self._check(address)

    def in_drag(self, address: AddressLike) -> bool:
        """Whether ``address`` lies inside the rectangle of the drag in progress."""
        if not self.dragging:
            return False
        return drag_rect(self.drag_origin, self.drag_target).contains(CellAddress.coerce(address))

    def end_drag(self) -> List[SetCell]:
        """Finish the drag, filling the origin's content over the dragged rectangle.

        Returns:
            The SetCell writes performed (empty if the drag never left the origin)
        """
        if not self.dragging:
            return []
        try:
            writes = self.executor.execute([FillRange(self.drag_origin, self.drag_target)])
        finally:
            self.drag_origin = None
            self.drag_target = None
        if self.active is not None:
            self.edit_value = self.store.get(self.active)
        return writes

    # -- reading --------------------------------------------------------

    def display(self, address: AddressLike) -> DisplayValue:
        return self.executor.display(self._check(address))

    def read_grid(self, rect: Range) -> List[List[Any]]:
        """Display values of ``rect`` (trailing empty rows trimmed)."""
        return self.executor.read_sheet(rect)

    def to_frame(self, rect: Range) -> pd.DataFrame:
        """Display values of ``rect`` as a DataFrame labelled like the grid."""
        grid = self.executor.read_sheet(rect)
        return grid_to_frame(grid, rect)

    def add_rows(self, count: int = ROW_GROWTH) -> int:
        return self.sheet.add_rows(count)

    def _check(self, address: AddressLike) -> CellAddress:
        address = CellAddress.coerce(address)
        if not self.sheet.contains(address):
            raise InvalidAddressError(f"{address} is outside sheet {self.sheet.name!r}")
        return address
