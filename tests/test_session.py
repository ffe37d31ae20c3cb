"""
Unit tests for the interactive editing Session.

Tests cover:
- Commit-on-select, enter, and the edit buffer
- Selection extension and range labels
- Fill-drag lifecycle
- Reads: display values, grids and DataFrames
- Sheet bounds and row growth
"""

import pytest

from gridcalc.exceptions import InvalidAddressError
from gridcalc.formula.evaluator import DisplayError
from gridcalc.session import Session
from gridcalc.spreadsheet import CellAddress, CellStore, Range, Sheet


class TestEditing:
    """Test suite for selection and commit behaviour."""

    def test_select_loads_raw_content(self, session):
        session.store.set("A1", "=1+1")
        session.select("A1")
        assert session.active == CellAddress(0, 0)
        assert session.edit_value == "=1+1"

    def test_edit_without_active_cell(self, session):
        with pytest.raises(ValueError, match="No active cell"):
            session.edit("5")

    def test_edit_is_not_committed_until_select(self, session):
        session.select("A1")
        session.edit("5")
        assert session.store.get("A1") == ""
        session.select("B1")
        assert session.store.get("A1") == "5"

    def test_reselecting_same_cell_keeps_pending_edit(self, session):
        session.select("A1")
        session.edit("5")
        session.select("A1")
        assert session.store.get("A1") == ""
        assert session.edit_value == "5"

    def test_commit_only_writes_changes(self, session):
        session.select("A1")
        assert session.commit() is False
        session.edit("x")
        assert session.commit() is True
        generation = session.store.generation
        assert session.commit() is False
        assert session.store.generation == generation

    def test_enter_commits_and_moves_down(self, session):
        session.select("A1")
        session.edit("5")
        session.enter()
        assert session.active == CellAddress(1, 0)
        session.edit("=A1*2")
        session.select("B1")
        assert session.display("A2") == 10.0

    def test_enter_on_last_row_stays_put(self):
        session = Session(Sheet("Sheet1", rows=2, cols=2))
        session.select("A2")
        session.edit("last")
        session.enter()
        assert session.active == CellAddress(1, 0)
        assert session.store.get("A2") == "last"

    def test_enter_without_active_cell_is_noop(self, session):
        session.enter()
        assert session.active is None

    def test_uses_given_store(self, budget):
        session = Session(store=budget)
        assert session.display("C1") == 1650.5


class TestSelectionLabels:
    """Test suite for selection state exposed by the session."""

    def test_range_label(self, session):
        assert session.range_label == ""
        session.select("B2")
        assert session.range_label == "B2"
        session.select("D4", extend=True)
        assert session.range_label == "B2:D4"
        assert session.is_selected("C3")
        assert not session.is_selected("E5")

    def test_extend_moves_active_cell(self, session):
        session.select("B2")
        session.edit("7")
        session.select("C3", extend=True)
        assert session.store.get("B2") == "7"
        assert session.active == CellAddress(2, 2)


class TestFillDrag:
    """Test suite for the fill-drag lifecycle."""

    def test_drag_fills_formula(self, session):
        session.store.set("A1", "1")
        session.store.set("A2", "2")
        session.store.set("A3", "3")
        session.store.set("B1", "=A1*2")
        session.begin_drag("B1")
        assert session.dragging
        session.drag_to("B3")
        assert session.in_drag("B2")
        assert not session.in_drag("A2")
        writes = session.end_drag()
        assert [(w.address.label, w.content) for w in writes] == [
            ("B2", "=A2*2"),
            ("B3", "=A3*2"),
        ]
        assert not session.dragging
        assert session.read_grid(Range.from_a1("B1:B3")) == [[2.0], [4.0], [6.0]]

    def test_begin_drag_commits_pending_edit(self, session):
        session.select("A1")
        session.edit("=5*5")
        session.begin_drag("A1")
        assert session.store.get("A1") == "=5*5"
        session.drag_to("A2")
        session.end_drag()
        assert session.display("A2") == 25.0

    def test_end_drag_refreshes_edit_buffer(self, session):
        session.store.set("A1", "x")
        session.select("A2")
        session.begin_drag("A1")
        session.drag_to("A3")
        session.end_drag()
        assert session.edit_value == "x"

    def test_drag_onto_origin_writes_nothing(self, session):
        session.store.set("A1", "=1")
        session.begin_drag("A1")
        assert session.end_drag() == []

    def test_drag_to_without_begin(self, session):
        with pytest.raises(ValueError, match="No fill-drag"):
            session.drag_to("A2")

    def test_end_drag_without_begin(self, session):
        assert session.end_drag() == []
        assert not session.in_drag("A1")

    def test_drag_creates_cycle(self, session):
        session.store.set("A1", "=A2+1")
        session.begin_drag("A1")
        session.drag_to("A2")
        session.end_drag()
        assert session.store.get("A2") == "=A3+1"
        assert session.display("A1") == 2.0

        session.store.set("A3", "=A1")
        assert session.display("A1") == DisplayError.CIRCULAR


class TestReadsAndBounds:
    """Test suite for reads, sheet bounds and growth."""

    def test_to_frame(self, session):
        session.store.set("A1", "5")
        session.store.set("B2", "=A1/2")
        frame = session.to_frame(Range.from_a1("A1:B3"))
        assert list(frame.columns) == ["A", "B"]
        assert list(frame.index) == [1, 2, 3]
        assert frame.loc[2, "B"] == 2.5
        assert frame.loc[3, "A"] == ""

    def test_outside_sheet_rejected(self, session):
        with pytest.raises(InvalidAddressError, match="outside sheet"):
            session.select("K1")
        with pytest.raises(InvalidAddressError, match="outside sheet"):
            session.display("A51")

    def test_add_rows(self, session):
        assert session.add_rows() == 1050
        session.select("A1000")
        assert session.active == CellAddress(999, 0)
        assert session.add_rows(10) == 1060

    def test_default_sheet(self):
        session = Session()
        assert (session.sheet.name, session.sheet.rows, session.sheet.cols) == ("Sheet1", 10000, 1000)
        assert isinstance(session.store, CellStore)
