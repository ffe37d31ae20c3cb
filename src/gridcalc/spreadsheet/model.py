"""
Spreadsheet model classes.

This module provides the address layer of the engine:
- encode_column / decode_column: bijective base-26 column letters
- encode_address / decode_address: "A1"-style labels for zero-based addresses
- CellAddress: A single zero-based (row, col) coordinate
- Range: A rectangular cell region (e.g., A2:C100)
- Sheet: The grid extent a host renders
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from gridcalc.exceptions import InvalidAddressError

DEFAULT_ROWS = 10000
DEFAULT_COLS = 1000
ROW_GROWTH = 1000

LABEL_RE = re.compile(r"([A-Z]+)([0-9]+)")


def encode_column(col: int) -> str:
    """Convert a column index (0-indexed) to its letters.

    Args:
        col: Column number (0 = A, 25 = Z, 26 = AA, etc.)

    Returns:
        Column letter(s) in A1 notation

    Raises:
        InvalidAddressError: If col is negative
    """
    if col < 0:
        raise InvalidAddressError(f"Column index must be non-negative, got {col}")
    letters = ""
    while col >= 0:
        letters = chr(ord("A") + col % 26) + letters
        col = col // 26 - 1
    return letters


def decode_column(letters: str) -> int:
    """Convert column letter(s) to a column index (0-indexed).

    Args:
        letters: Upper-case column letter(s) (A, Z, AA, etc.)

    Returns:
        Column number (A = 0, Z = 25, AA = 26, etc.)

    Raises:
        InvalidAddressError: If letters is empty or contains anything but A-Z
    """
    if not letters or not all("A" <= ch <= "Z" for ch in letters):
        raise InvalidAddressError(f"Invalid column letters: {letters!r}")
    col = 0
    for ch in letters:
        col = col * 26 + (ord(ch) - ord("A") + 1)
    return col - 1


@dataclass(frozen=True, order=True)
class CellAddress:
    """A zero-based cell coordinate.

    Addresses are hashable and ordered row-major, so they can key a
    ``CellStore`` directly.

    Attributes:
        row: Row index (0-indexed, non-negative)
        col: Column index (0-indexed, non-negative)
    """
    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise InvalidAddressError(
                f"Row and column must be non-negative (0-indexed), got ({self.row}, {self.col})"
            )

    @property
    def label(self) -> str:
        """The A1-style label, e.g. ``CellAddress(0, 27).label == "AB1"``."""
        return encode_address(self)

    @classmethod
    def from_label(cls, label: str) -> "CellAddress":
        """Parse an A1-style label.

        Raises:
            InvalidAddressError: If the label is not a valid cell label
        """
        addr = decode_address(label)
        if addr is None:
            raise InvalidAddressError(f"Invalid cell notation: {label!r}")
        return addr

    @classmethod
    def coerce(cls, value: Union["CellAddress", Tuple[int, int], str]) -> "CellAddress":
        """Normalize an address, a ``(row, col)`` tuple or a label to a CellAddress."""
        if isinstance(value, CellAddress):
            return value
        if isinstance(value, str):
            return cls.from_label(value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(int(value[0]), int(value[1]))
        raise TypeError(f"Cannot interpret {value!r} as a cell address")

    def offset(self, rows: int = 0, cols: int = 0) -> "CellAddress":
        return CellAddress(self.row + rows, self.col + cols)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"CellAddress({self.label!r})"


def encode_address(addr: CellAddress) -> str:
    """Convert an address to its label: ``encode_column(col)`` + 1-based row."""
    return f"{encode_column(addr.col)}{addr.row + 1}"


def decode_address(label: str) -> Optional[CellAddress]:
    """Parse a label of the exact shape ``[A-Z]+[0-9]+``.

    Returns:
        The address, or None if the label does not have that shape or names
        row 0 (which has no zero-based counterpart)
    """
    if not isinstance(label, str):
        return None
    match = LABEL_RE.fullmatch(label)
    if not match:
        return None
    letters, digits = match.groups()
    row = int(digits) - 1
    if row < 0:
        return None
    return CellAddress(row, decode_column(letters))


class Range:
    """Represents a rectangular cell region in A1 notation.

    Range uses 0-indexed coordinates internally and converts to 1-indexed
    A1 notation via to_a1().

    A Range can be:
    - A single cell: A1 corresponds to (row=0, col=0, row_end=0, col_end=0)
    - A cell range: A1:B10 corresponds to (row=0, col=0, row_end=9, col_end=1)

    Attributes:
        row: Starting row (0-indexed)
        col: Starting column (0-indexed)
        row_end: Ending row (0-indexed, inclusive)
        col_end: Ending column (0-indexed, inclusive)
    """

    def __init__(
        self,
        row: int,
        col: int,
        row_end: Optional[int] = None,
        col_end: Optional[int] = None
    ) -> None:
        """Initialize a Range with 0-indexed coordinates.

        Args:
            row: Starting row (0-indexed, non-negative)
            col: Starting column (0-indexed, non-negative)
            row_end: Ending row (0-indexed, defaults to row for single cell)
            col_end: Ending column (0-indexed, defaults to col for single cell)

        Raises:
            InvalidAddressError: If coordinates are invalid
        """
        if row < 0 or col < 0:
            raise InvalidAddressError("Row and column must be non-negative (0-indexed)")

        self.row = row
        self.col = col
        self.row_end = row_end if row_end is not None else row
        self.col_end = col_end if col_end is not None else col

        if self.row_end < self.row or self.col_end < self.col:
            raise InvalidAddressError("End coordinates must be >= start coordinates")

    @classmethod
    def from_corners(cls, a: CellAddress, b: CellAddress) -> "Range":
        """Bounding rectangle of two corner addresses, in any order."""
        return cls(
            row=min(a.row, b.row),
            col=min(a.col, b.col),
            row_end=max(a.row, b.row),
            col_end=max(a.col, b.col),
        )

    @classmethod
    def from_a1(cls, notation: str) -> "Range":
        """Parse A1 notation string to create a Range.

        Supports:
        - Single cell: A1, ZZ100
        - Cell range: A1:B10 (corners may be given in any order)

        Raises:
            InvalidAddressError: If notation is invalid
        """
        notation = notation.strip()
        if not notation:
            raise InvalidAddressError("Empty range notation")

        parts = notation.split(":")
        if len(parts) > 2:
            raise InvalidAddressError(f"Invalid range notation: {notation}")

        corners = [decode_address(part.strip()) for part in parts]
        if any(corner is None for corner in corners):
            raise InvalidAddressError(f"Invalid range notation: {notation}")

        return cls.from_corners(corners[0], corners[-1])

    def to_a1(self) -> str:
        """Convert Range to A1 notation string (e.g., "A1" or "A1:B10")."""
        start_cell = encode_address(self.start)
        if self.is_single_cell():
            return start_cell
        return f"{start_cell}:{encode_address(self.end)}"

    @property
    def start(self) -> CellAddress:
        return CellAddress(self.row, self.col)

    @property
    def end(self) -> CellAddress:
        return CellAddress(self.row_end, self.col_end)

    @property
    def num_rows(self) -> int:
        return self.row_end - self.row + 1

    @property
    def num_cols(self) -> int:
        return self.col_end - self.col + 1

    def is_single_cell(self) -> bool:
        return self.row == self.row_end and self.col == self.col_end

    def contains(self, addr: CellAddress) -> bool:
        """Check whether an address lies inside this range (bounds inclusive)."""
        return self.row <= addr.row <= self.row_end and self.col <= addr.col <= self.col_end

    def cells(self) -> Iterator[CellAddress]:
        """Iterate over every address in the range, row-major."""
        for r in range(self.row, self.row_end + 1):
            for c in range(self.col, self.col_end + 1):
                yield CellAddress(r, c)

    def __repr__(self) -> str:
        return f"Range({self.to_a1()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (
            self.row == other.row
            and self.col == other.col
            and self.row_end == other.row_end
            and self.col_end == other.col_end
        )

    def __hash__(self) -> int:
        return hash((self.row, self.col, self.row_end, self.col_end))


class Sheet:
    """The grid extent a host renders, with name and dimensions.

    The engine itself addresses an unbounded grid; the sheet only bounds
    what a session lets the user select and edit.

    Attributes:
        name: The sheet name (must be non-empty)
        rows: Number of rows (must be positive)
        cols: Number of columns (must be positive)
    """

    def __init__(self, name: str = "Sheet1", rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        """Initialize a Sheet.

        Raises:
            ValueError: If name is empty or dimensions are not positive
        """
        if not name or not isinstance(name, str):
            raise ValueError("Sheet name must be a non-empty string")
        if rows <= 0 or cols <= 0:
            raise ValueError("Sheet dimensions must be positive integers")

        self.name = name
        self.rows = rows
        self.cols = cols

    def contains(self, addr: CellAddress) -> bool:
        return addr.row < self.rows and addr.col < self.cols

    def add_rows(self, count: int = ROW_GROWTH) -> int:
        """Grow the sheet by ``count`` rows and return the new row count."""
        if count <= 0:
            raise ValueError("Row count to add must be positive")
        self.rows += count
        return self.rows

    def __repr__(self) -> str:
        return f"Sheet(name={self.name!r}, rows={self.rows}, cols={self.cols})"
