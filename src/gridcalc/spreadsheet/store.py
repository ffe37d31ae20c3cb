"""
Sparse cell storage.

The CellStore owns the raw content of every cell that has ever been written.
It is passed explicitly to the evaluator and to the fill planner; nothing in
the engine keeps a module-level store.
"""

from typing import Dict, Iterator, Optional, Tuple, Union

from gridcalc.spreadsheet.model import CellAddress

AddressLike = Union[CellAddress, Tuple[int, int], str]


class CellStore:
    """Mapping from CellAddress to raw cell content.

    Absent entries read as the empty string. Entries are created on first
    write and overwritten on edit; clearing a cell writes ``""`` rather than
    deleting the entry.

    The store is not synchronized. The hosting layer applies one edit at a
    time before the next read.

    Attributes:
        generation: Counter bumped on every write, for callers that want to
            know whether the store changed between two reads
    """

    def __init__(self, cells: Optional[Dict[AddressLike, str]] = None) -> None:
        self._cells: Dict[CellAddress, str] = {}
        self.generation = 0
        for address, content in (cells or {}).items():
            self.set(address, content)

    def get(self, address: AddressLike) -> str:
        """Return the raw content at ``address`` ("" if never written)."""
        return self._cells.get(CellAddress.coerce(address), "")

    def set(self, address: AddressLike, content: str) -> None:
        """Overwrite the raw content at ``address``.

        Raises:
            TypeError: If content is not a string
            InvalidAddressError: If address is not a valid address
        """
        if not isinstance(content, str):
            raise TypeError(f"Cell content must be a string, got {type(content).__name__}")
        self._cells[CellAddress.coerce(address)] = content
        self.generation += 1

    def clear(self, address: AddressLike) -> None:
        self.set(address, "")

    def items(self) -> Iterator[Tuple[CellAddress, str]]:
        return iter(self._cells.items())

    def __contains__(self, address: object) -> bool:
        try:
            return CellAddress.coerce(address) in self._cells  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[CellAddress]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"CellStore({len(self._cells)} cells, generation={self.generation})"
