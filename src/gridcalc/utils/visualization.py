"""
Dependency visualization utilities.

Provides text-based tree rendering of a cell's references. The tree shows
each formula's direct references as children, recursively, which makes it
easy to see why a cell evaluates to ``#CIRCULAR!`` or ``#ERROR!``.
"""

from typing import List, Set

from gridcalc.formula.evaluator import format_display, display_value, references
from gridcalc.spreadsheet.model import CellAddress
from gridcalc.spreadsheet.store import AddressLike, CellStore


def visualize_dependencies(store: CellStore, address: AddressLike) -> str:
    """Generate a text tree of the references reachable from ``address``.

    Each node shows the cell label, its raw content and its display value.
    A reference back to a cell already on the path from the root is shown
    once, marked ``[circular]``, and not expanded further.

    Example:
        >>> store = CellStore({"A1": "5", "B1": "=A1+3"})
        >>> print(visualize_dependencies(store, "B1"))
        B1 '=A1+3' -> 8
        └── A1 '5' -> 5
    """
    address = CellAddress.coerce(address)
    lines: List[str] = []
    _visualize_cell(store, address, lines, prefix=None, is_last=True, path=set())
    return "\n".join(lines)


def _visualize_cell(
    store: CellStore,
    address: CellAddress,
    lines: List[str],
    prefix: str,
    is_last: bool,
    path: Set[CellAddress],
) -> None:
    if address in path:
        lines.append(prefix + ("└── " if is_last else "├── ") + f"{address} [circular]")
        return

    desc = _format_cell(store, address)
    if prefix is None:
        lines.append(desc)
        child_prefix = ""
    else:
        lines.append(prefix + ("└── " if is_last else "├── ") + desc)
        child_prefix = prefix + ("    " if is_last else "│   ")

    deps = references(store.get(address))
    path.add(address)
    for i, dep in enumerate(deps):
        _visualize_cell(store, dep, lines, child_prefix, i == len(deps) - 1, path)
    path.discard(address)


def _format_cell(store: CellStore, address: CellAddress) -> str:
    content = store.get(address)
    if content == "":
        return f"{address} (empty)"
    shown = format_display(display_value(address, store))
    return f"{address} {content!r} -> {shown}"
