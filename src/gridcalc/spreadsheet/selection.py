"""
Selection and drag range model.

A Selection tracks an anchor (where the selection started) and a focus
(where it currently ends). Hosts use it for highlighting and for the range
label shown next to the formula bar; the fill operation uses the same
bounding-rectangle rule through ``drag_rect``.
"""

from typing import Optional

from gridcalc.spreadsheet.model import CellAddress, Range, encode_address


def drag_rect(origin: CellAddress, target: CellAddress) -> Range:
    """Target rectangle of a fill-drag from ``origin`` to ``target``.

    Computed the same way as ``Selection.bounding_rect``.
    """
    return Range.from_corners(origin, target)


class Selection:
    """Anchor/focus selection over the grid.

    Attributes:
        anchor: Where the selection started, or None
        focus: Where the selection currently ends, or None
    """

    def __init__(self) -> None:
        self.anchor: Optional[CellAddress] = None
        self.focus: Optional[CellAddress] = None

    def select(self, address: CellAddress, extend: bool = False) -> None:
        """Select ``address``.

        With ``extend`` (shift-click) and an existing anchor, only the focus
        moves. Otherwise both anchor and focus jump to ``address``.
        """
        address = CellAddress.coerce(address)
        if not extend or self.anchor is None:
            self.anchor = address
        self.focus = address

    def clear(self) -> None:
        self.anchor = None
        self.focus = None

    def bounding_rect(self) -> Optional[Range]:
        """Inclusive rectangle spanned by anchor and focus, or None if unset."""
        if self.anchor is None or self.focus is None:
            return None
        return Range.from_corners(self.anchor, self.focus)

    def contains(self, address: CellAddress) -> bool:
        rect = self.bounding_rect()
        return rect is not None and rect.contains(CellAddress.coerce(address))

    def range_label(self) -> str:
        """Label such as "A1" or "A1:B3" (anchor first), "" when nothing is selected."""
        if self.anchor is None or self.focus is None:
            return ""
        start = encode_address(self.anchor)
        end = encode_address(self.focus)
        return start if start == end else f"{start}:{end}"

    def __repr__(self) -> str:
        return f"Selection({self.range_label()!r})"
