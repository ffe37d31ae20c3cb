"""
DataFrame export of display grids.

A display grid (as returned by ``Executor.read_sheet``) becomes a pandas
DataFrame whose columns are the grid's column letters and whose index is
the 1-based row numbers, so ``frame.loc[3, "B"]`` is the value of B3.
"""

from typing import Any, List

import pandas as pd

from gridcalc.spreadsheet.model import Range, encode_column


def grid_to_frame(grid: List[List[Any]], rect: Range) -> pd.DataFrame:
    """Label a display grid read from ``rect``.

    Rows trimmed from the end of ``grid`` (all-empty rows) are restored as
    empty strings so the frame always spans the whole rectangle.

    Raises:
        ValueError: If the grid is larger than the rectangle
    """
    if len(grid) > rect.num_rows or any(len(row) != rect.num_cols for row in grid):
        raise ValueError(f"Grid shape does not match range {rect.to_a1()}")

    rows = [list(row) for row in grid]
    rows.extend([""] * rect.num_cols for _ in range(rect.num_rows - len(grid)))

    return pd.DataFrame(
        rows,
        columns=[encode_column(c) for c in range(rect.col, rect.col_end + 1)],
        index=pd.Index(range(rect.row + 1, rect.row_end + 2), name="row"),
        dtype=object,
    )
