"""Program 4: fill_right: row 2 doubles row 1, filled across. Output 2×6."""

import pandas as pd

from gridcalc.spreadsheet import CellAddress, FillRange, Range, SetCell
from tests.programs import ProgramResult

PROGRAM_NAME = "fill_right"
OPERATIONS = ["SetCell", "FillRange"]


def run() -> ProgramResult:
    values = [4, 8, 15, 16, 23, 42]
    expected = pd.DataFrame([values, [v * 2 for v in values]])

    ops = [SetCell(0, c, str(v)) for c, v in enumerate(values)]
    ops += [
        SetCell(1, 0, "=A1*2"),
        FillRange(CellAddress(1, 0), CellAddress(1, len(values) - 1)),
    ]
    return ProgramResult(operations=ops, rect=Range.from_a1("A1:F2"), expected=expected)
