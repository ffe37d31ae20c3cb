"""Program 3: growth_rate: period-over-period change in percent. Output 7×2."""

import pandas as pd

from gridcalc.spreadsheet import CellAddress, FillRange, Range, SetCell
from tests.programs import ProgramResult, column_writes

PROGRAM_NAME = "growth_rate"
OPERATIONS = ["SetCell", "FillRange"]


def run() -> ProgramResult:
    df = pd.DataFrame({"revenue": [100, 110, 99, 120, 150, 135, 162]})
    expected = df.assign(growth=(df["revenue"].pct_change() * 100).round(10))

    ops = column_writes(0, df["revenue"].tolist())
    ops += [
        SetCell(1, 1, "=(A2 - A1) / A1 * 100"),
        FillRange(CellAddress(1, 1), CellAddress(len(df) - 1, 1)),
    ]
    return ProgramResult(operations=ops, rect=Range.from_a1("A1:B7"), expected=expected)
