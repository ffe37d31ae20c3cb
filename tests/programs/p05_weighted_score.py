"""Program 5: weighted_score: weighted mean of three columns, filled down. Output 6×4."""

import pandas as pd

from gridcalc.spreadsheet import CellAddress, FillRange, Range, SetCell
from tests.programs import ProgramResult, column_writes

PROGRAM_NAME = "weighted_score"
OPERATIONS = ["SetCell", "FillRange"]


def run() -> ProgramResult:
    df = pd.DataFrame({
        "exam": [81, 67, 93, 55, 78, 88],
        "project": [90, 72, 85, 60, 95, 70],
        "quiz": [70, 80, 100, 45, 65, 92],
    })
    score = (df["exam"] * 2 + df["project"] * 3 + df["quiz"]) / 6
    expected = df.assign(score=score.round(10))

    ops = (
        column_writes(0, df["exam"].tolist())
        + column_writes(1, df["project"].tolist())
        + column_writes(2, df["quiz"].tolist())
    )
    ops += [
        SetCell(0, 3, "=(A1*2 + B1*3 + C1) / 6"),
        FillRange(CellAddress(0, 3), CellAddress(len(df) - 1, 3)),
    ]
    return ProgramResult(operations=ops, rect=Range.from_a1("A1:D6"), expected=expected)
