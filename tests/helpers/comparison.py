"""
Comparison utilities for end-to-end correctness tests.

Provides matrix-level comparison between a pandas DataFrame (the expected
result) and a 2D list of display values read back from an executor (the
actual result).
"""

import math
from typing import Any, List

import pandas as pd


def dataframe_to_matrix(df: pd.DataFrame) -> List[List[Any]]:
    """Convert a pandas DataFrame to a 2D list of values (no header row)."""
    return [[_normalize_value(v) for v in row] for _, row in df.iterrows()]


def _normalize_value(v: Any) -> Any:
    """Normalise a pandas value to something comparable with grid output."""
    if v is None or (isinstance(v, float) and math.isnan(v)):
        return ""
    return v


def _values_equal(expected: Any, actual: Any, rtol: float = 1e-9) -> bool:
    """Compare two cell values with tolerance for floats.

    Literal cells read back as text ("5") from LocalExecutor and as numbers
    (5.0) from FormualizerExecutor, so numeric text is compared as a number.
    """
    if expected == "" and actual == "":
        return True

    try:
        e = float(expected)
        a = float(actual)
        if e == 0 and a == 0:
            return True
        return abs(e - a) <= rtol * max(abs(e), abs(a))
    except (ValueError, TypeError):
        pass

    return str(expected) == str(actual)


def assert_matrix_equal(
    expected: List[List[Any]],
    actual: List[List[Any]],
    rtol: float = 1e-9,
    check_shape: bool = True,
) -> None:
    """Assert that two 2D matrices are cell-by-cell equal (with float tolerance).

    Raises:
        AssertionError with a message pinpointing the first mismatch
    """
    if check_shape:
        assert len(expected) == len(actual), (
            f"Row count mismatch: expected {len(expected)}, got {len(actual)}"
        )
        for i, (e_row, a_row) in enumerate(zip(expected, actual)):
            assert len(e_row) == len(a_row), (
                f"Column count mismatch in row {i}: expected {len(e_row)}, got {len(a_row)}"
            )

    for i, (e_row, a_row) in enumerate(zip(expected, actual)):
        for j, (e_val, a_val) in enumerate(zip(e_row, a_row)):
            assert _values_equal(e_val, a_val, rtol), (
                f"Cell mismatch at ({i}, {j}): expected {e_val!r}, got {a_val!r}"
            )
