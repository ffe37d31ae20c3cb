"""
End-to-end test program corpus.

Each sub-module exposes:
    PROGRAM_NAME  – human-readable label
    OPERATIONS    – list of operation kinds exercised
    run()         – returns a ProgramResult(operations, rect, expected)

``operations`` is the list of SetCell/FillRange writes that builds the
grid, ``rect`` the range to read back, and ``expected`` a pandas DataFrame
holding the values the grid must display, computed independently of the
engine.

``discover()`` collects every program module in this package so the
parametrized test runner can iterate over them.
"""

from collections import namedtuple
from typing import Any, List
import importlib
import pkgutil

from gridcalc.spreadsheet import SetCell

ProgramResult = namedtuple("ProgramResult", ["operations", "rect", "expected"])


def column_writes(col: int, values: List[Any], start_row: int = 0) -> List[SetCell]:
    """SetCell operations writing ``values`` down one column as literal text."""
    return [SetCell(start_row + i, col, str(v)) for i, v in enumerate(values)]


def discover() -> List:
    """Return a list of (module_name, module) pairs for every p##_*.py file."""
    programs = []
    package = __name__
    pkg_path = __path__

    for importer, modname, ispkg in pkgutil.iter_modules(pkg_path):
        if modname.startswith("p") and not ispkg:
            mod = importlib.import_module(f"{package}.{modname}")
            programs.append((modname, mod))

    programs.sort(key=lambda t: t[0])
    return programs
