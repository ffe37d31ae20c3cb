"""
Executor module for gridcalc.

This module provides backends that apply spreadsheet operations and read
evaluated cells back. ``LocalExecutor`` uses gridcalc's own evaluator over a
CellStore; ``FormualizerExecutor`` replays the same operations into a
formualizer workbook as an independent reference.
"""

from gridcalc.executor.base import Executor
from gridcalc.executor.local_executor import LocalExecutor
from gridcalc.executor.formualizer_executor import FormualizerExecutor

__all__ = [
    "Executor",
    "LocalExecutor",
    "FormualizerExecutor",
]
