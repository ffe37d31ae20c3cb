"""Shared pytest configuration and fixtures for gridcalc tests."""

import pytest

from gridcalc.spreadsheet import CellStore, Sheet
from gridcalc.session import Session


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Include tests marked @pytest.mark.slow (e.g. exhaustive address sweeps)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped unless --run-slow)")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip = pytest.mark.skip(reason="slow test, pass --run-slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def store() -> CellStore:
    return CellStore()


@pytest.fixture
def budget() -> CellStore:
    """A small household budget: amounts in column B, totals in column C."""
    return CellStore({
        "A1": "rent", "B1": "1200",
        "A2": "food", "B2": "450.5",
        "A3": "travel", "B3": "",
        "A4": "misc", "B4": "n/a",
        "C1": "=B1+B2+B3+B4",
        "C2": "=C1/4",
        "C3": "=C2*12",
    })


@pytest.fixture
def session() -> Session:
    return Session(Sheet("Sheet1", rows=50, cols=10))
