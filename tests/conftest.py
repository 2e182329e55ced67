from __future__ import annotations

import pytest

from pyrafl.histogram import Histogram


def pytest_addoption(parser):
    """Add command line options for test categories."""
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests based on command line options."""
    # Skip slow tests unless --runslow option is given
    if not config.getoption("--runslow"):
        skip_slow = pytest.mark.skip(reason="need --runslow option to run")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture
def skewed_histogram():
    """Histogram with counts {A: 3, B: 1}."""
    return Histogram(bins={"A": 3, "B": 1})


@pytest.fixture
def balanced_histogram():
    """Histogram with counts {A: 2, B: 2}."""
    return Histogram(bins={"A": 2, "B": 2})


@pytest.fixture
def pure_histogram():
    """Histogram with counts {A: 10}."""
    return Histogram(bins={"A": 10})
