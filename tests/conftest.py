import os

import pytest

from airdensity.density import CIPM2007AirDensity

os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture
def cipm():
    return CIPM2007AirDensity()


@pytest.fixture
def table():
    """Small table with a slope of 10/unit then 5/unit."""
    return {0.0: 0.0, 1.0: 10.0, 2.0: 15.0}
