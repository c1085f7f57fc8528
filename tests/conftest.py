"""Shared fixtures and markers for lightid tests."""

import pytest

from lightid.core.numeral import DEFAULT_ALPHABET


ROUND_TRIP_ALPHABETS = {
    2: "01",
    3: "abc",
    16: "0123456789abcdef",
    62: DEFAULT_ALPHABET,
}


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: exhaustive round-trip sweeps")


@pytest.fixture(params=sorted(ROUND_TRIP_ALPHABETS), ids=lambda b: f"base{b}")
def alphabet(request):
    """One alphabet per base used in the round-trip sweeps."""
    return ROUND_TRIP_ALPHABETS[request.param]


@pytest.fixture
def abc_gen():
    from lightid.engine.generator import SequenceGenerator
    return SequenceGenerator("abc")
