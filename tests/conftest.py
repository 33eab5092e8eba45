"""Pytest configuration for poissimple test suite."""

import itertools

import matplotlib
import pytest

# Plots are only rendered to off-screen buffers during tests
matplotlib.use("Agg")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large point counts, may take several seconds)",
    )


class SequenceSource:
    """Deterministic random source replaying a fixed list of values.

    The values are cycled once exhausted. ``calls`` counts the draws made.
    """

    def __init__(self, values):
        self.values = list(values)
        self._cycle = itertools.cycle(self.values)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return next(self._cycle)


@pytest.fixture
def sequence_source():
    """Factory fixture building a SequenceSource from a list of draws."""
    return SequenceSource


@pytest.fixture
def unit_square():
    return [[0.0, 1.0], [0.0, 1.0]]
