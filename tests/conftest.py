"""
Shared pytest fixtures and configuration for RxTip tests.
"""

from decimal import Decimal

import pytest

from rxtip import TipCalculator


class Recorder:
    """Callable that records every value it is called with."""

    def __init__(self):
        self.values = []
        self.completed = 0

    def __call__(self, value):
        self.values.append(value)

    def on_completed(self):
        self.completed += 1

    @property
    def last(self):
        return self.values[-1]


@pytest.fixture
def calculator():
    """Calculator at the sample price of 20.00."""
    calc = TipCalculator(Decimal("20.00"))
    yield calc
    calc.close()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    """Factory for tests that need more than one recorder."""
    return Recorder
