"""
Unit test fixtures. Pure core tests; no real DB or HTTP.
"""
from datetime import date

import pytest


@pytest.fixture
def day():
    """Day n of a fixed reference week (day(1) == 2025-03-10)."""
    def _day(n: int) -> date:
        return date(2025, 3, 9 + n)
    return _day
