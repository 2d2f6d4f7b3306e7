"""Shared fixtures for the field profiler test suite."""

from datetime import date, timedelta

import pytest


@pytest.fixture
def make_rows():
    """Build single-field rows from a list of values."""
    def _make(values, field_name="f"):
        return [{field_name: value} for value in values]
    return _make


@pytest.fixture
def abc_rows(make_rows):
    """Five rows: A, B, A, C, A."""
    return make_rows(["A", "B", "A", "C", "A"])


@pytest.fixture
def daily_date_rows(make_rows):
    """Thirty consecutive ISO dates starting 2024-01-01."""
    start = date(2024, 1, 1)
    return make_rows([(start + timedelta(days=i)).isoformat() for i in range(30)])


@pytest.fixture
def mixed_rows():
    """Rows with a numeric, a date and a text field."""
    return [
        {"amount": "10", "created": "2024-01-01", "country": "Norway"},
        {"amount": "20", "created": "2024-01-02", "country": "Sweden"},
        {"amount": "30", "created": "2024-01-03", "country": "Norway"},
        {"amount": "40", "created": "2024-01-04", "country": "Denmark"},
        {"amount": "50", "created": "2024-01-05", "country": "Norway"},
    ]
