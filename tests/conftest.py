"""Shared fixtures for sessionbrief tests."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from sessionbrief.models.bar import MarketBar


def _weekdays_ending(end: date, count: int) -> list[date]:
    """The last ``count`` weekdays up to and including ``end``, oldest first."""
    days: list[date] = []
    current = end
    while len(days) < count:
        if current.weekday() < 5:
            days.append(current)
        current -= timedelta(days=1)
    return list(reversed(days))


def make_series(closes: list[float], end: date = date(2024, 3, 15), spread: float = 2.0) -> list[MarketBar]:
    """Weekday bars ending at ``end``, most recent first.

    ``closes`` is given oldest first. Each bar opens at the previous close
    and its high/low sit ``spread`` above/below max/min(open, close).
    """
    dates = _weekdays_ending(end, len(closes))
    bars = []
    prev = closes[0]
    for d, close in zip(dates, closes):
        bars.append(MarketBar(
            date=d,
            open=prev,
            high=max(prev, close) + spread,
            low=min(prev, close) - spread,
            close=close,
        ))
        prev = close
    return list(reversed(bars))


@pytest.fixture
def two_bars() -> list[MarketBar]:
    """Worked example: Friday bar then Thursday bar."""
    return [
        MarketBar(date=date(2024, 3, 15), open=100.0, high=110.0, low=95.0, close=105.0),
        MarketBar(date=date(2024, 3, 14), open=95.0, high=108.0, low=93.0, close=100.0),
    ]


@pytest.fixture
def long_series() -> list[MarketBar]:
    """60 weekday bars oscillating around 100, most recent first."""
    closes = [100.0 + ((i * 7) % 11) - 5 + i * 0.1 for i in range(60)]
    return make_series(closes)


@pytest.fixture
def series_factory():
    return make_series
