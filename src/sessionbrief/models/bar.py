"""Daily bar (OHLC) data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class MarketBar:
    """Single daily price bar.

    Attributes:
        date: Trading session date.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
    """

    date: date
    open: float
    high: float
    low: float
    close: float

    @property
    def range(self) -> float:
        """High-low spread of the session."""
        return self.high - self.low
