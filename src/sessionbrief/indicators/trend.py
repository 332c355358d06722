"""Long-term trend filter — simple moving average of closes."""

from __future__ import annotations

from collections.abc import Sequence

from sessionbrief.frames import bars_to_frame
from sessionbrief.models.bar import MarketBar


def long_term_average(bars: Sequence[MarketBar], period: int = 50) -> float | None:
    """Mean of the ``period`` most recent closes, or None with less history."""
    if len(bars) < period:
        return None
    return float(bars_to_frame(bars[:period])["close"].mean())
