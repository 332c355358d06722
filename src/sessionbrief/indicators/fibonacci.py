"""Fibonacci retracements and extensions of the recent swing."""

from __future__ import annotations

from collections.abc import Sequence

from sessionbrief.config import AnalysisPolicy
from sessionbrief.frames import bars_to_frame
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel, sorted_levels
from sessionbrief.models.snapshot import FibonacciLevels


def _pct(ratio: float) -> str:
    """Format a ratio as a level label: 0.618 → ``61.8%``, 2.0 → ``200%``."""
    return f"{ratio * 100:.1f}".rstrip("0").rstrip(".") + "%"


def project_fibonacci(
    bars: Sequence[MarketBar], policy: AnalysisPolicy
) -> FibonacciLevels | None:
    """Project swing levels, or None without enough history or on a flat swing.

    Args:
        bars: Bar series, most recent first.
        policy: Supplies the window size, swing source and ratio sets.

    Returns:
        Retracements measured down from the swing high and extensions, each
        ascending by value. Extensions are either symmetric around the latest
        close (``_up``/``_down`` labels) or projected from the swing base in
        the direction of the last close-to-close move.
    """
    if len(bars) < policy.fib_window:
        return None

    swing = bars_to_frame(bars[: policy.fib_window])
    if policy.fib_use_closes:
        high = float(swing["close"].max())
        low = float(swing["close"].min())
    else:
        high = float(swing["high"].max())
        low = float(swing["low"].min())

    diff = high - low
    if diff <= 0:
        return None

    retracements = [PriceLevel(_pct(r), high - diff * r) for r in policy.fib_retracements]
    if policy.fib_include_endpoints:
        retracements.append(PriceLevel("0%", high))
        retracements.append(PriceLevel("100%", low))

    close = bars[0].close
    extensions: list[PriceLevel] = []
    if policy.fib_extend_from_close:
        for r in policy.fib_extensions:
            extensions.append(PriceLevel(f"{_pct(r)}_up", close + diff * r))
            extensions.append(PriceLevel(f"{_pct(r)}_down", close - diff * r))
    else:
        uptrend = len(bars) > 1 and close > bars[1].close
        base = low if uptrend else high
        sign = 1 if uptrend else -1
        for r in policy.fib_extensions:
            extensions.append(PriceLevel(_pct(r), base + sign * diff * r))

    return FibonacciLevels(
        swing_high=high,
        swing_low=low,
        retracements=sorted_levels(retracements),
        extensions=sorted_levels(extensions),
    )
