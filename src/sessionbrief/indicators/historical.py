"""Historical support/resistance — distinct prior highs/lows near price."""

from __future__ import annotations

from collections.abc import Sequence

from sessionbrief.config import AnalysisPolicy
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel
from sessionbrief.models.snapshot import HistoricalLevels


def _pad(values: list[float], count: int, seed: float) -> list[float]:
    """Repeat the last value (or ``seed`` if empty) up to ``count`` items."""
    padded = list(values[:count])
    while len(padded) < count:
        padded.append(padded[-1] if padded else seed)
    return padded


def _label(values: list[float], prefix: str, lowest_first: bool) -> tuple[PriceLevel, ...]:
    """Sort ascending and label so that rank 1 is nearest to price."""
    ascending = sorted(values)
    n = len(ascending)
    return tuple(
        PriceLevel(f"{prefix}{i + 1 if lowest_first else n - i}", v)
        for i, v in enumerate(ascending)
    )


def extract_historical_levels(
    bars: Sequence[MarketBar], policy: AnalysisPolicy
) -> HistoricalLevels:
    """Scan the lookback window for distinct highs/lows around the latest bar.

    Resistances take the highest distinct highs at or above the threshold,
    supports the lowest distinct lows at or below it. Missing slots repeat
    the last level found; with nothing found the latest high/low is used.
    Both sides are returned ascending by value with ``R1`` the lowest
    resistance and ``S1`` the highest support.
    """
    today = bars[0]
    window = bars[: min(policy.sr_lookback, len(bars))]

    r_threshold = getattr(today, policy.resistance_anchor) * policy.resistance_factor
    s_threshold = getattr(today, policy.support_anchor) * policy.support_factor

    highs = sorted({b.high for b in window if b.high > 0}, reverse=True)
    lows = sorted({b.low for b in window if b.low > 0})

    resistances = [h for h in highs if h >= r_threshold][: policy.sr_count]
    supports = [lo for lo in lows if lo <= s_threshold][: policy.sr_count]

    return HistoricalLevels(
        resistances=_label(_pad(resistances, policy.sr_count, today.high), "R", True),
        supports=_label(_pad(supports, policy.sr_count, today.low), "S", False),
        resistances_found=len(resistances),
        supports_found=len(supports),
    )
