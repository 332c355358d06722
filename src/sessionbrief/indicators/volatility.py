"""Average true range and ATR-based stop prices."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from sessionbrief.config import AnalysisPolicy
from sessionbrief.frames import bars_to_frame
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.snapshot import AverageTrueRange


def true_range(df: pd.DataFrame) -> pd.Series:
    """Per-row true range of a date-ascending bar frame.

    Largest of the session range and the two gaps to the prior close; the
    first row has no prior close and falls back to its high-low range.
    """
    prev_close = df["close"].shift()
    return pd.concat(
        [
            df["high"] - df["low"],
            (df["high"] - prev_close).abs(),
            (df["low"] - prev_close).abs(),
        ],
        axis=1,
    ).max(axis=1)


def average_true_range(
    bars: Sequence[MarketBar], policy: AnalysisPolicy
) -> AverageTrueRange | None:
    """Simple-mean ATR over ``atr_period`` true ranges.

    Needs ``atr_period + 1`` bars. The lookback slice is copied into a
    frame and sorted ascending by date so each true range chains to the
    previous session; the caller's sequence is left untouched.

    Returns:
        ATR with ``buy_stop = close - k*ATR`` and ``sell_stop = close + k*ATR``,
        or None when history is too short.
    """
    period = policy.atr_period
    if len(bars) < period + 1:
        return None

    window = bars_to_frame(bars[: period + 1]).sort_values("date").reset_index(drop=True)
    value = float(true_range(window).iloc[1:].mean())

    close = bars[0].close
    k = policy.atr_stop_multiplier
    return AverageTrueRange(
        value=value,
        buy_stop=close - k * value,
        sell_stop=close + k * value,
        period=period,
        multiplier=k,
    )
