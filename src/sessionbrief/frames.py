"""DataFrame views of bar series and snapshots for chart/summary consumers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel, PriceZone
from sessionbrief.models.snapshot import AnalysisSnapshot

BAR_COLUMNS = ["date", "open", "high", "low", "close"]
LEVEL_COLUMNS = ["group", "label", "value"]


def bars_to_frame(bars: Sequence[MarketBar]) -> pd.DataFrame:
    """One row per bar, in the series order."""
    if not bars:
        return pd.DataFrame(columns=BAR_COLUMNS)

    records = []
    for b in bars:
        records.append(
            {
                "date": pd.Timestamp(b.date),
                "open": float(b.open),
                "high": float(b.high),
                "low": float(b.low),
                "close": float(b.close),
            }
        )
    return pd.DataFrame(records, columns=BAR_COLUMNS)


def frame_to_bars(df: pd.DataFrame) -> list[MarketBar]:
    """Inverse of ``bars_to_frame``; the ``date`` column may hold timestamps."""
    missing = [c for c in BAR_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")

    bars: list[MarketBar] = []
    for row in df[BAR_COLUMNS].itertuples(index=False):
        bars.append(
            MarketBar(
                date=pd.Timestamp(row.date).date(),
                open=float(row.open),
                high=float(row.high),
                low=float(row.low),
                close=float(row.close),
            )
        )
    return bars


def _level_rows(group: str, levels: Sequence[PriceLevel]) -> list[dict[str, Any]]:
    return [{"group": group, "label": lvl.label, "value": lvl.value} for lvl in levels]


def _zone_rows(group: str, zone: PriceZone | None) -> list[dict[str, Any]]:
    if zone is None:
        return []
    return [
        {"group": group, "label": "start", "value": zone.start},
        {"group": group, "label": "end", "value": zone.end},
    ]


def snapshot_to_frame(snapshot: AnalysisSnapshot) -> pd.DataFrame:
    """Flatten a snapshot to ``group, label, value`` rows.

    Optional groups (fibonacci, long-term MA, ATR, secondary accumulation)
    are omitted when absent.
    """
    rows: list[dict[str, Any]] = []
    rows += _level_rows("historical_resistance", snapshot.historical_sr.resistances)
    rows += _level_rows("historical_support", snapshot.historical_sr.supports)

    pivots = snapshot.pivot_points
    rows.append({"group": "pivot", "label": "P", "value": pivots.p})
    rows += _level_rows("pivot", pivots.resistances)
    rows += _level_rows("pivot", pivots.supports)

    if snapshot.fibonacci is not None:
        rows += _level_rows("fibonacci_retracement", snapshot.fibonacci.retracements)
        rows += _level_rows("fibonacci_extension", snapshot.fibonacci.extensions)

    rows += _level_rows("gauss", snapshot.gauss_levels.levels)

    if snapshot.long_term_ma is not None:
        rows.append({"group": "long_term_ma", "label": "MA", "value": snapshot.long_term_ma})

    if snapshot.atr is not None:
        rows.append({"group": "atr", "label": "value", "value": snapshot.atr.value})
        rows.append({"group": "atr", "label": "buy_stop", "value": snapshot.atr.buy_stop})
        rows.append({"group": "atr", "label": "sell_stop", "value": snapshot.atr.sell_stop})

    traps = snapshot.trap_zones
    rows += _zone_rows("buy_trap", traps.buy_trap)
    rows += _zone_rows("sell_trap", traps.sell_trap)
    rows += _zone_rows("seller_defense", traps.seller_defense)
    rows += _zone_rows("accumulation_primary", snapshot.accumulation_zones.primary)
    rows += _zone_rows("accumulation_secondary", snapshot.accumulation_zones.secondary)

    return pd.DataFrame(rows, columns=LEVEL_COLUMNS)
