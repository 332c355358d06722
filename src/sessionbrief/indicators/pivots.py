"""Floor-trader pivot points."""

from __future__ import annotations

from sessionbrief.config import AnalysisPolicy
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel, sorted_levels
from sessionbrief.models.snapshot import PivotLevels


def calculate_pivots(bar: MarketBar, policy: AnalysisPolicy) -> PivotLevels:
    """Pivot P with resistances/supports from the bar's high, low and close.

    Classic depth-3 policies project R3/S3 one range beyond R1/S1; depth-4
    policies use the ``H + k(P - L)`` / ``L - k(H - P)`` family for R3..R4.
    """
    h, lo, c = bar.high, bar.low, bar.close
    rng = h - lo
    p = (h + lo + c) / 3

    r1 = 2 * p - lo
    s1 = 2 * p - h
    resistances = [PriceLevel("R1", r1), PriceLevel("R2", p + rng)]
    supports = [PriceLevel("S1", s1), PriceLevel("S2", p - rng)]

    if policy.pivot_depth >= 4:
        resistances.append(PriceLevel("R3", h + 2 * (p - lo)))
        resistances.append(PriceLevel("R4", h + 3 * (p - lo)))
        supports.append(PriceLevel("S3", lo - 2 * (h - p)))
        supports.append(PriceLevel("S4", lo - 3 * (h - p)))
    else:
        resistances.append(PriceLevel("R3", r1 + rng))
        supports.append(PriceLevel("S3", s1 - rng))

    return PivotLevels(
        p=p,
        resistances=sorted_levels(resistances),
        supports=sorted_levels(supports),
    )
