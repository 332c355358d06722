"""Trap and accumulation zones built from the other calculators' output."""

from __future__ import annotations

from sessionbrief.config import AnalysisPolicy
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceZone
from sessionbrief.models.snapshot import (
    AccumulationZones,
    GaussianBand,
    HistoricalLevels,
    TrapZones,
)

# Primary accumulation never starts more than 0.5% under S1
SUPPORT_BUFFER = 0.995


def synthesize_trap_zones(
    bar: MarketBar, band: GaussianBand, policy: AnalysisPolicy
) -> TrapZones:
    """Buy/sell traps at the session extremes and the +2σ..+3σ supply zone."""
    offset = bar.range * policy.trap_fraction
    buy_floor = bar.high - offset
    sell_ceiling = bar.low + offset
    if policy.trap_use_open:
        buy_floor = max(bar.open, buy_floor)
        sell_ceiling = min(bar.open, sell_ceiling)

    mu, sigma = band.equilibrium, band.std_dev
    return TrapZones(
        buy_trap=PriceZone.between(buy_floor, bar.high),
        sell_trap=PriceZone.between(bar.low, sell_ceiling),
        seller_defense=PriceZone.between(mu + 2 * sigma, mu + 3 * sigma),
    )


def synthesize_accumulation_zones(
    band: GaussianBand, historical: HistoricalLevels
) -> AccumulationZones:
    """Primary zone between ``max(μ-2σ, S1*0.995)`` and ``μ-σ``.

    The secondary zone spans S4..S3 and exists only when at least four
    distinct historical supports were found.
    """
    mu, sigma = band.equilibrium, band.std_dev
    primary = PriceZone.between(
        max(mu - 2 * sigma, historical.support(1).value * SUPPORT_BUFFER),
        mu - sigma,
    )

    secondary = None
    if historical.supports_found >= 4:
        secondary = PriceZone.between(
            historical.support(4).value, historical.support(3).value
        )
    return AccumulationZones(primary=primary, secondary=secondary)


def synthesize_zones(
    bar: MarketBar,
    band: GaussianBand,
    historical: HistoricalLevels,
    policy: AnalysisPolicy,
) -> tuple[TrapZones, AccumulationZones]:
    return (
        synthesize_trap_zones(bar, band, policy),
        synthesize_accumulation_zones(band, historical),
    )
