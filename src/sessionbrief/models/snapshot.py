"""Analysis snapshot data model — every level derived for the next session."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sessionbrief.models.levels import PriceLevel, PriceZone


@dataclass(frozen=True)
class PreviousDay:
    """Most recent session summary.

    Attributes:
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        range: High minus low.
        variation: Percent change from the prior close, or None when the
            prior close is zero.
    """

    open: float
    high: float
    low: float
    close: float
    range: float
    variation: float | None


@dataclass(frozen=True)
class HistoricalLevels:
    """Prior highs/lows near the current price.

    Attributes:
        resistances: Resistance levels, ascending by value.
        supports: Support levels, ascending by value.
        resistances_found: Distinct resistances found before padding.
        supports_found: Distinct supports found before padding.
    """

    resistances: tuple[PriceLevel, ...]
    supports: tuple[PriceLevel, ...]
    resistances_found: int
    supports_found: int

    def support(self, rank: int) -> PriceLevel:
        """Support by label rank (``1`` is nearest to price)."""
        return self._by_label(self.supports, f"S{rank}")

    def resistance(self, rank: int) -> PriceLevel:
        """Resistance by label rank (``1`` is nearest to price)."""
        return self._by_label(self.resistances, f"R{rank}")

    @staticmethod
    def _by_label(levels: tuple[PriceLevel, ...], label: str) -> PriceLevel:
        for level in levels:
            if level.label == label:
                return level
        raise KeyError(label)


@dataclass(frozen=True)
class PivotLevels:
    """Floor-trader pivot point and its resistances/supports (ascending)."""

    p: float
    resistances: tuple[PriceLevel, ...]
    supports: tuple[PriceLevel, ...]


@dataclass(frozen=True)
class FibonacciLevels:
    """Retracements and extensions of the recent swing (ascending)."""

    swing_high: float
    swing_low: float
    retracements: tuple[PriceLevel, ...]
    extensions: tuple[PriceLevel, ...]


@dataclass(frozen=True)
class GaussianBand:
    """Mean/standard-deviation band of recent closes.

    Attributes:
        equilibrium: Mean of the window closes.
        std_dev: Population standard deviation of the window closes.
        center: Price the sigma levels are measured from.
        levels: Band levels, ascending by value.
    """

    equilibrium: float
    std_dev: float
    center: float
    levels: tuple[PriceLevel, ...]


@dataclass(frozen=True)
class AverageTrueRange:
    """ATR value and the stop prices derived from it."""

    value: float
    buy_stop: float
    sell_stop: float
    period: int
    multiplier: float


@dataclass(frozen=True)
class TrapZones:
    buy_trap: PriceZone
    sell_trap: PriceZone
    seller_defense: PriceZone


@dataclass(frozen=True)
class AccumulationZones:
    primary: PriceZone
    secondary: PriceZone | None = None


@dataclass(frozen=True)
class AnalysisSnapshot:
    """Reference levels for the next trading session.

    Attributes:
        operation_date: Session the levels are meant for.
        previous_day: Summary of the most recent bar.
        historical_sr: Historical supports/resistances.
        pivot_points: Pivot point levels.
        fibonacci: Swing retracements/extensions, None when unavailable.
        gauss_levels: Gaussian band of recent closes.
        long_term_ma: 50-session simple moving average, None when unavailable.
        atr: Average true range, None when unavailable.
        trap_zones: Buy/sell trap and seller defense zones.
        accumulation_zones: Primary and optional secondary accumulation zones.
        policy: Name of the calculation policy that produced the snapshot.
    """

    operation_date: date
    previous_day: PreviousDay
    historical_sr: HistoricalLevels
    pivot_points: PivotLevels
    fibonacci: FibonacciLevels | None
    gauss_levels: GaussianBand
    long_term_ma: float | None
    atr: AverageTrueRange | None
    trap_zones: TrapZones
    accumulation_zones: AccumulationZones
    policy: str
