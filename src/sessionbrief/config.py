"""Analysis configuration and calculation policies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AnalysisPolicyType(Enum):
    """Supported calculation policies."""

    CLASSIC = "classic"
    EXTENDED = "extended"


@dataclass(frozen=True)
class AnalysisPolicy:
    """Numeric parameters shared by every calculator.

    Attributes:
        name: Policy name reported in the snapshot.
        sr_lookback: Bars scanned for historical supports/resistances.
        sr_count: Number of historical levels per side.
        resistance_anchor: Latest-bar field the resistance threshold is
            taken from ("high" or "close").
        resistance_factor: Multiplier applied to the resistance anchor.
        support_anchor: Latest-bar field the support threshold is taken from
            ("low" or "close").
        support_factor: Multiplier applied to the support anchor.
        pivot_depth: Number of pivot resistances/supports (3 or 4).
        fib_window: Bars in the swing window; also the minimum history.
        fib_use_closes: Swing high/low from closes instead of highs/lows.
        fib_retracements: Retracement ratios measured down from the swing high.
        fib_include_endpoints: Emit the 0% and 100% retracements.
        fib_extensions: Extension ratios.
        fib_extend_from_close: Measure extensions both ways from the latest
            close instead of from the swing base in the trend direction.
        gauss_window: Closes in the Gaussian window.
        gauss_sigmas: Sigma multiples emitted on each side of the center.
        gauss_center_on_close: Center the band on the latest close instead of
            the window mean.
        ma_period: Long-term moving average period.
        atr_period: Average true range period.
        atr_stop_multiplier: ATR multiple used for the stop prices.
        trap_fraction: Fraction of the session range used for trap zones.
        trap_use_open: Clamp the trap zones at the session open.
    """

    name: str
    sr_lookback: int
    sr_count: int
    resistance_anchor: str
    resistance_factor: float
    support_anchor: str
    support_factor: float
    pivot_depth: int
    fib_window: int
    fib_use_closes: bool
    fib_retracements: tuple[float, ...]
    fib_include_endpoints: bool
    fib_extensions: tuple[float, ...]
    fib_extend_from_close: bool
    gauss_window: int
    gauss_sigmas: tuple[int, ...]
    gauss_center_on_close: bool
    ma_period: int
    atr_period: int
    atr_stop_multiplier: float
    trap_fraction: float
    trap_use_open: bool


FIB_RETRACEMENTS = (0.236, 0.382, 0.5, 0.618, 0.786)

CLASSIC_POLICY = AnalysisPolicy(
    name="classic",
    sr_lookback=100,
    sr_count=4,
    resistance_anchor="high",
    resistance_factor=1.0,
    support_anchor="low",
    support_factor=1.0,
    pivot_depth=3,
    fib_window=10,
    fib_use_closes=True,
    fib_retracements=FIB_RETRACEMENTS,
    fib_include_endpoints=False,
    fib_extensions=(0.236, 0.382, 0.618),
    fib_extend_from_close=True,
    gauss_window=20,
    gauss_sigmas=(1, 2, 3, 4),
    gauss_center_on_close=True,
    ma_period=50,
    atr_period=14,
    atr_stop_multiplier=2.0,
    trap_fraction=0.10,
    trap_use_open=True,
)

EXTENDED_POLICY = AnalysisPolicy(
    name="extended",
    sr_lookback=150,
    sr_count=6,
    resistance_anchor="close",
    resistance_factor=0.99,
    support_anchor="close",
    support_factor=1.01,
    pivot_depth=4,
    fib_window=20,
    fib_use_closes=False,
    fib_retracements=FIB_RETRACEMENTS,
    fib_include_endpoints=True,
    fib_extensions=(1.272, 1.618, 2.0, 2.618),
    fib_extend_from_close=False,
    gauss_window=20,
    gauss_sigmas=(1, 2, 3),
    gauss_center_on_close=False,
    ma_period=50,
    atr_period=14,
    atr_stop_multiplier=1.5,
    trap_fraction=0.15,
    trap_use_open=False,
)

POLICIES: dict[AnalysisPolicyType, AnalysisPolicy] = {
    AnalysisPolicyType.CLASSIC: CLASSIC_POLICY,
    AnalysisPolicyType.EXTENDED: EXTENDED_POLICY,
}


def get_policy(policy: AnalysisPolicyType | str) -> AnalysisPolicy:
    """Resolve a policy type (or its string value) to its parameters."""
    return POLICIES[AnalysisPolicyType(policy)]


@dataclass
class AnalysisConfig:
    """Configuration for SessionAnalyzer.

    Attributes:
        policy: Calculation policy.
        validate: Whether to run bar quality checks before analysis.
    """

    policy: AnalysisPolicyType = AnalysisPolicyType.EXTENDED
    validate: bool = False
