"""Analysis engine — derives next-session reference levels from a bar series."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sessionbrief.calendar import next_operation_date
from sessionbrief.config import (
    EXTENDED_POLICY,
    AnalysisConfig,
    AnalysisPolicy,
    get_policy,
)
from sessionbrief.errors import SessionBriefError, SessionBriefErrorCode
from sessionbrief.indicators.fibonacci import project_fibonacci
from sessionbrief.indicators.gaussian import estimate_gaussian_band
from sessionbrief.indicators.historical import extract_historical_levels
from sessionbrief.indicators.pivots import calculate_pivots
from sessionbrief.indicators.trend import long_term_average
from sessionbrief.indicators.volatility import average_true_range
from sessionbrief.indicators.zones import synthesize_zones
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.snapshot import AnalysisSnapshot, PreviousDay
from sessionbrief.quality import validate_bars

logger = logging.getLogger(__name__)

MIN_BARS = 2


def summarize_previous_day(today: MarketBar, yesterday: MarketBar) -> PreviousDay:
    """OHLC, range and close-to-close percent variation of the latest bar."""
    if yesterday.close == 0:
        logger.warning(
            "Previous close on %s is zero; variation left undefined", yesterday.date
        )
        variation = None
    else:
        variation = (today.close - yesterday.close) / yesterday.close * 100
    if today.range == 0:
        logger.warning("Bar on %s has zero range; trap zones collapse", today.date)
    return PreviousDay(
        open=today.open,
        high=today.high,
        low=today.low,
        close=today.close,
        range=today.range,
        variation=variation,
    )


def analyze_session(
    bars: Sequence[MarketBar],
    policy: AnalysisPolicy = EXTENDED_POLICY,
) -> AnalysisSnapshot | None:
    """Compute every reference level for the session after ``bars[0]``.

    Args:
        bars: Bar series ordered most recent first. Not modified.
        policy: Calculation policy.

    Returns:
        A fresh snapshot, or None when fewer than 2 bars are supplied.
        Fibonacci, the long-term average, ATR and the secondary
        accumulation zone are None when history is too short for them.
    """
    if len(bars) < MIN_BARS:
        logger.debug("Need at least %d bars, got %d", MIN_BARS, len(bars))
        return None

    today, yesterday = bars[0], bars[1]

    historical = extract_historical_levels(bars, policy)
    pivots = calculate_pivots(today, policy)
    fibonacci = project_fibonacci(bars, policy)
    band = estimate_gaussian_band(bars, policy)
    long_term_ma = long_term_average(bars, policy.ma_period)
    atr = average_true_range(bars, policy)
    trap_zones, accumulation_zones = synthesize_zones(today, band, historical, policy)

    if fibonacci is None:
        logger.debug("Fibonacci unavailable (%d bars, window %d)", len(bars), policy.fib_window)
    if long_term_ma is None:
        logger.debug("Long-term MA unavailable (%d bars, period %d)", len(bars), policy.ma_period)
    if atr is None:
        logger.debug("ATR unavailable (%d bars, period %d)", len(bars), policy.atr_period)

    return AnalysisSnapshot(
        operation_date=next_operation_date(today.date),
        previous_day=summarize_previous_day(today, yesterday),
        historical_sr=historical,
        pivot_points=pivots,
        fibonacci=fibonacci,
        gauss_levels=band,
        long_term_ma=long_term_ma,
        atr=atr,
        trap_zones=trap_zones,
        accumulation_zones=accumulation_zones,
        policy=policy.name,
    )


class SessionAnalyzer:
    """Configured entry point: optional quality gate, then analysis.

    Usage::

        from sessionbrief import create_analyzer_from_env, load_bars
        analyzer = create_analyzer_from_env()
        snapshot = analyzer.analyze(load_bars("history.txt"))
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()
        self.policy = get_policy(self.config.policy)

    def analyze(self, bars: Sequence[MarketBar]) -> AnalysisSnapshot | None:
        """Analyze ``bars``; raises VALIDATION_FAILED if the quality gate fails."""
        if self.config.validate and bars:
            result = validate_bars(bars)
            if not result.passed:
                msgs = "; ".join(c.message for c in result.failed_checks)
                raise SessionBriefError(
                    f"Validation failed: {msgs}",
                    code=SessionBriefErrorCode.VALIDATION_FAILED,
                )
        return analyze_session(bars, self.policy)
