"""Data quality validation for daily bar series."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from sessionbrief.models.bar import MarketBar


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def validate_bars(bars: Sequence[MarketBar]) -> ValidationResult:
    """Run all quality checks on a most-recent-first bar series.

    Checks:
        1. Not empty
        2. No NaN/Inf prices
        3. Positive prices
        4. Date ordering (strictly descending)
        5. Unique dates
        6. OHLC consistency (high >= open/close >= low)
    """
    result = ValidationResult()

    # 1. Not empty
    if not bars:
        result.checks.append(ValidationCheck("not_empty", False, "No bars provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(bars)} bars"))

    # 2. No NaN/Inf
    nan_count = 0
    for b in bars:
        for val in (b.open, b.high, b.low, b.close):
            if math.isnan(val) or math.isinf(val):
                nan_count += 1
    if nan_count:
        result.checks.append(ValidationCheck("no_nulls", False, f"{nan_count} NaN/Inf values"))
    else:
        result.checks.append(ValidationCheck("no_nulls", True))

    # 3. Positive prices
    non_positive = sum(
        1 for b in bars if min(b.open, b.high, b.low, b.close) <= 0
    )
    if non_positive:
        result.checks.append(
            ValidationCheck("positive_prices", False, f"{non_positive} bars with non-positive prices")
        )
    else:
        result.checks.append(ValidationCheck("positive_prices", True))

    # 4. Date ordering — most recent first
    out_of_order = 0
    for i in range(1, len(bars)):
        if bars[i].date > bars[i - 1].date:
            out_of_order += 1
    if out_of_order:
        result.checks.append(
            ValidationCheck("date_order", False, f"{out_of_order} out of order")
        )
    else:
        result.checks.append(ValidationCheck("date_order", True))

    # 5. Unique dates
    duplicates = len(bars) - len({b.date for b in bars})
    if duplicates:
        result.checks.append(
            ValidationCheck("unique_dates", False, f"{duplicates} duplicate dates")
        )
    else:
        result.checks.append(ValidationCheck("unique_dates", True))

    # 6. OHLC consistency
    inconsistent = 0
    for b in bars:
        if b.high < b.low:
            inconsistent += 1
        elif b.high < b.open or b.high < b.close:
            inconsistent += 1
        elif b.low > b.open or b.low > b.close:
            inconsistent += 1
    if inconsistent:
        result.checks.append(
            ValidationCheck("ohlc_consistency", False, f"{inconsistent} bars with H<L or H<O/C")
        )
    else:
        result.checks.append(ValidationCheck("ohlc_consistency", True))

    return result
