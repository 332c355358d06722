"""Position sizing from capital, risk budget and stop distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_COST_PER_POINT = 0.2


@dataclass(frozen=True)
class PositionSize:
    """Sizing result.

    Attributes:
        contracts: Number of contracts to trade.
        risk_value: Money lost if the stop is hit.
        gain_value: Money made if the target is hit.
        ratio: Reward-to-risk ratio, rounded to 2 decimals.
        alert: Warning when the risk budget could not be honoured.
    """

    contracts: int
    risk_value: float
    gain_value: float
    ratio: float
    alert: str | None = None


def size_position(
    capital: float,
    risk_percent: float,
    stop_points: float,
    target_multiplier: float,
    cost_per_point: float = DEFAULT_COST_PER_POINT,
) -> PositionSize:
    """Contracts that keep the stop loss within ``risk_percent`` of capital.

    When the budget does not cover a single contract but the capital does,
    one contract is sized and the alert reports the real risk taken.
    """
    risk_fraction = risk_percent / 100
    if capital <= 0 or risk_fraction <= 0 or stop_points <= 0:
        return PositionSize(contracts=0, risk_value=0.0, gain_value=0.0, ratio=0.0)

    max_risk_value = capital * risk_fraction
    stop_value = stop_points * cost_per_point
    contracts = math.floor(max_risk_value / stop_value)
    alert = None

    if contracts < 1:
        if capital >= stop_value:
            contracts = 1
            alert = f"Real risk: {stop_value / capital * 100:.2f}%"
        else:
            contracts = 0
            alert = "Insufficient capital"

    risk_value = contracts * stop_value
    gain_value = risk_value * target_multiplier
    if target_multiplier > 0 and risk_value > 0:
        ratio = round(gain_value / risk_value, 2)
    else:
        ratio = 0.0
    return PositionSize(
        contracts=contracts,
        risk_value=risk_value,
        gain_value=gain_value,
        ratio=ratio,
        alert=alert,
    )
