"""Gaussian band — rolling mean and population standard deviation of closes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pandas as pd

from sessionbrief.config import AnalysisPolicy
from sessionbrief.frames import bars_to_frame
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel, sorted_levels
from sessionbrief.models.snapshot import GaussianBand


def mean_and_std(values: Iterable[float]) -> tuple[float, float]:
    """Arithmetic mean and population (not sample) standard deviation."""
    closes = pd.Series(values, dtype=float)
    return float(closes.mean()), float(closes.std(ddof=0))


def estimate_gaussian_band(
    bars: Sequence[MarketBar], policy: AnalysisPolicy
) -> GaussianBand:
    """Band over the most recent ``min(gauss_window, len(bars))`` closes.

    Levels sit at ``center ± kσ`` for each configured k, plus the center
    itself (``μ`` or ``close``). The center is the window mean, or the
    latest close when the policy centers on it.
    """
    closes = bars_to_frame(bars[: min(policy.gauss_window, len(bars))])["close"]
    mu, sigma = mean_and_std(closes)

    if policy.gauss_center_on_close:
        center, center_label = bars[0].close, "close"
    else:
        center, center_label = mu, "μ"

    levels = [PriceLevel(center_label, center)]
    for k in policy.gauss_sigmas:
        levels.append(PriceLevel(f"+{k}σ", center + k * sigma))
        levels.append(PriceLevel(f"-{k}σ", center - k * sigma))

    return GaussianBand(
        equilibrium=mu,
        std_dev=sigma,
        center=center,
        levels=sorted_levels(levels),
    )
