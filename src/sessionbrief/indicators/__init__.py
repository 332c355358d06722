"""Level calculators — each reads the bar series and fills one snapshot field."""

from sessionbrief.indicators.fibonacci import project_fibonacci
from sessionbrief.indicators.gaussian import estimate_gaussian_band, mean_and_std
from sessionbrief.indicators.historical import extract_historical_levels
from sessionbrief.indicators.pivots import calculate_pivots
from sessionbrief.indicators.trend import long_term_average
from sessionbrief.indicators.volatility import average_true_range, true_range
from sessionbrief.indicators.zones import (
    synthesize_accumulation_zones,
    synthesize_trap_zones,
    synthesize_zones,
)

__all__ = [
    "extract_historical_levels",
    "calculate_pivots",
    "project_fibonacci",
    "estimate_gaussian_band",
    "mean_and_std",
    "long_term_average",
    "average_true_range",
    "true_range",
    "synthesize_trap_zones",
    "synthesize_accumulation_zones",
    "synthesize_zones",
]
