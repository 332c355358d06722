"""Session brief models."""

from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel, PriceZone
from sessionbrief.models.snapshot import (
    AccumulationZones,
    AnalysisSnapshot,
    AverageTrueRange,
    FibonacciLevels,
    GaussianBand,
    HistoricalLevels,
    PivotLevels,
    PreviousDay,
    TrapZones,
)

__all__ = [
    "MarketBar",
    "PriceLevel",
    "PriceZone",
    "PreviousDay",
    "HistoricalLevels",
    "PivotLevels",
    "FibonacciLevels",
    "GaussianBand",
    "AverageTrueRange",
    "TrapZones",
    "AccumulationZones",
    "AnalysisSnapshot",
]
