"""sessionbrief — Next-session reference levels from daily OHLC history.

Pivot points, historical support/resistance, Fibonacci swings, a Gaussian
band, a long-term average, ATR stops and trap/accumulation zones, under
two selectable calculation policies.

Quick start::

    from sessionbrief import analyze_session, load_bars
    snapshot = analyze_session(load_bars("history.txt"))
"""

from __future__ import annotations

import os

from sessionbrief.briefing import build_briefing_prompt, format_price
from sessionbrief.calendar import next_operation_date
from sessionbrief.config import (
    CLASSIC_POLICY,
    EXTENDED_POLICY,
    AnalysisConfig,
    AnalysisPolicy,
    AnalysisPolicyType,
    get_policy,
)
from sessionbrief.engine import SessionAnalyzer, analyze_session
from sessionbrief.errors import SessionBriefError, SessionBriefErrorCode
from sessionbrief.frames import bars_to_frame, frame_to_bars, snapshot_to_frame
from sessionbrief.ingest import load_bars, parse_bars
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel, PriceZone
from sessionbrief.models.snapshot import AnalysisSnapshot
from sessionbrief.quality import validate_bars
from sessionbrief.sizing import PositionSize, size_position

__version__ = "0.1.0"

__all__ = [
    # Engine
    "analyze_session",
    "SessionAnalyzer",
    "create_analyzer_from_env",
    "next_operation_date",
    # Config
    "AnalysisConfig",
    "AnalysisPolicy",
    "AnalysisPolicyType",
    "CLASSIC_POLICY",
    "EXTENDED_POLICY",
    "get_policy",
    # Errors
    "SessionBriefError",
    "SessionBriefErrorCode",
    # Models
    "MarketBar",
    "PriceLevel",
    "PriceZone",
    "AnalysisSnapshot",
    # Ingestion and quality
    "parse_bars",
    "load_bars",
    "validate_bars",
    # DataFrame views
    "bars_to_frame",
    "frame_to_bars",
    "snapshot_to_frame",
    # Collaborators
    "PositionSize",
    "size_position",
    "build_briefing_prompt",
    "format_price",
]

_TRUTHY = {"1", "true", "yes", "on"}


def create_analyzer_from_env() -> SessionAnalyzer:
    """Zero-config factory — reads the analysis settings from env vars.

    Environment variables:
        SESSIONBRIEF_POLICY: "classic" or "extended" (default: "extended").
        SESSIONBRIEF_VALIDATE: Run bar quality checks first (default: off).
    """
    config = AnalysisConfig(
        policy=AnalysisPolicyType(os.getenv("SESSIONBRIEF_POLICY", "extended").strip().lower()),
        validate=os.getenv("SESSIONBRIEF_VALIDATE", "").strip().lower() in _TRUTHY,
    )
    return SessionAnalyzer(config)
