"""Briefing prompt for the external commentary service.

Only the prompt text is built here; sending it to a text-generation API is
left to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from sessionbrief.models.levels import PriceLevel
from sessionbrief.models.snapshot import AnalysisSnapshot


def format_price(value: float, decimals: int = 2) -> str:
    """Render ``1234.5`` as ``1.234,50``."""
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_levels(levels: Sequence[PriceLevel], count: int = 3) -> str:
    return ", ".join(f"{lvl.label}={format_price(lvl.value)}" for lvl in levels[:count])


REPORT_LAYOUT = """\
FORMAT (separate sections with ---):

EXECUTIVE SUMMARY:
[Short read of the price structure and the scenario for the session]

---

OPERATING ZONES:
ZONE 1 - CRITICAL SUPPORT:
* Levels: [S1, S2, S3, historical supports]
* Importance: [Why buyers defend it]
* Action if tested: [Buy trigger]

ZONE 2 - CRITICAL RESISTANCE:
* Levels: [R1, R2, R3, historical resistances]
* Importance: [Why sellers defend it]
* Action if tested: [Sell trigger]

ZONE 3 - CENTRAL PIVOT:
* Level: [Pivot]
* Role: [Bias decision]

---

TRADE PLAN:

BULLISH SCENARIO:
* TRIGGER: [Signal that activates it]
* ENTRY: [Specific price]
* TARGET 1: [First target]
* TARGET 2: [Second target]
* STOP: [Protection level]

BEARISH SCENARIO:
* TRIGGER: [Signal that activates it]
* ENTRY: [Specific price]
* TARGET 1: [First target]
* TARGET 2: [Second target]
* STOP: [Protection level]
"""


def build_briefing_prompt(snapshot: AnalysisSnapshot) -> str:
    """Render the snapshot as the analyst prompt for the commentary service."""
    prev = snapshot.previous_day
    pivots = snapshot.pivot_points
    band = snapshot.gauss_levels
    atr_value = snapshot.atr.value if snapshot.atr is not None else 0.0
    variation = "n/a" if prev.variation is None else f"{prev.variation:.2f}%"
    atr_note = "available" if snapshot.atr is not None else "unavailable"

    return (
        "You are a senior quantitative technical analyst. Analyse this market "
        "data and write a professional executive report.\n"
        "\n"
        "SESSION DATA:\n"
        f"Date: {snapshot.operation_date:%d/%m/%Y}\n"
        f"Close: {format_price(prev.close)}\n"
        f"Variation: {variation}\n"
        f"Range: {format_price(prev.range)}\n"
        "\n"
        "PRICE STRUCTURE:\n"
        f"Pivot: {format_price(pivots.p)}\n"
        f"Resistances: {format_levels(pivots.resistances)}\n"
        f"Supports: {format_levels(pivots.supports)}\n"
        "\n"
        "VOLATILITY AND RISK:\n"
        f"ATR: {format_price(atr_value)}\n"
        f"Standard deviation: {format_price(band.std_dev)}\n"
        f"Equilibrium: {format_price(band.equilibrium)}\n"
        "\n"
        f"{REPORT_LAYOUT}"
        "\n"
        "---\n"
        "\n"
        "RISK MANAGEMENT:\n"
        f"* ATR is {atr_note} - size stops accordingly\n"
        "* Volume is needed to confirm breakouts\n"
        "* Economic events can invalidate the setup\n"
    )
