"""Tests for trap and accumulation zone synthesis."""

from datetime import date

import pytest

from sessionbrief.config import CLASSIC_POLICY, EXTENDED_POLICY
from sessionbrief.indicators.zones import (
    synthesize_accumulation_zones,
    synthesize_trap_zones,
)
from sessionbrief.models.bar import MarketBar
from sessionbrief.models.levels import PriceLevel
from sessionbrief.models.snapshot import GaussianBand, HistoricalLevels

BAR = MarketBar(date=date(2024, 3, 15), open=100.0, high=110.0, low=95.0, close=105.0)
BAND = GaussianBand(equilibrium=102.5, std_dev=2.5, center=102.5, levels=())


def _historical(supports: list[float], found: int) -> HistoricalLevels:
    ascending = sorted(supports)
    n = len(ascending)
    return HistoricalLevels(
        resistances=(),
        supports=tuple(PriceLevel(f"S{n - i}", v) for i, v in enumerate(ascending)),
        resistances_found=0,
        supports_found=found,
    )


class TestTrapZones:
    def test_extended(self):
        zones = synthesize_trap_zones(BAR, BAND, EXTENDED_POLICY)
        assert zones.buy_trap.start == pytest.approx(107.75)
        assert zones.buy_trap.end == 110.0
        assert zones.sell_trap.start == 95.0
        assert zones.sell_trap.end == pytest.approx(97.25)

    def test_seller_defense(self):
        zones = synthesize_trap_zones(BAR, BAND, EXTENDED_POLICY)
        assert zones.seller_defense.start == pytest.approx(107.5)
        assert zones.seller_defense.end == pytest.approx(110.0)

    def test_classic_ten_percent(self):
        zones = synthesize_trap_zones(BAR, BAND, CLASSIC_POLICY)
        assert zones.buy_trap.start == pytest.approx(108.5)
        assert zones.sell_trap.end == pytest.approx(96.5)

    def test_classic_clamped_by_open(self):
        bar = MarketBar(date=date(2024, 3, 15), open=109.5, high=110.0, low=95.0, close=105.0)
        zones = synthesize_trap_zones(bar, BAND, CLASSIC_POLICY)
        assert zones.buy_trap.start == 109.5
        assert zones.buy_trap.end == 110.0

    def test_zero_range_collapses(self):
        bar = MarketBar(date=date(2024, 3, 15), open=100.0, high=100.0, low=100.0, close=100.0)
        zones = synthesize_trap_zones(bar, BAND, EXTENDED_POLICY)
        assert zones.buy_trap.width == 0.0
        assert zones.sell_trap.width == 0.0

    def test_start_never_above_end(self):
        for policy in (CLASSIC_POLICY, EXTENDED_POLICY):
            zones = synthesize_trap_zones(BAR, BAND, policy)
            for zone in (zones.buy_trap, zones.sell_trap, zones.seller_defense):
                assert zone.start <= zone.end


class TestAccumulationZones:
    def test_primary_prefers_band(self):
        hist = _historical([93.0, 95.0], found=2)
        zones = synthesize_accumulation_zones(BAND, hist)
        # max(102.5 - 5, 95 * 0.995) = 97.5
        assert zones.primary.start == pytest.approx(97.5)
        assert zones.primary.end == pytest.approx(100.0)

    def test_primary_prefers_support(self):
        band = GaussianBand(equilibrium=100.0, std_dev=1.0, center=100.0, levels=())
        hist = _historical([95.0, 96.0, 97.0, 99.0], found=4)
        zones = synthesize_accumulation_zones(band, hist)
        assert zones.primary.start == pytest.approx(99.0 * 0.995)
        assert zones.primary.end == pytest.approx(99.0)

    def test_secondary_between_third_and_fourth(self):
        hist = _historical([95.0, 96.0, 97.0, 99.0, 99.0, 99.0], found=4)
        zones = synthesize_accumulation_zones(BAND, hist)
        assert zones.secondary is not None
        assert zones.secondary.start == 97.0
        assert zones.secondary.end == 99.0

    def test_secondary_absent_with_few_supports(self):
        hist = _historical([95.0, 96.0, 97.0, 97.0, 97.0, 97.0], found=3)
        zones = synthesize_accumulation_zones(BAND, hist)
        assert zones.secondary is None
