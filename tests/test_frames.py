"""Tests for DataFrame views."""

from datetime import date

import pandas as pd
import pytest

from sessionbrief.engine import analyze_session
from sessionbrief.frames import bars_to_frame, frame_to_bars, snapshot_to_frame


class TestBarsFrame:
    def test_columns_and_order(self, two_bars):
        df = bars_to_frame(two_bars)
        assert list(df.columns) == ["date", "open", "high", "low", "close"]
        assert df["close"].tolist() == [105.0, 100.0]
        assert df["date"].iloc[0] == pd.Timestamp(2024, 3, 15)

    def test_empty(self):
        df = bars_to_frame([])
        assert len(df) == 0
        assert "close" in df.columns

    def test_back_to_bars(self, two_bars):
        assert frame_to_bars(bars_to_frame(two_bars)) == two_bars
        assert frame_to_bars(bars_to_frame(two_bars))[0].date == date(2024, 3, 15)

    def test_missing_columns(self):
        with pytest.raises(ValueError):
            frame_to_bars(pd.DataFrame({"date": [], "close": []}))


class TestSnapshotFrame:
    def test_short_history_omits_optional_groups(self, two_bars):
        df = snapshot_to_frame(analyze_session(two_bars))
        groups = set(df["group"])
        assert "pivot" in groups
        assert "gauss" in groups
        assert "atr" not in groups
        assert "fibonacci_retracement" not in groups
        assert "accumulation_secondary" not in groups

    def test_pivot_row(self, two_bars):
        df = snapshot_to_frame(analyze_session(two_bars))
        p = df[(df["group"] == "pivot") & (df["label"] == "P")]["value"].iloc[0]
        assert p == pytest.approx(103.3333, abs=1e-4)

    def test_long_history_has_all_groups(self, long_series):
        df = snapshot_to_frame(analyze_session(long_series))
        groups = set(df["group"])
        assert {"atr", "long_term_ma", "fibonacci_extension"} <= groups
        assert list(df.columns) == ["group", "label", "value"]
