"""Tests for history file ingestion."""

import logging
import math
from datetime import date

import pytest

from sessionbrief.errors import SessionBriefError, SessionBriefErrorCode
from sessionbrief.ingest import load_bars, parse_bars

SAMPLE = """Data Abertura Maxima Minima Fechamento
14/03/2024 1.000,50 1.010,00 990,25 1.005,75
15/03/2024 1.005,75 1.020,00 1.000,00 1.015,00

bad line
16/03/2024 0 1 1 1
31/02/2024 1 2 1 1
13/03/2024 abc 1 1 1
"""


class TestParseBars:
    def test_locale_numbers(self):
        bars = parse_bars(SAMPLE)
        thursday = bars[1]
        assert thursday.open == 1000.5
        assert thursday.high == 1010.0
        assert thursday.low == 990.25
        assert thursday.close == 1005.75

    def test_invalid_rows_dropped(self):
        bars = parse_bars(SAMPLE)
        assert [b.date for b in bars] == [date(2024, 3, 15), date(2024, 3, 14)]

    def test_sorted_descending(self):
        text = "header\n11/03/2024 1 2 1 1\n13/03/2024 1 2 1 1\n12/03/2024 1 2 1 1\n"
        bars = parse_bars(text)
        assert [b.date.day for b in bars] == [13, 12, 11]

    def test_extra_columns_ignored(self):
        text = "header\n12/03/2024 1 2 1 1,5 9.999\n13/03/2024 1 2 1 1 extra\n"
        bars = parse_bars(text)
        assert bars[1].close == 1.5

    def test_duplicate_dates_keep_first(self):
        text = "header\n12/03/2024 1 2 1 1\n12/03/2024 5 6 5 5\n13/03/2024 1 2 1 1\n"
        bars = parse_bars(text)
        assert len(bars) == 2
        assert bars[1].close == 1.0

    def test_infinite_prices_dropped(self):
        text = "h\n14/03/2024 inf inf 1 1\n15/03/2024 1 2 1 1\n13/03/2024 1 2 1 1\n"
        bars = parse_bars(text)
        assert [b.date.day for b in bars] == [15, 13]
        assert all(math.isfinite(b.high) for b in bars)

    def test_dropped_lines_logged_by_number(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sessionbrief.ingest")
        parse_bars(SAMPLE)
        skipped = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Skipping line")]
        # blank line 4 is not counted as a data line but keeps its number
        assert [m.split(":")[0] for m in skipped] == [
            "Skipping line 5",
            "Skipping line 6",
            "Skipping line 7",
            "Skipping line 8",
        ]
        assert "Discarded 4 of 6 data lines" in caplog.text

    def test_header_only_is_insufficient(self):
        with pytest.raises(SessionBriefError) as exc_info:
            parse_bars("Data Abertura Maxima Minima Fechamento\n")
        assert exc_info.value.code == SessionBriefErrorCode.INSUFFICIENT_DATA

    def test_single_valid_row(self):
        with pytest.raises(SessionBriefError) as exc_info:
            parse_bars("header\n12/03/2024 1 2 1 1\n12/03/2024 -1 2 1 1\n")
        assert exc_info.value.code == SessionBriefErrorCode.INSUFFICIENT_DATA

    def test_empty(self):
        with pytest.raises(SessionBriefError) as exc_info:
            parse_bars("   \n\n")
        assert exc_info.value.code == SessionBriefErrorCode.EMPTY_SOURCE


class TestLoadBars:
    def test_load(self, tmp_path):
        path = tmp_path / "history.txt"
        path.write_text(SAMPLE, encoding="utf-8")
        bars = load_bars(path)
        assert len(bars) == 2
        assert bars[0].close == 1015.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(SessionBriefError) as exc_info:
            load_bars(tmp_path / "nope.txt")
        assert exc_info.value.code == SessionBriefErrorCode.NOT_FOUND
