"""Ingestion of whitespace-delimited daily history exports.

Each line after the header reads ``DD/MM/YYYY open high low close`` with
numbers in the ``1.234,56`` locale format (``.`` thousands, ``,`` decimal).
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from sessionbrief.errors import SessionBriefError, SessionBriefErrorCode
from sessionbrief.frames import BAR_COLUMNS, frame_to_bars
from sessionbrief.models.bar import MarketBar

logger = logging.getLogger(__name__)

PRICE_COLUMNS = ["open", "high", "low", "close"]
DATE_FORMAT = "%d/%m/%Y"


def _normalize_number(raw: str) -> str:
    return raw.strip().replace(".", "").replace(",", ".")


def parse_bars(text: str) -> list[MarketBar]:
    """Parse export text into a most-recent-first bar series.

    The first non-blank line is a header. Lines with fewer than five
    fields, an unparseable date or number, or a non-positive or
    non-finite price are dropped. Duplicate dates keep their first occurrence.

    Raises:
        SessionBriefError: EMPTY_SOURCE for blank input, INSUFFICIENT_DATA
            when fewer than two valid rows remain.
    """
    if not text or not text.strip():
        raise SessionBriefError("Source is empty", code=SessionBriefErrorCode.EMPTY_SOURCE)

    numbered = [(n, line) for n, line in enumerate(text.splitlines(), start=1) if line.strip()]
    data_lines = numbered[1:]
    rows: list[list[str]] = []
    linenos: list[int] = []
    for lineno, line in data_lines:
        columns = line.split()
        if len(columns) < 5:
            logger.debug("Skipping line %d: %d fields", lineno, len(columns))
            continue
        rows.append(columns[:5])
        linenos.append(lineno)

    df = pd.DataFrame(rows, columns=BAR_COLUMNS, index=linenos, dtype=object)
    df["date"] = pd.to_datetime(df["date"], format=DATE_FORMAT, errors="coerce")
    for col in PRICE_COLUMNS:
        df[col] = pd.to_numeric(df[col].map(_normalize_number), errors="coerce")

    prices = df[PRICE_COLUMNS].astype(float)
    valid = (
        df["date"].notna()
        & (prices > 0).all(axis=1)
        & np.isfinite(prices).all(axis=1)
    )
    for lineno in df.index[~valid]:
        logger.debug("Skipping line %d: bad date or non-positive/non-finite price", lineno)
    dropped = len(data_lines) - int(valid.sum())
    if dropped:
        logger.info("Discarded %d of %d data lines", dropped, len(data_lines))

    df = df[valid]
    duplicates = df["date"].duplicated(keep="first")
    if duplicates.any():
        logger.warning("Dropping %d rows with duplicate dates", int(duplicates.sum()))
        df = df[~duplicates]
    df = df.sort_values("date", ascending=False, kind="stable")

    if len(df) < 2:
        raise SessionBriefError(
            f"At least 2 valid days are required, found {len(df)}",
            code=SessionBriefErrorCode.INSUFFICIENT_DATA,
        )
    return frame_to_bars(df)


def load_bars(path: Path | str, encoding: str = "utf-8") -> list[MarketBar]:
    """Read an export file and parse it with ``parse_bars``."""
    file_path = Path(path)
    if not file_path.exists():
        raise SessionBriefError(
            f"No history file at {file_path}", code=SessionBriefErrorCode.NOT_FOUND
        )
    return parse_bars(file_path.read_text(encoding=encoding))
