"""
Leaderboard CSV Parser

Turns raw delimited text (a spreadsheet export or the published feed) into
validated `ParticipantRecord`s.

Parsing is deliberately lenient:
- rows without a name are dropped; a whitespace-only name counts as empty,
  unlike the original dashboard, which kept rows named " "
- numeric cells that are blank, non-numeric, negative or infinite read as 0
- short rows are padded, overlong rows are truncated

Nothing in here raises on bad data; a messy spreadsheet yields a leaderboard
with fewer or zero-scored rows rather than a rejection.

Usage:
    from codeboard.ingestion.csv_parser import parse_records
    records = parse_records(text, mode="compute")
"""

import io
import warnings

import numpy as np
import pandas as pd

from codeboard.config import (
    NAME_COLUMN,
    EASY_COLUMN,
    MEDIUM_COLUMN,
    HARD_COLUMN,
    SCORE_COLUMN,
)
from codeboard.models import ParseMode, ParticipantRecord
from codeboard.utils import PLAIN_NUMBER_RE, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def normalize_header(label) -> str:
    """Header key used for column matching: trimmed, BOM-free, lower case."""
    return str(label).replace("\ufeff", "").strip().lower()


def _to_number(cell) -> float:
    text = str(cell).strip()
    if not PLAIN_NUMBER_RE.fullmatch(text):
        return np.nan
    return float(text)


def coerce_numeric(values: pd.Series) -> pd.Series:
    """
    Leniently convert a column of cells to non-negative floats.

    Anything that is not a finite, non-negative number becomes 0.0.
    Only plain integers and decimals count as numbers ("1_000", "0x10" and
    "inf" do not). Matching cells are parsed with float() so exported scores
    read back bit-for-bit.
    """
    numbers = values.map(_to_number).astype(float)
    return numbers.where(np.isfinite(numbers) & (numbers >= 0), 0.0)


def read_table(text: str) -> pd.DataFrame:
    """
    Read header-delimited text into a DataFrame of raw string cells.

    Every cell is kept as text; empty cells are empty strings, never NaN.
    """
    with warnings.catch_warnings():
        # Overlong rows are truncated to the header width
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=lambda bad_line: bad_line,
        )
    return df.fillna("")


def _column(df: pd.DataFrame, lookup: dict, name: str) -> pd.Series:
    source = lookup.get(name.lower())
    if source is None:
        return pd.Series("", index=df.index, dtype=object)
    return df[source]


def parse_records(text: str, mode: ParseMode | str) -> list[ParticipantRecord]:
    """
    Parse leaderboard text into participant records.

    Args:
        text: Delimited text with a `Name,Easy,Medium,Hard[,Score]` header row
        mode: "compute" (score left at 0 for the scoring calculator) or
              "passthrough" (score read from the Score column)

    Returns:
        Records in input row order

    Raises:
        ValueError: If `mode` is not a known parse mode
    """
    mode = ParseMode.coerce(mode)

    if not text or not text.strip():
        return []

    df = read_table(text)
    if df.empty:
        return []

    lookup = {}
    for label in df.columns:
        lookup.setdefault(normalize_header(label), label)

    names = _column(df, lookup, NAME_COLUMN).astype(str).str.strip()
    keep = names != ""
    dropped = int((~keep).sum())
    if dropped:
        logger.debug(f"Dropped {dropped} row(s) without a name")

    easy = coerce_numeric(_column(df, lookup, EASY_COLUMN))
    medium = coerce_numeric(_column(df, lookup, MEDIUM_COLUMN))
    hard = coerce_numeric(_column(df, lookup, HARD_COLUMN))
    if mode is ParseMode.PASSTHROUGH:
        scores = coerce_numeric(_column(df, lookup, SCORE_COLUMN))
    else:
        scores = pd.Series(0.0, index=df.index)

    records = [
        ParticipantRecord(
            name=name,
            easy_count=int(e),
            medium_count=int(m),
            hard_count=int(h),
            score=float(s),
        )
        for name, e, m, h, s in zip(
            names[keep], easy[keep], medium[keep], hard[keep], scores[keep]
        )
    ]

    logger.debug(f"Parsed {len(records)} record(s) in {mode.value} mode")
    return records
