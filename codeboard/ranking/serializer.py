"""
Leaderboard Serializer

Converts ranked records back into the portable CSV format:

    Name,Easy,Medium,Hard,Score

Rows are written in the order given; callers pass the ranked sequence.
Ranks are not written, they are recomputed whenever the file is loaded.

Rows end in CRLF (RFC 4180). The csv writer quotes any cell containing a
character of the line terminator, so names with a bare CR or LF survive a
round trip through the parser.
"""

from typing import Iterable

import pandas as pd

from codeboard.config import (
    NAME_COLUMN,
    EASY_COLUMN,
    MEDIUM_COLUMN,
    HARD_COLUMN,
    SCORE_COLUMN,
    RANK_COLUMN,
    EXPORT_COLUMNS,
)
from codeboard.models import Leaderboard, ParticipantRecord, RankedEntry
from codeboard.utils import format_number

LINE_TERMINATOR = "\r\n"


def _as_records(items) -> list[ParticipantRecord]:
    if isinstance(items, Leaderboard):
        return items.records
    return [item.record if isinstance(item, RankedEntry) else item for item in items]


def records_to_dataframe(items: Iterable[ParticipantRecord | RankedEntry] | Leaderboard) -> pd.DataFrame:
    """Export table with numbers rendered as plain text (55, not 55.0)."""
    rows = [
        {
            NAME_COLUMN: record.name,
            EASY_COLUMN: format_number(record.easy_count),
            MEDIUM_COLUMN: format_number(record.medium_count),
            HARD_COLUMN: format_number(record.hard_count),
            SCORE_COLUMN: format_number(record.score),
        }
        for record in _as_records(items)
    ]
    return pd.DataFrame(rows, columns=list(EXPORT_COLUMNS), dtype=object)


def serialize_records(items: Iterable[ParticipantRecord | RankedEntry] | Leaderboard) -> str:
    """
    Serialize records to CSV text.

    Args:
        items: Records, ranked entries or a whole Leaderboard, in display order

    Returns:
        CSV text with a header row and `\\r\\n` line endings
    """
    return records_to_dataframe(items).to_csv(index=False, lineterminator=LINE_TERMINATOR)


def leaderboard_to_dataframe(leaderboard: Leaderboard) -> pd.DataFrame:
    """
    Display table for a leaderboard.

    Returns:
        DataFrame with columns: Rank, Name, Easy, Medium, Hard, Score
    """
    df = pd.DataFrame(
        [
            {
                RANK_COLUMN: entry.rank,
                NAME_COLUMN: entry.record.name,
                EASY_COLUMN: entry.record.easy_count,
                MEDIUM_COLUMN: entry.record.medium_count,
                HARD_COLUMN: entry.record.hard_count,
                SCORE_COLUMN: entry.record.score,
            }
            for entry in leaderboard
        ],
        columns=[RANK_COLUMN, *EXPORT_COLUMNS],
    )
    return df
