"""
Leaderboard Ranking Engine

Orders records by descending score and assigns 1-based ranks.

Tie-break policy: equal scores do NOT share a rank. The sort is stable, so
the record that appeared first in the source keeps the better position, and
every position gets its own consecutive rank (1, 2, 3, ...).

Usage:
    from codeboard.ranking.engine import rank_records, build_leaderboard
"""

from copy import copy
from typing import Iterable

from codeboard.models import (
    Leaderboard,
    ParseMode,
    ParticipantRecord,
    RankedEntry,
    ScoringWeights,
)
from codeboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def rank_records(records: Iterable[ParticipantRecord]) -> list[RankedEntry]:
    """
    Rank records by descending score.

    Args:
        records: Records in source order

    Returns:
        Ranked entries, best first; an empty input gives an empty list
    """
    # sorted() is stable: equal scores keep their source order
    ordered = sorted(records, key=lambda record: record.score, reverse=True)
    return [RankedEntry(record=record, rank=position + 1) for position, record in enumerate(ordered)]


def build_leaderboard(
    records: Iterable[ParticipantRecord],
    mode: ParseMode | str = ParseMode.COMPUTE,
    weights: ScoringWeights | None = None,
) -> Leaderboard:
    """
    Rank records and freeze the result into a Leaderboard snapshot.

    Args:
        records: Scored records in source order
        mode: Parse mode the records came from
        weights: Weights the scores were computed with (compute mode only).
                 A copy is stored so later edits to the caller's weights
                 do not show up in this snapshot.

    Returns:
        Immutable Leaderboard
    """
    mode = ParseMode.coerce(mode)
    source = tuple(records)
    entries = tuple(rank_records(source))
    logger.debug(f"Ranked {len(entries)} participant(s)")
    return Leaderboard(
        entries=entries,
        mode=mode,
        weights=copy(weights) if weights is not None else None,
        source_records=source,
    )
