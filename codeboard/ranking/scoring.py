"""
Scoring Calculator

Applies difficulty weights to solved counts:

    score = easy * weights.easy + medium * weights.medium + hard * weights.hard
"""

from typing import Iterable

from codeboard.models import ParticipantRecord, ScoringWeights


def score_record(record: ParticipantRecord, weights: ScoringWeights) -> float:
    """Weighted score for a single record."""
    return float(
        record.easy_count * weights.easy
        + record.medium_count * weights.medium
        + record.hard_count * weights.hard
    )


def apply_weights(records: Iterable[ParticipantRecord], weights: ScoringWeights) -> list[ParticipantRecord]:
    """
    Return new records with their score recomputed from `weights`.

    The input records and the weights are left untouched, so calling this
    twice with the same arguments yields the same scores.
    """
    return [record.with_score(score_record(record, weights)) for record in records]
