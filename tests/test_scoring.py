"""
Tests for the scoring calculator and weight configuration.
"""

import pytest

from codeboard.models import ParticipantRecord, ScoringWeights
from codeboard.ranking.scoring import apply_weights, score_record


class TestScoringWeights:
    """Tests for ScoringWeights construction."""

    def test_defaults(self):
        weights = ScoringWeights()
        assert weights.as_dict() == {"easy": 5, "medium": 10, "hard": 20}

    def test_from_partial_mapping(self):
        weights = ScoringWeights.from_mapping({"hard": 50})
        assert weights.as_dict() == {"easy": 5, "medium": 10, "hard": 50}

    def test_from_none_uses_defaults(self):
        assert ScoringWeights.from_mapping(None) == ScoringWeights()

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            ScoringWeights(easy=-1)

    def test_negative_assignment_rejected(self):
        weights = ScoringWeights()

        with pytest.raises(ValueError):
            weights.easy = -5

        assert weights.easy == 5
        assert apply_weights([ParticipantRecord("a", 3, 0, 0)], weights)[0].score == 15

    def test_non_finite_assignment_rejected(self):
        weights = ScoringWeights()
        with pytest.raises(ValueError):
            weights.hard = float("nan")

    def test_valid_assignment_allowed(self):
        weights = ScoringWeights()
        weights.medium = 12.5
        assert weights.medium == 12.5

    def test_zero_weight_allowed(self):
        assert ScoringWeights(easy=0).easy == 0


class TestScoreRecord:
    """Tests for score_record function."""

    def test_example_alice(self):
        alice = ParticipantRecord("Alice", 3, 2, 1)
        assert score_record(alice, ScoringWeights()) == 55

    def test_example_bob(self):
        bob = ParticipantRecord("Bob", 1, 4, 0)
        assert score_record(bob, ScoringWeights()) == 45

    def test_fractional_weights(self):
        record = ParticipantRecord("Eve", 2, 0, 1)
        assert score_record(record, ScoringWeights(easy=0.5, medium=1, hard=2.25)) == 3.25


class TestApplyWeights:
    """Tests for apply_weights function."""

    def test_weight_invariant(self):
        weights = ScoringWeights(easy=3, medium=7, hard=11)
        records = [ParticipantRecord(f"p{i}", i, i * 2, i % 3) for i in range(10)]

        for record in apply_weights(records, weights):
            expected = (
                record.easy_count * weights.easy
                + record.medium_count * weights.medium
                + record.hard_count * weights.hard
            )
            assert record.score == expected

    def test_does_not_mutate_input(self):
        records = [ParticipantRecord("Alice", 3, 2, 1, 0.0)]
        apply_weights(records, ScoringWeights())
        assert records[0].score == 0.0

    def test_overwrites_existing_score(self):
        records = [ParticipantRecord("Dan", 2, 1, 0, 99.0)]
        assert apply_weights(records, ScoringWeights())[0].score == 20

    def test_idempotent(self):
        records = [ParticipantRecord("Alice", 3, 2, 1), ParticipantRecord("Bob", 1, 4, 0)]
        weights = ScoringWeights()

        first = apply_weights(records, weights)
        second = apply_weights(records, weights)

        assert [r.score for r in first] == [r.score for r in second]

    def test_weight_change_not_retroactive(self):
        weights = ScoringWeights()
        scored = apply_weights([ParticipantRecord("Alice", 3, 2, 1)], weights)

        weights.hard = 100

        assert scored[0].score == 55
        assert apply_weights(scored, weights)[0].score == 135

    def test_empty_input(self):
        assert apply_weights([], ScoringWeights()) == []
