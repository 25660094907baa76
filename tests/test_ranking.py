"""
Tests for the ranking engine and leaderboard snapshots.
"""

from codeboard.ingestion.csv_parser import parse_records
from codeboard.models import Leaderboard, ParseMode, ParticipantRecord, ScoringWeights
from codeboard.ranking.engine import build_leaderboard, rank_records
from codeboard.ranking.scoring import apply_weights


def _record(name, score):
    return ParticipantRecord(name=name, score=score)


class TestRankRecords:
    """Tests for rank_records function."""

    def test_empty_input(self):
        assert rank_records([]) == []

    def test_descending_score(self):
        ranked = rank_records([_record("low", 10), _record("high", 30), _record("mid", 20)])

        assert [e.record.name for e in ranked] == ["high", "mid", "low"]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_ties_keep_input_order(self):
        ranked = rank_records([_record("first", 50), _record("second", 50), _record("third", 50)])

        assert [e.record.name for e in ranked] == ["first", "second", "third"]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_tie_gets_distinct_consecutive_ranks(self):
        ranked = rank_records([_record("a", 10), _record("b", 40), _record("c", 40), _record("d", 5)])

        ranks = {e.record.name: e.rank for e in ranked}
        assert ranks == {"b": 1, "c": 2, "a": 3, "d": 4}

    def test_accepts_generator(self):
        ranked = rank_records(_record(n, s) for n, s in [("x", 1), ("y", 2)])
        assert [e.record.name for e in ranked] == ["y", "x"]


class TestBuildLeaderboard:
    """Tests for build_leaderboard function."""

    def test_example_scenario(self):
        text = "Name,Easy,Medium,Hard\nAlice,3,2,1\nBob,1,4,0\n"
        weights = ScoringWeights(easy=5, medium=10, hard=20)

        leaderboard = build_leaderboard(
            apply_weights(parse_records(text, "compute"), weights), "compute", weights
        )

        assert [(e.record.name, e.rank, e.record.score) for e in leaderboard] == [
            ("Alice", 1, 55),
            ("Bob", 2, 45),
        ]

    def test_snapshot_keeps_copy_of_weights(self):
        weights = ScoringWeights()
        leaderboard = build_leaderboard([], ParseMode.COMPUTE, weights)

        weights.easy = 99

        assert leaderboard.weights.easy == 5

    def test_source_order_preserved(self):
        records = [_record("b", 1), _record("a", 2)]
        leaderboard = build_leaderboard(records)
        assert [r.name for r in leaderboard.source_records] == ["b", "a"]
        assert [r.name for r in leaderboard.records] == ["a", "b"]

    def test_passthrough_mode_has_no_weights(self):
        leaderboard = build_leaderboard([_record("a", 1)], "passthrough")
        assert leaderboard.mode is ParseMode.PASSTHROUGH
        assert leaderboard.weights is None


class TestLeaderboard:
    """Tests for Leaderboard helpers."""

    def test_empty(self):
        leaderboard = Leaderboard.empty()
        assert leaderboard.is_empty
        assert len(leaderboard) == 0
        assert leaderboard.top() == []

    def test_top_n(self):
        records = [_record(f"p{i}", i) for i in range(15)]
        top = build_leaderboard(records).top(10)

        assert len(top) == 10
        assert top[0].record.name == "p14"
        assert top[-1].rank == 10

    def test_top_larger_than_board(self):
        assert len(build_leaderboard([_record("a", 1)]).top(10)) == 1

    def test_to_dataframe(self):
        df = build_leaderboard([_record("a", 1), _record("b", 3)]).to_dataframe()

        assert list(df.columns) == ["Rank", "Name", "Easy", "Medium", "Hard", "Score"]
        assert df["Name"].tolist() == ["b", "a"]
        assert df["Rank"].tolist() == [1, 2]
