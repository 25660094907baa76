"""
Scoring and Ranking

Modules:
- scoring: Difficulty-weighted score calculation
- engine: Stable ranking and leaderboard snapshots
- serializer: CSV export and display tables
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "apply_weights":
        from codeboard.ranking.scoring import apply_weights
        return apply_weights
    if name == "rank_records":
        from codeboard.ranking.engine import rank_records
        return rank_records
    if name == "build_leaderboard":
        from codeboard.ranking.engine import build_leaderboard
        return build_leaderboard
    if name == "serialize_records":
        from codeboard.ranking.serializer import serialize_records
        return serialize_records
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
