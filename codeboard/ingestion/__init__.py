"""
Data Ingestion

Modules:
- csv_parser: Lenient CSV parsing into participant records
- feed_loader: Retrieve the published leaderboard feed
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "parse_records":
        from codeboard.ingestion.csv_parser import parse_records
        return parse_records
    if name == "load_feed":
        from codeboard.ingestion.feed_loader import load_feed
        return load_feed
    if name == "load_leaderboard":
        from codeboard.ingestion.feed_loader import load_leaderboard
        return load_leaderboard
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
