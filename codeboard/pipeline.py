"""
Leaderboard Pipeline

Entry points used by the calling surface (dashboard, admin panel, CLI).

Two flows are supported:
- Upload (compute mode): raw counts -> parse -> apply weights -> rank
- Feed (pass-through mode): published CSV -> parse -> rank

Upload, re-weighting and export are privileged operations; the caller passes
a `CallerContext` resolved once at startup (see `CallerContext.from_env`).

Usage:
    python -m codeboard.pipeline compute counts.csv --out leaderboard.csv
    python -m codeboard.pipeline feed https://example.org/leaderboard.csv

    Programmatic usage:
        from codeboard.pipeline import compute_leaderboard
        leaderboard = compute_leaderboard(text)
"""

import sys
from pathlib import Path

# Enable both `python codeboard/pipeline.py` and `python -m codeboard.pipeline` execution.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import argparse

from codeboard.competition import Competition
from codeboard.config import FEED_SOURCE, FEED_TIMEOUT, TOP_N
from codeboard.errors import CapabilityError, FetchError
from codeboard.ingestion.csv_parser import parse_records
from codeboard.ingestion.feed_loader import load_leaderboard
from codeboard.models import CallerContext, Leaderboard, ParseMode, ScoringWeights
from codeboard.ranking.engine import build_leaderboard
from codeboard.ranking.scoring import apply_weights
from codeboard.ranking.serializer import serialize_records
from codeboard.utils import atomic_write_text, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def require_privileged(context: CallerContext, operation: str) -> None:
    """
    Raises:
        CapabilityError: If the caller is read-only
    """
    if not context.privileged:
        raise CapabilityError(f"'{operation}' requires a privileged caller")


def compute_leaderboard(text: str, weights: ScoringWeights | None = None) -> Leaderboard:
    """
    Build a leaderboard from uploaded raw counts.

    Args:
        text: CSV with a `Name,Easy,Medium,Hard` header
        weights: Difficulty weights (defaults: easy=5, medium=10, hard=20)

    Returns:
        Ranked Leaderboard snapshot
    """
    weights = weights or ScoringWeights()
    records = parse_records(text, ParseMode.COMPUTE)
    scored = apply_weights(records, weights)
    leaderboard = build_leaderboard(scored, ParseMode.COMPUTE, weights)
    logger.info(f"Computed leaderboard for {len(leaderboard)} participant(s) with weights {weights.as_dict()}")
    return leaderboard


def recompute_leaderboard(leaderboard: Leaderboard, weights: ScoringWeights) -> Leaderboard:
    """
    Re-score the records of an existing snapshot with new weights.

    The records are re-ranked from their original source order, so ties are
    still broken the same way as on upload.
    """
    scored = apply_weights(leaderboard.source_records, weights)
    return build_leaderboard(scored, ParseMode.COMPUTE, weights)


def ingest_upload(text: str, weights: ScoringWeights | None, context: CallerContext) -> Leaderboard:
    """
    Privileged upload flow.

    Raises:
        CapabilityError: If the caller is read-only
    """
    require_privileged(context, "upload")
    logger.info("Processing uploaded leaderboard...")
    return compute_leaderboard(text, weights)


def reweight_leaderboard(leaderboard: Leaderboard, weights: ScoringWeights, context: CallerContext) -> Leaderboard:
    """
    Privileged weight edit.

    Raises:
        CapabilityError: If the caller is read-only
    """
    require_privileged(context, "edit weights")
    logger.info(f"Re-scoring leaderboard with weights {weights.as_dict()}")
    return recompute_leaderboard(leaderboard, weights)


def export_leaderboard(leaderboard: Leaderboard, context: CallerContext, path: Path | None = None) -> str:
    """
    Privileged export of the ranked leaderboard as CSV.

    Args:
        leaderboard: Snapshot to export (rows are written in rank order)
        context: Caller capabilities
        path: Optional destination file, written atomically

    Returns:
        The CSV text

    Raises:
        CapabilityError: If the caller is read-only
    """
    require_privileged(context, "export")
    text = serialize_records(leaderboard)
    if path is not None:
        atomic_write_text(text, Path(path))
        logger.info(f"Exported {len(leaderboard)} row(s) to {path}")
    return text


def refresh_from_feed(source: str = FEED_SOURCE, timeout: float = FEED_TIMEOUT) -> Leaderboard:
    """
    Read-only feed flow.

    A failed fetch is logged and yields an empty leaderboard; it never raises,
    so a broken feed cannot block later uploads.
    """
    try:
        leaderboard = load_leaderboard(source, timeout=timeout)
    except FetchError as e:
        logger.error(f"Failed to load leaderboard feed: {e}")
        return Leaderboard.empty(ParseMode.PASSTHROUGH)

    logger.info(f"Loaded leaderboard with {len(leaderboard)} participant(s)")
    return leaderboard


def format_table(leaderboard: Leaderboard, limit: int | None = None) -> str:
    """Plain-text ranked table for terminal output."""
    if leaderboard.is_empty:
        return "(leaderboard is empty)"
    df = leaderboard.to_dataframe()
    if limit is not None:
        df = df.head(limit)
    return df.to_string(index=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeboard",
        description="Rank coding competition participants by weighted solved problems.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    compute = sub.add_parser("compute", help="Score and rank an uploaded counts CSV")
    compute.add_argument("file", type=Path, help="CSV with Name,Easy,Medium,Hard columns")
    compute.add_argument("--easy", type=float, default=None, help="Points per easy problem")
    compute.add_argument("--medium", type=float, default=None, help="Points per medium problem")
    compute.add_argument("--hard", type=float, default=None, help="Points per hard problem")
    compute.add_argument("--out", type=Path, default=None, help="Write the ranked CSV here")

    feed = sub.add_parser("feed", help="Load and rank the published leaderboard")
    feed.add_argument("source", nargs="?", default=FEED_SOURCE, help="URL or path of the leaderboard CSV")
    feed.add_argument("--top", type=int, default=None, help=f"Only show the first N rows (e.g. {TOP_N})")

    return parser


def main(argv: list[str] | None = None, context: CallerContext | None = None) -> int:
    """CLI interface for the leaderboard pipeline."""
    args = build_parser().parse_args(argv)
    context = context or CallerContext.from_env()

    if args.command == "feed":
        leaderboard = refresh_from_feed(args.source)
        print(format_table(leaderboard, args.top))
        return 0

    overrides = {
        key: value
        for key, value in (("easy", args.easy), ("medium", args.medium), ("hard", args.hard))
        if value is not None
    }

    try:
        weights = ScoringWeights.from_mapping(overrides)
        text = args.file.read_text(encoding="utf-8-sig")
        leaderboard = ingest_upload(text, weights, context)
        print(Competition().summary(weights))
        print()
        print(format_table(leaderboard))
        if args.out is not None:
            export_leaderboard(leaderboard, context, args.out)
            print(f"\nSaved to {args.out}")
    except CapabilityError as e:
        print(f"\nPERMISSION ERROR: {e} (set CODEBOARD_ADMIN=true)")
        return 1
    except OSError as e:
        print(f"\nFILE ERROR: {e}")
        return 1
    except ValueError as e:
        print(f"\nINPUT ERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
