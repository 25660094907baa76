"""
Leaderboard Feed Loader

Retrieves the published leaderboard CSV and hands it to the parser in
pass-through mode (the feed already carries a Score column).

Sources:
- http:// and https:// URLs are fetched with a single GET request
- anything else (plain paths, file:// URIs) is read from disk

There is no retry: any failure is reported once as a FetchError and the
caller decides what to show instead.

Usage:
    from codeboard.ingestion.feed_loader import load_feed, load_leaderboard
    leaderboard = load_leaderboard("https://example.org/leaderboard.csv")
"""

from pathlib import Path
from urllib.parse import urlparse, unquote

import requests

from codeboard.config import FEED_SOURCE, FEED_TIMEOUT, MAX_INPUT_SIZE
from codeboard.errors import FetchError
from codeboard.ingestion.csv_parser import parse_records
from codeboard.models import Leaderboard, ParseMode
from codeboard.ranking.engine import build_leaderboard
from codeboard.utils import setup_logging, validate_input_size

# --- Module Logger ---
logger = setup_logging(__name__)

HTTP_SCHEMES = frozenset({"http", "https"})


def _fetch_http(source: str, timeout: float) -> str:
    try:
        response = requests.get(source, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Could not reach {source}: {e}", source=source) from e

    if not response.ok:
        raise FetchError(
            f"Feed {source} returned HTTP {response.status_code}",
            source=source,
            status_code=response.status_code,
        )

    # CSV served without a charset would otherwise decode as ISO-8859-1
    if response.encoding is None or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"
    return response.text


def _read_file(source: str) -> str:
    parsed = urlparse(source)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(source)
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FetchError(f"Could not read {path}: {e}", source=source) from e


def load_feed(source: str = FEED_SOURCE, timeout: float = FEED_TIMEOUT) -> str:
    """
    Retrieve raw leaderboard text from `source`.

    Args:
        source: URL or file path of the published leaderboard CSV
        timeout: Seconds to wait for an HTTP response

    Returns:
        The feed body as text

    Raises:
        FetchError: If the source is unreachable, answers with a non-success
                    status, or returns an oversized body
    """
    logger.info(f"Loading leaderboard feed from {source}")

    if urlparse(source).scheme.lower() in HTTP_SCHEMES:
        text = _fetch_http(source, timeout)
    else:
        text = _read_file(source)

    try:
        validate_input_size(text, MAX_INPUT_SIZE)
    except ValueError as e:
        raise FetchError(f"Feed {source} rejected: {e}", source=source) from e

    logger.info(f"  Received {len(text):,} bytes")
    return text


def load_leaderboard(source: str = FEED_SOURCE, timeout: float = FEED_TIMEOUT) -> Leaderboard:
    """
    Load, parse (pass-through) and rank the published leaderboard.

    Raises:
        FetchError: Propagated from `load_feed`
    """
    text = load_feed(source, timeout=timeout)
    records = parse_records(text, ParseMode.PASSTHROUGH)
    return build_leaderboard(records, ParseMode.PASSTHROUGH)
