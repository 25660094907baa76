"""
Shared utilities for Codeboard.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import math
import re
import shutil
import tempfile
from pathlib import Path

# --- Shared Regex Patterns ---
# Plain integer or decimal, optional sign and exponent (no "1_000", "0x10", "inf")
PLAIN_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- File Operations ---
def atomic_write_text(text: str, path: Path) -> None:
    """
    Write text to a file atomically using a temporary file.

    This prevents a half-written export if the write is interrupted.

    Args:
        text: Content to write
        path: Destination path
    """
    logger = setup_logging(__name__)

    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix=path.suffix or '.tmp',
            dir=path.parent,  # Same filesystem for atomic move
            encoding='utf-8',
            newline='',
        ) as tmp:
            tmp.write(text)
            tmp_path = Path(tmp.name)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(text):,} bytes to {path}")

    except Exception:
        if 'tmp_path' in locals() and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def validate_input_size(text: str, max_size: int) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in bytes

    Raises:
        ValueError: If input exceeds max_size
    """
    if len(text) > max_size:
        raise ValueError(
            f"Input too large: {len(text):,} bytes. "
            f"Maximum allowed: {max_size:,} bytes"
        )


# --- Formatting ---
def format_number(value: float) -> str:
    """Render a number the way a spreadsheet would: 55 not 55.0, 12.5 as-is."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


__all__ = [
    # Logging
    'setup_logging',
    # File operations
    'atomic_write_text',
    # Validation
    'validate_input_size',
    # Formatting
    'format_number',
    # Patterns
    'PLAIN_NUMBER_RE',
]
