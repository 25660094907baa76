"""
Codeboard - Coding Competition Leaderboard Engine

This package contains the core modules for:
- Record parsing and feed loading (codeboard.ingestion)
- Scoring, ranking and export (codeboard.ranking)
- Caller entry points and CLI (codeboard.pipeline)
- Shared configuration, data model and utilities
"""

__version__ = "1.0.0"
