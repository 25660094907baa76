"""
Leaderboard Data Model

Typed records shared by the parser, the scoring calculator, the ranking
engine and the serializer. Participant records are only ever produced by
`codeboard.ingestion.csv_parser.parse_records`; everything downstream
works on these types instead of loose row dictionaries.
"""

import math
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator

from codeboard.config import (
    ADMIN_ENV_VAR,
    ADMIN_TRUTHY_VALUES,
    DEFAULT_EASY_WEIGHT,
    DEFAULT_MEDIUM_WEIGHT,
    DEFAULT_HARD_WEIGHT,
    TOP_N,
)


class ParseMode(str, Enum):
    """Where a record's score comes from."""

    COMPUTE = "compute"          # derived from counts and weights
    PASSTHROUGH = "passthrough"  # read verbatim from the Score column

    @classmethod
    def coerce(cls, value: "ParseMode | str") -> "ParseMode":
        """Accept either a ParseMode or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid parse mode: '{value}'. Allowed values: {allowed}") from None


@dataclass(frozen=True)
class ParticipantRecord:
    """One participant's solved counts and score."""

    name: str
    easy_count: int = 0
    medium_count: int = 0
    hard_count: int = 0
    score: float = 0.0

    def with_score(self, score: float) -> "ParticipantRecord":
        return replace(self, score=float(score))


@dataclass
class ScoringWeights:
    """
    Points awarded per solved problem of each difficulty.

    Weights are caller-mutable. Records scored with an earlier set of weights
    keep their score until they are passed through `apply_weights` again.
    """

    easy: float = DEFAULT_EASY_WEIGHT
    medium: float = DEFAULT_MEDIUM_WEIGHT
    hard: float = DEFAULT_HARD_WEIGHT

    _WEIGHT_FIELDS = ("easy", "medium", "hard")

    def __setattr__(self, name, value):
        # Runs for the generated __init__ and for later edits alike
        if name in self._WEIGHT_FIELDS and (not math.isfinite(value) or value < 0):
            raise ValueError(f"Weight '{name}' must be a non-negative number, got {value!r}")
        super().__setattr__(name, value)

    @classmethod
    def from_mapping(cls, mapping: dict | None) -> "ScoringWeights":
        """Build weights from a partial mapping; missing keys keep their defaults."""
        mapping = mapping or {}
        defaults = cls()
        return cls(
            easy=mapping.get("easy", defaults.easy),
            medium=mapping.get("medium", defaults.medium),
            hard=mapping.get("hard", defaults.hard),
        )

    def as_dict(self) -> dict:
        return {"easy": self.easy, "medium": self.medium, "hard": self.hard}


@dataclass(frozen=True)
class RankedEntry:
    """A record together with its 1-based leaderboard position."""

    record: ParticipantRecord
    rank: int


@dataclass(frozen=True)
class Leaderboard:
    """
    Immutable ranked snapshot of a set of records.

    A new snapshot is built for every upload, weight change or feed refresh;
    snapshots are never updated in place.
    """

    entries: tuple[RankedEntry, ...] = ()
    mode: ParseMode = ParseMode.COMPUTE
    weights: ScoringWeights | None = field(default=None, compare=False)
    # Records in the order they were parsed; re-scoring ranks from this order
    source_records: tuple[ParticipantRecord, ...] = field(default=(), compare=False, repr=False)

    @classmethod
    def empty(cls, mode: ParseMode | str = ParseMode.PASSTHROUGH) -> "Leaderboard":
        return cls(entries=(), mode=ParseMode.coerce(mode))

    @property
    def records(self) -> list[ParticipantRecord]:
        return [entry.record for entry in self.entries]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(self.entries)

    def top(self, n: int = TOP_N) -> list[RankedEntry]:
        """The first `n` entries (the "top participants" view)."""
        return list(self.entries[:max(n, 0)])

    def to_dataframe(self):
        from codeboard.ranking.serializer import leaderboard_to_dataframe
        return leaderboard_to_dataframe(self)


@dataclass(frozen=True)
class CallerContext:
    """
    Capabilities of whoever is calling into the engine.

    Resolved once at startup and passed explicitly to the entry points that
    upload, re-weight or export a leaderboard.
    """

    privileged: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "CallerContext":
        environ = os.environ if environ is None else environ
        value = environ.get(ADMIN_ENV_VAR, "")
        return cls(privileged=value.strip().lower() in ADMIN_TRUTHY_VALUES)
