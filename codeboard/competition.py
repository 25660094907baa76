"""
Competition description shown alongside the leaderboard.
"""

from dataclasses import dataclass

from codeboard.config import (
    COMPETITION_NAME,
    COMPETITION_GOAL,
    COMPETITION_DURATION,
    COMPETITION_TRACKS,
    COMPETITION_RULES,
)
from codeboard.models import ScoringWeights
from codeboard.utils import format_number


def scoring_rule(weights: ScoringWeights) -> str:
    """E.g. 'Scoring: Easy = 5, Medium = 10, Hard = 20'."""
    return (
        f"Scoring: Easy = {format_number(weights.easy)}, "
        f"Medium = {format_number(weights.medium)}, "
        f"Hard = {format_number(weights.hard)}"
    )


@dataclass(frozen=True)
class Competition:
    name: str = COMPETITION_NAME
    goal: str = COMPETITION_GOAL
    duration: str = COMPETITION_DURATION
    tracks: tuple[str, ...] = COMPETITION_TRACKS
    rules: tuple[str, ...] = COMPETITION_RULES

    def all_rules(self, weights: ScoringWeights | None = None) -> list[str]:
        """Static rules followed by the scoring rule for the active weights."""
        return [*self.rules, scoring_rule(weights or ScoringWeights())]

    def summary(self, weights: ScoringWeights | None = None) -> str:
        lines = [
            self.name,
            f"Goal: {self.goal}",
            f"Duration: {self.duration}",
            f"Tracks: {', '.join(self.tracks)}",
            "Rules:",
        ]
        lines.extend(f"  - {rule}" for rule in self.all_rules(weights))
        return "\n".join(lines)
