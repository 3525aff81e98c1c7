"""Leaderboard: latest total score per username."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    score: int


@dataclass
class Leaderboard:
    """Mapping of username to their most recent total score.

    Keys are unique; ``add_entry`` replaces any previous value.  Ordering is
    only applied on read, via ``ranked()``.
    """

    _scores: dict[str, int] = field(default_factory=dict)

    def add_entry(self, username: str, score: int) -> None:
        self._scores[username] = score

    def ranked(self) -> list[LeaderboardEntry]:
        """Entries sorted by score descending, ties broken by username."""
        ordered = sorted(self._scores.items(), key=lambda kv: (-kv[1], kv[0]))
        return [LeaderboardEntry(username=name, score=score) for name, score in ordered]

    @property
    def scores(self) -> dict[str, int]:
        return dict(self._scores)
