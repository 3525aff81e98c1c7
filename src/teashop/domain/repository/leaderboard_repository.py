"""Abstract repository for the leaderboard mapping."""

from __future__ import annotations

from abc import ABC, abstractmethod


class LeaderboardRepository(ABC):

    @abstractmethod
    def load(self) -> dict[str, int]:
        """Return the stored username -> score mapping (empty if none)."""

    @abstractmethod
    def save(self, scores: dict[str, int]) -> None:
        """Replace the stored mapping with *scores*."""
