"""Player aggregate, the persisted profile of whoever runs the shop."""

from __future__ import annotations

from dataclasses import dataclass

from teashop.domain.exceptions import ValidationError

# Average-score-per-day thresholds, highest first.
RATING_THRESHOLDS: tuple[tuple[int, int], ...] = ((500, 5), (300, 4), (150, 3))
LOWEST_EARNED_RATING = 2
UNRATED = 1


@dataclass
class Player:
    """Aggregate root for a player profile.

    Invariants:
    - ``username`` is non-blank and is the unique key in storage
    - ``total_score`` is always >= 0
    """

    username: str
    total_score: int = 0
    days_played: int = 0
    games_played: int = 0

    @staticmethod
    def create(username: str) -> Player:
        """Create a brand-new profile, enforcing the username rule."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        return Player(username=username.strip())

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValidationError(f"Score increment cannot be negative, got {points}")
        self.total_score += points

    def increment_days_played(self) -> None:
        self.days_played += 1

    def record_game(self) -> None:
        self.games_played += 1

    def calculate_rating(self) -> int:
        """Return a 1-5 star rating from the average score per day played."""
        if self.days_played == 0:
            return UNRATED
        average = self.total_score // self.days_played
        for threshold, stars in RATING_THRESHOLDS:
            if average > threshold:
                return stars
        return LOWEST_EARNED_RATING
