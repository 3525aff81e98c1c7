"""Run state and the per-day tally kept by the game loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from teashop.domain.model.order import Customer


class GameState(Enum):
    NOT_STARTED = "NOT_STARTED"
    DAY_IN_PROGRESS = "DAY_IN_PROGRESS"
    DAY_COMPLETE = "DAY_COMPLETE"
    GAME_OVER = "GAME_OVER"
    ABORTED = "ABORTED"


@dataclass
class DailyTally:
    day: int
    orders_made: int = 0
    orders_missed: int = 0
    score: int = 0

    def record(self, customer: Customer) -> int:
        """Count a served customer and return the points they earned."""
        earned = customer.earned_score()
        if customer.order.was_correct:
            self.orders_made += 1
        else:
            self.orders_missed += 1
        self.score += earned
        return earned
