"""Data Transfer Objects: plain containers that cross layer boundaries.

A Frame carries a screen from the application layer to whatever display
the game is wired to; a GameReport carries the outcome of a run back to
the menu.
"""

from __future__ import annotations

from dataclasses import dataclass

from teashop.domain.model.game_state import DailyTally, GameState


@dataclass(frozen=True)
class Frame:
    """Output: one screen's worth of centred content plus an optional prompt."""

    content_lines: tuple[str, ...]
    prompt: str | None = None

    @staticmethod
    def of(*lines: str, prompt: str | None = None) -> Frame:
        return Frame(content_lines=tuple(lines), prompt=prompt)


@dataclass(frozen=True)
class GameReport:
    """Output: how a run ended."""

    days: tuple[DailyTally, ...]
    total_score: int
    rating: int
    aborted: bool
    final_state: GameState
