"""Session achievements unlocked by reaching player milestones."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from teashop.domain.model.player import Player

ACHIEVEMENTS: tuple[tuple[str, Callable[[Player], bool]], ...] = (
    ("First Shift", lambda p: p.days_played >= 1),
    ("High Roller", lambda p: p.total_score > 1000),
    ("Full Week", lambda p: p.days_played >= 7),
)


@dataclass
class AchievementTracker:
    unlocked: list[str] = field(default_factory=list)

    def check(self, player: Player) -> list[str]:
        """Unlock every achievement the player now qualifies for.

        Returns only the names unlocked by this call.
        """
        newly_unlocked = [
            name
            for name, qualifies in ACHIEVEMENTS
            if name not in self.unlocked and qualifies(player)
        ]
        self.unlocked.extend(newly_unlocked)
        return newly_unlocked
