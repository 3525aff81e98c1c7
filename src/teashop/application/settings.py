"""Game configuration.

One frozen object holds every tunable the game reads, so tests and the CLI
can build a variant with ``dataclasses.replace`` instead of patching
module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameSettings:
    days_per_game: int = 7
    customers_per_day: int = 5
    vip_probability: float = 0.2
    exit_command: str = "exit"

    frame_width: int = 100
    frame_height: int = 30

    # Presentational pauses, in seconds
    intro_delay: float = 2.0
    arrival_delay: float = 1.0
    reaction_delay: float = 1.0
    day_transition_delay: float = 1.5
    ending_delay: float = 2.0

    def without_delays(self) -> GameSettings:
        return replace(
            self,
            intro_delay=0.0,
            arrival_delay=0.0,
            reaction_delay=0.0,
            day_transition_delay=0.0,
            ending_delay=0.0,
        )


DEFAULT_SETTINGS = GameSettings()
