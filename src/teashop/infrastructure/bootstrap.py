"""Composition root: wires concrete implementations to the ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from teashop.application.progress_store import ProgressStore
from teashop.application.settings import DEFAULT_SETTINGS, GameSettings
from teashop.application.shop_app import ShopApp
from teashop.infrastructure.persistence.json_leaderboard_repository import (
    JsonLeaderboardRepository,
)
from teashop.infrastructure.persistence.json_player_repository import (
    JsonPlayerRepository,
)
from teashop.infrastructure.terminal.console import ConsoleInput, SeededRandom, SystemClock
from teashop.infrastructure.terminal.frame_renderer import FrameRenderer, TerminalDisplay

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def progress_store(data_dir: Path = DEFAULT_DATA_DIR) -> ProgressStore:
    return ProgressStore(
        JsonPlayerRepository(data_dir / "players.json"),
        JsonLeaderboardRepository(data_dir / "leaderboard.json"),
    )


def shop_app(
    data_dir: Path = DEFAULT_DATA_DIR,
    seed: int | None = None,
    settings: GameSettings = DEFAULT_SETTINGS,
) -> ShopApp:
    renderer = FrameRenderer(settings.frame_width, settings.frame_height)
    return ShopApp(
        input_source=ConsoleInput(),
        display=TerminalDisplay(renderer),
        clock=SystemClock(),
        random_source=SeededRandom(seed),
        store=progress_store(data_dir),
        settings=settings,
    )
