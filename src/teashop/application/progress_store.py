"""Application service: saving and loading progress without ever failing.

Repositories raise PersistenceError.  The game must keep going regardless,
so this gateway turns every storage failure into a plain return value:
a missing read becomes "no prior data" and a failed write becomes
``SaveStatus.FAILED``.  The failure is logged and otherwise dropped.
"""

from __future__ import annotations

import logging
from enum import Enum

from teashop.domain.exceptions import PersistenceError
from teashop.domain.model.player import Player
from teashop.domain.repository.leaderboard_repository import LeaderboardRepository
from teashop.domain.repository.player_repository import PlayerRepository

logger = logging.getLogger(__name__)


class SaveStatus(Enum):
    SAVED = "SAVED"
    FAILED = "FAILED"


class ProgressStore:

    def __init__(
        self,
        player_repo: PlayerRepository,
        leaderboard_repo: LeaderboardRepository,
    ) -> None:
        self._player_repo = player_repo
        self._leaderboard_repo = leaderboard_repo

    def load_player(self, username: str) -> Player | None:
        try:
            return self._player_repo.get(username)
        except PersistenceError as exc:
            logger.warning("Could not load player %r: %s", username, exc)
            return None

    def save_player(self, player: Player) -> SaveStatus:
        try:
            self._player_repo.save(player)
        except PersistenceError as exc:
            logger.warning("Could not save player %r: %s", player.username, exc)
            return SaveStatus.FAILED
        return SaveStatus.SAVED

    def load_leaderboard(self) -> dict[str, int]:
        try:
            return self._leaderboard_repo.load()
        except PersistenceError as exc:
            logger.warning("Could not load leaderboard: %s", exc)
            return {}

    def save_leaderboard(self, scores: dict[str, int]) -> SaveStatus:
        try:
            self._leaderboard_repo.save(scores)
        except PersistenceError as exc:
            logger.warning("Could not save leaderboard: %s", exc)
            return SaveStatus.FAILED
        return SaveStatus.SAVED
