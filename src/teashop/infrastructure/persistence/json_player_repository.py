"""JSON-file-backed implementation of PlayerRepository."""

from __future__ import annotations

from pathlib import Path

from teashop.domain.exceptions import PersistenceError
from teashop.domain.model.player import Player
from teashop.domain.repository.player_repository import PlayerRepository
from teashop.infrastructure.persistence.json_file import read_json, write_json


class JsonPlayerRepository(PlayerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- PlayerRepository interface -------------------------------------------

    def get(self, username: str) -> Player | None:
        raw = self._load_raw().get(username)
        if raw is None:
            return None
        return self._to_domain(raw)

    def save(self, player: Player) -> None:
        # Read-modify-write keeps every other player's record untouched
        players = self._load_raw()
        players[player.username] = self._to_raw(player)
        write_json(self._file_path, players)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(player: Player) -> dict:
        return {
            "username": player.username,
            "total_score": player.total_score,
            "days_played": player.days_played,
            "games_played": player.games_played,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Player:
        try:
            return Player(
                username=raw["username"],
                total_score=int(raw["total_score"]),
                days_played=int(raw["days_played"]),
                games_played=int(raw.get("games_played", 0)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Malformed player record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        players = read_json(self._file_path, default={})
        if not isinstance(players, dict):
            raise PersistenceError(f"{self._file_path.name} does not hold a player mapping")
        return players
