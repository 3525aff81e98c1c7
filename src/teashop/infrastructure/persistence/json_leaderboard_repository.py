"""JSON-file-backed implementation of LeaderboardRepository."""

from __future__ import annotations

from pathlib import Path

from teashop.domain.exceptions import PersistenceError
from teashop.domain.repository.leaderboard_repository import LeaderboardRepository
from teashop.infrastructure.persistence.json_file import read_json, write_json


class JsonLeaderboardRepository(LeaderboardRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> dict[str, int]:
        raw = read_json(self._file_path, default={})
        try:
            return {str(name): int(score) for name, score in raw.items()}
        except (AttributeError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Malformed leaderboard in {self._file_path.name}") from exc

    def save(self, scores: dict[str, int]) -> None:
        write_json(self._file_path, dict(scores))
