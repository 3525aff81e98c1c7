"""Application service: Login and Register use cases."""

from __future__ import annotations

from teashop.application.progress_store import ProgressStore, SaveStatus
from teashop.domain.exceptions import EntityNotFoundError, ValidationError
from teashop.domain.model.player import Player


class ProfileHandler:

    def __init__(self, store: ProgressStore) -> None:
        self._store = store

    def login(self, username: str) -> Player:
        """Load an existing profile.

        An unreadable save file is treated the same as an unknown user.
        """
        player = self._store.load_player(username.strip())
        if player is None:
            raise EntityNotFoundError(f"User '{username.strip()}' not found")
        return player

    def register(self, username: str) -> tuple[Player, SaveStatus]:
        """Create and save a new profile.

        The player is returned even if saving failed, so the session can
        continue; the status tells the caller whether it was persisted.
        """
        player = Player.create(username)
        if self._store.load_player(player.username) is not None:
            raise ValidationError(f"Username '{player.username}' is already taken")
        return player, self._store.save_player(player)
