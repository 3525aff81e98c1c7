"""Abstract repository for the Player aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations raise PersistenceError when the
underlying storage cannot be read or written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from teashop.domain.model.player import Player


class PlayerRepository(ABC):

    @abstractmethod
    def get(self, username: str) -> Player | None:
        """Return the player with this username, or None."""

    @abstractmethod
    def save(self, player: Player) -> None:
        """Persist a new or updated player (last write wins)."""
