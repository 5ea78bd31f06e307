"""
Player repository.

Display names are unique case-insensitively, enforced through name_key.

Usage:
    repo = PlayerRepository(db)
    player = repo.find_by_name("alex")
    everyone = repo.list_by_name()
"""
from typing import List, Optional

from app.models import Player
from app.repositories.base import BaseRepository


def normalize_name_key(name: str) -> str:
    """Uniqueness key for a display name."""
    return name.strip().lower()


class PlayerRepository(BaseRepository[Player]):
    """Repository for player data access."""

    def __init__(self, db):
        super().__init__(Player, db)

    def find_by_name_key(self, name_key: str) -> Optional[Player]:
        """Find a player by normalized name key."""
        return self.where_first(Player.name_key == name_key)

    def find_by_name(self, name: str) -> Optional[Player]:
        """Find a player by display name, ignoring case and padding."""
        return self.find_by_name_key(normalize_name_key(name))

    def list_by_name(self) -> List[Player]:
        """All players ordered by display name."""
        return self.find_all(order_by="name")

    def create_player(self, name: str) -> Player:
        """Add a player (not committed)."""
        name = name.strip()
        return self.create(name=name, name_key=normalize_name_key(name))

    def rename(self, player_id: int, name: str) -> Optional[Player]:
        """Rename a player (not committed). Returns None if not found."""
        name = name.strip()
        return self.update(player_id, name=name, name_key=normalize_name_key(name))

    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another player already uses this name."""
        existing = self.find_by_name(name)
        return existing is not None and existing.id != exclude_id

    def upsert_by_name(self, name: str) -> Player:
        """
        Create a player, or refresh the display name of the player whose
        name key matches (not committed).
        """
        existing = self.find_by_name(name)
        if existing is None:
            return self.create_player(name)
        return self.rename(existing.id, name)
