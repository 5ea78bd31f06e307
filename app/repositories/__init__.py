"""
Repository layer for data access.

Usage:
    from app.repositories import PlayerRepository, ScoreRepository
    from app.core.database import SessionLocal

    db = SessionLocal()
    rows = ScoreRepository(db).all_rows()
    db.close()
"""

from app.repositories.base import BaseRepository
from app.repositories.player_repository import PlayerRepository, normalize_name_key
from app.repositories.score_repository import ScoreRepository

__all__ = [
    "BaseRepository",
    "PlayerRepository",
    "ScoreRepository",
    "normalize_name_key",
]
