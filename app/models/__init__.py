"""
Models module.

Usage:
    from app.models import Player, Score
"""
from app.models.models import Base, Player, Score

__all__ = [
    "Base",
    "Player",
    "Score",
]
