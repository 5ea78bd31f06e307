"""
Database models for players and their puzzle completion times.

A Score row is one player's time for one game on one date. The
(player_id, date, game) triple is unique; saving a time again for the same
triple updates the existing row.
"""
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()


# =============================================================================
# PLAYER MODEL
# =============================================================================

class Player(Base):
    """
    A tracked player.

    name_key is the trimmed, lower-cased name and enforces case-insensitive
    uniqueness of display names.
    """
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    name_key = Column(String(100), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    scores = relationship("Score", back_populates="player", cascade="all, delete-orphan")


# =============================================================================
# SCORE MODEL
# =============================================================================

class Score(Base):
    """One completion time for one game on one date."""
    __tablename__ = "scores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    player_id = Column(Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    game = Column(String(16), nullable=False)  # ZIP, MINI_SUDOKU, QUEENS
    time_secs = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    player = relationship("Player", back_populates="scores")

    __table_args__ = (
        UniqueConstraint('player_id', 'date', 'game', name='uq_score_player_date_game'),
        Index('ix_scores_date_game', 'date', 'game'),
    )
