"""
Daily time entry routes.

A submission carries one text field per game. Blank text removes the stored
time for that game; anything else must parse as seconds, mm:ss or hh:mm:ss.
All three games are validated before anything is written. A single time
may not exceed MAX_TIME_SECS (one day).
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Score
from app.repositories import PlayerRepository, ScoreRepository
from app.services.puzzles import GAMES, format_seconds, parse_time_to_seconds
from app.utils.dates import is_valid_iso_date, today_iso_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scores", tags=["scores"])

# Longest time accepted for a single puzzle
MAX_TIME_SECS = 24 * 60 * 60


class ScoreEntry(BaseModel):
    """Request body for saving a player's times for one date."""
    player_id: Optional[int] = Field(None, description="Player ID")
    date: str = Field("", description="Date in YYYY-MM-DD format")
    times: Dict[str, Any] = Field(
        default_factory=dict,
        description="Time text per game (ZIP, MINI_SUDOKU, QUEENS); blank clears"
    )


def score_to_dict(score: Score) -> dict:
    """Convert Score model to dictionary."""
    return {
        "id": score.id,
        "player_id": score.player_id,
        "player_name": score.player.name if score.player else None,
        "date": score.date,
        "game": score.game,
        "time_secs": score.time_secs,
        "display": format_seconds(score.time_secs),
    }


@router.get("")
async def get_scores_for_date(
    date: Optional[str] = Query(None, description="Date in YYYY-MM-DD format (default: today)"),
    db: Session = Depends(get_db)
):
    """
    Get every player's scores for one date.

    Example: /api/v1/scores?date=2025-01-31
    """
    if date is None:
        date = today_iso_date()
    if not is_valid_iso_date(date):
        raise HTTPException(status_code=400, detail="date (YYYY-MM-DD) is required.")

    scores = ScoreRepository(db).find_by_date(date)
    return [score_to_dict(s) for s in scores]


@router.post("")
async def save_scores(body: ScoreEntry, db: Session = Depends(get_db)):
    """
    Save one player's times for one date.

    Returns the player's stored scores for that date after the update.
    """
    if not body.player_id:
        raise HTTPException(status_code=400, detail="player_id is required.")
    if not is_valid_iso_date(body.date):
        raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD.")

    if PlayerRepository(db).find_by_id(body.player_id) is None:
        raise HTTPException(status_code=404, detail="Player not found.")

    parsed: Dict[str, Optional[int]] = {}
    for game in GAMES:
        raw = body.times.get(game.value)
        text = "" if raw is None else str(raw).strip()
        if not text:
            parsed[game.value] = None
            continue

        seconds = parse_time_to_seconds(text)
        if seconds is None or seconds > MAX_TIME_SECS:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid time for {game.value}. Use mm:ss, hh:mm:ss, or seconds."
            )
        parsed[game.value] = seconds

    repo = ScoreRepository(db)
    try:
        for game, seconds in parsed.items():
            if seconds is None:
                repo.delete_one(body.player_id, body.date, game)
            else:
                repo.upsert(body.player_id, body.date, game, seconds)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error saving scores for player {body.player_id} on {body.date}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save scores.")

    logger.info(
        f"Saved scores for player {body.player_id} on {body.date}",
        extra={"player_id": body.player_id, "date": body.date},
    )

    updated = repo.find_for_player_date(body.player_id, body.date)
    return {"ok": True, "scores": [score_to_dict(s) for s in updated]}
