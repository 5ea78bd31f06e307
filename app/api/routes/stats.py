"""
Statistics route: per-player stats, trends and win counts over all scores.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.repositories import ScoreRepository
from app.services.puzzles import compute_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def get_stats(db: Session = Depends(get_db)):
    """
    Get statistics for every player.

    Returns:
        - players: per game days_played, best, worst, average, median,
          last7_avg, trend_vs_prev7; overall aggregates; win counts
        - daily: daily view, oldest date first
    """
    try:
        rows = ScoreRepository(db).all_rows()
        return compute_stats(rows)
    except Exception as e:
        logger.error(f"Error computing stats: {e}")
        raise HTTPException(status_code=500, detail=str(e))
