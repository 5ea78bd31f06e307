"""
History route: daily leaderboard over a date range, newest date first.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.repositories import ScoreRepository
from app.services.puzzles import build_daily_view
from app.utils.dates import is_valid_iso_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def get_history(
    date_from: Optional[str] = Query(None, description="First date (YYYY-MM-DD), inclusive"),
    date_to: Optional[str] = Query(None, description="Last date (YYYY-MM-DD), inclusive"),
    db: Session = Depends(get_db)
):
    """
    Get the daily view for a date range.

    Example: /api/v1/history?date_from=2025-01-01&date_to=2025-01-31
    """
    if not is_valid_iso_date(date_from) or not is_valid_iso_date(date_to):
        raise HTTPException(
            status_code=400,
            detail="date_from and date_to are required in YYYY-MM-DD format."
        )

    rows = ScoreRepository(db).rows_in_range(date_from, date_to)
    return build_daily_view(rows)
