"""
Head-to-head scoreboard route between two players.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.repositories import PlayerRepository, ScoreRepository
from app.services.puzzles import compute_head_to_head_scoreboard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scoreboard", tags=["scoreboard"])


def _parse_player_id(value: Optional[str]) -> Optional[int]:
    """Positive integer id from a query string value, else None."""
    try:
        player_id = int(value) if value is not None else 0
    except ValueError:
        return None
    return player_id if player_id > 0 else None


@router.get("")
async def get_scoreboard(
    player_a: Optional[str] = Query(None, description="Player A ID"),
    player_b: Optional[str] = Query(None, description="Player B ID"),
    db: Session = Depends(get_db)
):
    """
    Get the head-to-head points table for two players.

    Example: /api/v1/scoreboard?player_a=1&player_b=2
    """
    a_id = _parse_player_id(player_a)
    b_id = _parse_player_id(player_b)
    if a_id is None or b_id is None or a_id == b_id:
        raise HTTPException(
            status_code=400,
            detail="player_a and player_b are required and must be different."
        )

    players = PlayerRepository(db)
    a = players.find_by_id(a_id)
    b = players.find_by_id(b_id)
    if a is None or b is None:
        raise HTTPException(status_code=404, detail="One or both players were not found.")

    rows = ScoreRepository(db).rows_for_players([a.id, b.id])
    return compute_head_to_head_scoreboard(
        rows,
        {"id": a.id, "name": a.name},
        {"id": b.id, "name": b.name},
    )
