"""
Player directory routes.

Display names are unique ignoring case and surrounding whitespace.
Deleting a player who has recorded scores requires delete_scores=true.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Player
from app.repositories import PlayerRepository, ScoreRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/players", tags=["players"])


class PlayerCreate(BaseModel):
    """Request body for creating a player."""
    name: str = Field("", description="Display name")


class PlayerUpdate(BaseModel):
    """Request body for renaming a player."""
    id: Optional[int] = Field(None, description="Player ID")
    name: str = Field("", description="New display name")


def player_to_dict(player: Player) -> dict:
    """Convert Player model to dictionary."""
    return {
        "id": player.id,
        "name": player.name,
        "created_at": player.created_at.isoformat() if player.created_at else None,
        "updated_at": player.updated_at.isoformat() if player.updated_at else None,
    }


@router.get("")
async def list_players(db: Session = Depends(get_db)):
    """List all players ordered by name."""
    return [player_to_dict(p) for p in PlayerRepository(db).list_by_name()]


@router.post("", status_code=201)
async def create_player(body: PlayerCreate, db: Session = Depends(get_db)):
    """
    Create a player.

    Returns 400 for a blank name and 409 if the name is already used.
    """
    name = body.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name is required.")

    repo = PlayerRepository(db)
    if repo.name_taken(name):
        raise HTTPException(status_code=409, detail="Player name must be unique.")

    player = repo.create_player(name)
    db.commit()
    db.refresh(player)

    logger.info(f"Created player {player.id} ({player.name})")
    return player_to_dict(player)


@router.put("")
async def rename_player(body: PlayerUpdate, db: Session = Depends(get_db)):
    """Rename a player. The new name must not belong to another player."""
    name = body.name.strip()
    if not body.id or not name:
        raise HTTPException(status_code=400, detail="id and name are required.")

    repo = PlayerRepository(db)
    if repo.name_taken(name, exclude_id=body.id):
        raise HTTPException(status_code=409, detail="Player name must be unique.")

    player = repo.rename(body.id, name)
    if player is None:
        raise HTTPException(status_code=404, detail=f"Player {body.id} not found.")

    db.commit()
    db.refresh(player)

    logger.info(f"Renamed player {player.id} to {player.name}")
    return player_to_dict(player)


@router.delete("")
async def delete_player(
    id: Optional[str] = Query(None, description="Player ID"),
    delete_scores: bool = Query(False, description="Also delete the player's scores"),
    db: Session = Depends(get_db)
):
    """
    Delete a player.

    Example: DELETE /api/v1/players?id=3&delete_scores=true
    """
    try:
        player_id = int(id) if id is not None else 0
    except ValueError:
        player_id = 0
    if player_id < 1:
        raise HTTPException(status_code=400, detail="Valid id required.")

    repo = PlayerRepository(db)
    if repo.find_by_id(player_id) is None:
        raise HTTPException(status_code=404, detail=f"Player {player_id} not found.")

    score_count = ScoreRepository(db).count_for_player(player_id)
    if score_count > 0 and not delete_scores:
        raise HTTPException(
            status_code=409,
            detail="Player has scores. Use delete_scores=true to delete player and scores."
        )

    repo.delete(player_id)
    db.commit()

    logger.info(f"Deleted player {player_id} ({score_count} scores)")
    return {"ok": True}
