"""
Score repository.

Besides the usual lookups this converts stored scores into ScoreRow values,
the input of the aggregation engine in app.services.puzzles.
"""
from typing import Iterable, List, Optional

from sqlalchemy.orm import contains_eager

from app.models import Player, Score
from app.repositories.base import BaseRepository
from app.services.puzzles import ScoreRow


class ScoreRepository(BaseRepository[Score]):
    """Repository for score data access."""

    def __init__(self, db):
        super().__init__(Score, db)

    def _with_player(self):
        return (
            self.db.query(Score)
            .join(Score.player)
            .options(contains_eager(Score.player))
        )

    # ========================================================================
    # Lookups
    # ========================================================================

    def find_by_date(self, date: str) -> List[Score]:
        """Scores for one date, ordered by player name then game."""
        return (
            self._with_player()
            .filter(Score.date == date)
            .order_by(Player.name, Score.game)
            .all()
        )

    def find_for_player_date(self, player_id: int, date: str) -> List[Score]:
        """One player's scores for one date, ordered by game."""
        return (
            self.db.query(Score)
            .filter(Score.player_id == player_id, Score.date == date)
            .order_by(Score.game)
            .all()
        )

    def find_one(self, player_id: int, date: str, game: str) -> Optional[Score]:
        """The score for a (player, date, game) triple, if any."""
        return self.where_first(
            Score.player_id == player_id,
            Score.date == date,
            Score.game == game,
        )

    def count_for_player(self, player_id: int) -> int:
        """Number of stored scores for a player."""
        return self.count(Score.player_id == player_id)

    # ========================================================================
    # Writes (not committed)
    # ========================================================================

    def upsert(self, player_id: int, date: str, game: str, time_secs: int) -> Score:
        """Insert or update the time for a (player, date, game) triple."""
        score = self.find_one(player_id, date, game)
        if score is None:
            return self.create(player_id=player_id, date=date, game=game, time_secs=time_secs)
        return self.update(score.id, time_secs=time_secs)

    def delete_one(self, player_id: int, date: str, game: str) -> bool:
        """Remove the time for a (player, date, game) triple if present."""
        score = self.find_one(player_id, date, game)
        if score is None:
            return False
        self.db.delete(score)
        return True

    # ========================================================================
    # Engine input
    # ========================================================================

    def all_rows(self) -> List[ScoreRow]:
        """Every stored score as engine rows."""
        scores = self._with_player().order_by(Score.date, Score.game).all()
        return self.to_score_rows(scores)

    def rows_in_range(self, date_from: str, date_to: str) -> List[ScoreRow]:
        """Engine rows for an inclusive date range."""
        scores = (
            self._with_player()
            .filter(Score.date >= date_from, Score.date <= date_to)
            .order_by(Score.date.desc(), Player.name, Score.game)
            .all()
        )
        return self.to_score_rows(scores)

    def rows_for_players(self, player_ids: Iterable[int]) -> List[ScoreRow]:
        """Engine rows for a set of players."""
        scores = (
            self._with_player()
            .filter(Score.player_id.in_(list(player_ids)))
            .order_by(Score.date, Score.game)
            .all()
        )
        return self.to_score_rows(scores)

    @staticmethod
    def to_score_rows(scores: Iterable[Score]) -> List[ScoreRow]:
        """Convert stored scores to engine rows."""
        return [
            ScoreRow(
                player_id=s.player_id,
                player_name=s.player.name,
                date=s.date,
                game=s.game,
                time_secs=s.time_secs,
            )
            for s in scores
        ]
