"""
Head-to-head scoreboard between two players.

Scoring per date and game:
- Both players have a time: faster time gets 1 point, slower gets 0
- Equal times: TIE, 1 point each
- Either time missing: no winner, 0 points each (a missing game is not a loss)

Day points are summed across the three games and accumulated into a running
total over dates in ascending order.
"""
import logging
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional

from app.services.puzzles.types import GAMES, GameKey, ScoreRow, is_game_key

logger = logging.getLogger(__name__)


class Winner(str, Enum):
    """Outcome of one game between the two players."""
    A = "A"
    B = "B"
    TIE = "TIE"


def _points(a: int = 0, b: int = 0) -> Dict[str, int]:
    return {"a": a, "b": b}


def score_game(a_time: Optional[int], b_time: Optional[int]) -> dict:
    """
    Score one game between player A and player B.

    Returns:
        Dict with a_time, b_time, winner and points
    """
    winner = None
    points = _points()

    if a_time is not None and b_time is not None:
        if a_time < b_time:
            winner = Winner.A
            points = _points(1, 0)
        elif b_time < a_time:
            winner = Winner.B
            points = _points(0, 1)
        else:
            winner = Winner.TIE
            points = _points(1, 1)

    return {
        "a_time": a_time,
        "b_time": b_time,
        "winner": winner,
        "points": points,
    }


def compute_head_to_head_scoreboard(
    rows: Iterable[ScoreRow],
    player_a: Mapping,
    player_b: Mapping,
) -> dict:
    """
    Build the day-by-day head-to-head scoreboard.

    Rows belonging to any other player are ignored. The two identities must
    be distinct; callers reject identical ids before calling.

    Args:
        rows: Score rows for the two players
        player_a: {"id", "name"} of player A
        player_b: {"id", "name"} of player B

    Returns:
        Dict with player_a, player_b, totals and daily
    """
    a_id = player_a["id"]
    b_id = player_b["id"]

    by_date: Dict[str, Dict[str, Dict[GameKey, int]]] = {}
    for row in rows:
        if not is_game_key(row.game):
            continue
        if row.player_id == a_id:
            side = "a"
        elif row.player_id == b_id:
            side = "b"
        else:
            continue
        bucket = by_date.setdefault(row.date, {"a": {}, "b": {}})
        bucket[side][GameKey(row.game)] = row.time_secs

    totals = {
        "games": {game: _points() for game in GAMES},
        "overall": _points(),
    }

    daily = []
    for date in sorted(by_date):
        bucket = by_date[date]
        games = {}
        day_points = _points()

        for game in GAMES:
            result = score_game(bucket["a"].get(game), bucket["b"].get(game))
            games[game] = result
            for side in ("a", "b"):
                day_points[side] += result["points"][side]
                totals["games"][game][side] += result["points"][side]

        totals["overall"]["a"] += day_points["a"]
        totals["overall"]["b"] += day_points["b"]

        daily.append({
            "date": date,
            "games": games,
            "day_points": day_points,
            "running_total": dict(totals["overall"]),
        })

    logger.debug(
        f"Head-to-head {a_id} vs {b_id}: {len(daily)} days, "
        f"{totals['overall']['a']}-{totals['overall']['b']}"
    )

    return {
        "player_a": {"id": a_id, "name": player_a["name"]},
        "player_b": {"id": b_id, "name": player_b["name"]},
        "totals": totals,
        "daily": daily,
    }
