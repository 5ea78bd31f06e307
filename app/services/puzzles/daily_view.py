"""
Daily leaderboard view.

Groups raw score rows by date, then by player. Each player's entry carries
the per-game times present that day and an "overall" time, which is the sum
of all three games and only exists when every game was played.

The same grouping is used by the statistics engine (ascending dates) and the
history endpoint (descending dates).
"""
import logging
from typing import Dict, Iterable, List, Optional

from app.services.puzzles.types import GAMES, GameKey, ScoreRow, is_game_key

logger = logging.getLogger(__name__)


def overall_time(games: Dict[GameKey, int]) -> Optional[int]:
    """Sum of all three game times, or None unless every game is present."""
    if not all(games.get(game) is not None for game in GAMES):
        return None
    return sum(games[game] for game in GAMES)


def group_daily(rows: Iterable[ScoreRow], descending: bool) -> List[dict]:
    """
    Group score rows into one entry per date.

    Rows with an unknown game tag are dropped. A repeated
    (player, date, game) keeps the last time seen.

    Args:
        rows: Score rows in any order
        descending: Sort dates newest first when True, oldest first otherwise

    Returns:
        List of {"date", "players"} dicts; players sorted by name
    """
    by_date: Dict[str, Dict[int, dict]] = {}
    dropped = 0

    for row in rows:
        if not is_game_key(row.game):
            dropped += 1
            continue

        players = by_date.setdefault(row.date, {})
        entry = players.get(row.player_id)
        if entry is None:
            entry = {
                "player_id": row.player_id,
                "player_name": row.player_name,
                "games": {},
            }
            players[row.player_id] = entry
        entry["games"][GameKey(row.game)] = row.time_secs

    if dropped:
        logger.debug(f"Dropped {dropped} rows with unknown game tags")

    daily = []
    for date in sorted(by_date, reverse=descending):
        items = sorted(by_date[date].values(), key=lambda p: p["player_name"])
        daily.append({
            "date": date,
            "players": [
                {
                    "player_id": p["player_id"],
                    "player_name": p["player_name"],
                    # Fixed game order regardless of row order
                    "games": {g: p["games"][g] for g in GAMES if g in p["games"]},
                    "overall": overall_time(p["games"]),
                }
                for p in items
            ],
        })

    return daily


def build_daily_view(rows: Iterable[ScoreRow]) -> List[dict]:
    """Daily leaderboard, newest date first."""
    return group_daily(rows, descending=True)
