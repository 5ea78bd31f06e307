"""
Statistics engine for puzzle completion times.

Per player and per game:
- days_played, best, worst, average, median
- last7_avg: mean of the 7 most recent times
- trend_vs_prev7: last7_avg minus the mean of the 7 times before those

Trend sign convention:
    trend = recent - previous
    Positive trend = slower (more time taken), negative = faster.

Per player overall (days with all three games only):
- complete_days, best, worst, average, median

Wins are counted per day: the fastest time for each game earns a win, and
every player tied on that time is credited with a full win. The same applies
to the overall time.
"""
import logging
import statistics
from typing import Dict, Iterable, List, Optional, Sequence

from app.services.puzzles.daily_view import group_daily
from app.services.puzzles.types import GAMES, ScoreRow, is_game_key

logger = logging.getLogger(__name__)

TREND_WINDOW = 7


def _mean(values: Sequence[int]) -> Optional[float]:
    if not values:
        return None
    return statistics.mean(values)


def _median(values: Sequence[int]) -> Optional[float]:
    if not values:
        return None
    return statistics.median(values)


def summarize_times(times: Sequence[int]) -> Dict[str, Optional[float]]:
    """Best, worst, average and median of a list of times."""
    return {
        "best": min(times) if times else None,
        "worst": max(times) if times else None,
        "average": _mean(times),
        "median": _median(times),
    }


def trailing_trend(times: Sequence[int], window: int = TREND_WINDOW) -> Dict[str, Optional[float]]:
    """
    Trailing-window average and trend for chronologically ordered times.

    Args:
        times: Times sorted oldest first
        window: Window size (default 7)

    Returns:
        Dict with last7_avg and trend_vs_prev7
    """
    last = times[-window:]
    previous = times[max(0, len(times) - 2 * window):max(0, len(times) - window)]

    last_avg = _mean(last)
    previous_avg = _mean(previous)

    trend = None
    if last_avg is not None and previous_avg is not None:
        trend = last_avg - previous_avg

    return {
        "last7_avg": last_avg,
        "trend_vs_prev7": trend,
    }


def _empty_player(player_id: int, player_name: str) -> dict:
    return {
        "player_id": player_id,
        "player_name": player_name,
        "games": {},
        "overall": {},
        "wins": {
            "games": {game: 0 for game in GAMES},
            "overall": 0,
        },
    }


def _credit_fastest(contenders: Dict[int, int]) -> List[int]:
    """Player ids holding the minimum time; ties all win."""
    if not contenders:
        return []
    best = min(contenders.values())
    return [player_id for player_id, value in contenders.items() if value == best]


def compute_stats(rows: Iterable[ScoreRow]) -> dict:
    """
    Compute per-player statistics and win counts.

    Args:
        rows: Score rows in any order

    Returns:
        Dict with:
        - players: per-player stats, sorted by player name
        - daily: daily view sorted oldest date first
    """
    rows = [row for row in rows if is_game_key(row.game)]
    daily = group_daily(rows, descending=False)

    names: Dict[int, str] = {}
    for row in rows:
        names[row.player_id] = row.player_name

    per_player = {pid: _empty_player(pid, name) for pid, name in names.items()}

    # Chronological series per player, read off the ascending daily view
    game_times: Dict[int, Dict] = {pid: {game: [] for game in GAMES} for pid in per_player}
    overall_times: Dict[int, List[int]] = {pid: [] for pid in per_player}

    for day in daily:
        for entry in day["players"]:
            pid = entry["player_id"]
            for game, value in entry["games"].items():
                game_times[pid][game].append(value)
            if entry["overall"] is not None:
                overall_times[pid].append(entry["overall"])

        for game in GAMES:
            contenders = {
                p["player_id"]: p["games"][game]
                for p in day["players"]
                if p["games"].get(game) is not None
            }
            for pid in _credit_fastest(contenders):
                per_player[pid]["wins"]["games"][game] += 1

        overall_contenders = {
            p["player_id"]: p["overall"]
            for p in day["players"]
            if p["overall"] is not None
        }
        for pid in _credit_fastest(overall_contenders):
            per_player[pid]["wins"]["overall"] += 1

    for pid, stats in per_player.items():
        for game in GAMES:
            times = game_times[pid][game]
            stats["games"][game] = {
                "days_played": len(times),
                **summarize_times(times),
                **trailing_trend(times),
            }

        overall = overall_times[pid]
        stats["overall"] = {
            "complete_days": len(overall),
            **summarize_times(overall),
        }

    players = sorted(per_player.values(), key=lambda p: p["player_name"])

    logger.debug(
        f"Computed stats for {len(players)} players over {len(daily)} days"
    )

    return {
        "players": players,
        "daily": daily,
    }
