"""
Puzzle times aggregation engine.

Pure functions over lists of ScoreRow:
- build_daily_view: daily leaderboard, newest first
- compute_stats: per-player stats, trends and win counts
- compute_head_to_head_scoreboard: two-player points table

Usage:
    from app.services.puzzles import compute_stats, ScoreRow

    stats = compute_stats(rows)
"""
from app.services.puzzles.types import GAMES, GameKey, ScoreRow, is_game_key
from app.services.puzzles.time_codec import format_seconds, parse_time_to_seconds
from app.services.puzzles.daily_view import build_daily_view, group_daily
from app.services.puzzles.stats_service import compute_stats
from app.services.puzzles.scoreboard_service import Winner, compute_head_to_head_scoreboard

__all__ = [
    "GAMES",
    "GameKey",
    "ScoreRow",
    "is_game_key",
    "format_seconds",
    "parse_time_to_seconds",
    "build_daily_view",
    "group_daily",
    "compute_stats",
    "Winner",
    "compute_head_to_head_scoreboard",
]
