"""
API routes.

- players: player directory (create, rename, delete)
- scores: daily time entry
- history: daily leaderboard over a date range
- stats: per-player statistics and win counts
- scoreboard: two-player head-to-head points
"""
