"""
Services module for business logic.

- puzzles: the aggregation engine (daily view, statistics, head-to-head)
"""
