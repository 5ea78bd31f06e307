#!/usr/bin/env python3
"""
Seed the player directory.

Creates the default players (DEFAULT_PLAYERS_STR, "Tim,Alex" unless
configured) or the names given on the command line. Existing players are
matched by name ignoring case, so re-running only refreshes display names.

Usage:
    python scripts/seed_players.py
    python scripts/seed_players.py Sam Robin --create-tables
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.repositories import PlayerRepository

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Seed default players")
    parser.add_argument("names", nargs="*", help="Player names (default: DEFAULT_PLAYERS_STR)")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args()

    names = args.names or settings.DEFAULT_PLAYERS
    if not names:
        logger.warning("No player names to seed")
        return 0

    if args.create_tables:
        init_db()

    db = SessionLocal()
    try:
        repo = PlayerRepository(db)
        for name in names:
            player = repo.upsert_by_name(name)
            db.flush()
            logger.info(f"Seeded player {player.id}: {player.name}")
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        db.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
