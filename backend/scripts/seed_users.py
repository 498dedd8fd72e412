#!/usr/bin/env python3
"""
Seed the users table with sample accounts.

Usage:
  python backend/scripts/seed_users.py [--force]

Skips seeding when users already exist unless --force is given. IDs are
always assigned by the database.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from database import SessionLocal
from init_db import init_database
from repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    ("alice", "secret", "a@x.com"),
    ("bob", "hunter2", "bob@example.com"),
    ("carol", "correct-horse", "carol@example.com"),
]


def seed_users(db, force: bool = False) -> int:
    """
    Insert SAMPLE_USERS.

    Returns:
        Number of users inserted
    """
    repo = UserRepository(db)
    existing = repo.count()
    if existing and not force:
        logger.info(f"Users table already holds {existing} user(s); skipping seed")
        return 0

    for username, password, email in SAMPLE_USERS:
        user = repo.add(username=username, password=password, email=email)
        logger.info(f"Seeded user {user.id}: {user.username}")

    db.commit()
    return len(SAMPLE_USERS)


def main():
    ap = argparse.ArgumentParser(description="Seed the users table with sample accounts")
    ap.add_argument("--force", action="store_true", help="Seed even when users already exist")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    init_database()
    db = SessionLocal()
    try:
        inserted = seed_users(db, force=args.force)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print(f"Inserted {inserted} user(s)")


if __name__ == "__main__":
    main()
