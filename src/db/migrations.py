from __future__ import annotations

import logging
import os
import sqlite3

from core.config import AppConfig
from db.schema import SCHEMA_V1_SQL, SCHEMA_V2_SQL

logger = logging.getLogger(__name__)


def initialize_database(config: AppConfig) -> sqlite3.Connection:
    db_dir = os.path.dirname(config.db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    logger.info("Database file path: %s", config.db_path)

    db = sqlite3.connect(config.db_path)
    db.row_factory = sqlite3.Row
    try:
        db.execute("PRAGMA foreign_keys = ON")
        existing_version = int(db.execute("PRAGMA user_version").fetchone()[0])
        upgrade_database_if_needed(db, existing_version, config.schema_version)
        seed_binders_if_empty(db, config.seed_binder_count)
    except sqlite3.Error:
        db.close()
        raise

    return db


def upgrade_database_if_needed(db: sqlite3.Connection, existing_version: int, target_version: int) -> None:
    logger.info("Existing database version: %s", existing_version)

    if existing_version >= target_version:
        return

    # v1
    if existing_version <= 0:
        logger.info("Migrate database version 1...")
        db.execute("PRAGMA journal_mode=WAL")
        db.execute("PRAGMA user_version=1")
        db.executescript(SCHEMA_V1_SQL)
        db.commit()

    # v2
    if existing_version <= 1 and target_version >= 2:
        logger.info("Migrate database version 2...")
        db.execute("PRAGMA user_version=2")
        db.executescript(SCHEMA_V2_SQL)
        db.commit()


def seed_binders_if_empty(db: sqlite3.Connection, count: int) -> int:
    existing = db.execute("SELECT COUNT(*) FROM binders").fetchone()[0]
    if existing:
        return 0

    logger.info("Seeding %d binders", count)
    db.executemany(
        "INSERT INTO binders (number, label) VALUES (?, ?)",
        [(number, f"Binder {number:02d}") for number in range(1, count + 1)],
    )
    db.commit()
    return count
