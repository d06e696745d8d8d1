from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from core.config import AppConfig
from db import queries
from db.errors import StorageError
from db.migrations import initialize_database
from db.models import Binder, Song

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except (sqlite3.Error, OSError) as e:
        raise StorageError(f"failed to {action}: {e}") from e


class Database:
    """
    The single storage handle of the process.

    Loads return tuples so a screen's snapshot cannot be mutated behind the
    view that owns it. Writes raise StaleReference when the targeted row is
    gone and StorageError for anything SQLite itself rejects.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @classmethod
    def open(cls, config: AppConfig) -> "Database":
        with _storage_errors("open database"):
            return cls(initialize_database(config))

    def close(self) -> None:
        if self.conn is None:
            return
        logger.info("Closing database")
        self.conn.close()
        self.conn = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------
    # Loads
    # -------------------------
    def load_binders(self) -> tuple[Binder, ...]:
        with _storage_errors("load binders"):
            return tuple(queries.get_binders(self.conn))

    def load_songs(self, binder_id: int) -> tuple[Song, ...]:
        with _storage_errors("load binder songs"):
            return tuple(queries.get_binder_songs(self.conn, binder_id))

    def load_all_songs(self) -> tuple[Song, ...]:
        with _storage_errors("load songs"):
            return tuple(queries.get_all_songs(self.conn))

    def load_available_songs(self, binder_id: int) -> tuple[Song, ...]:
        with _storage_errors("load available songs"):
            return tuple(queries.get_available_songs(self.conn, binder_id))

    def load_composers(self) -> tuple[str, ...]:
        with _storage_errors("load composers"):
            return tuple(queries.get_composers(self.conn))

    # -------------------------
    # Writes
    # -------------------------
    def create_song(self, title: str, composer: str = "", link: str = "") -> Song:
        with _storage_errors("insert song"):
            song = queries.add_song(self.conn, title, composer, link)
        logger.info("Created song %s (%s)", song.id, song.display_title)
        return song

    def update_song(self, song_id: int, title: str, composer: str = "", link: str = "") -> Song:
        with _storage_errors("update song"):
            song = queries.update_song(self.conn, song_id, title, composer, link)
        logger.info("Updated song %s", song_id)
        return song

    def delete_song(self, song_id: int) -> None:
        with _storage_errors("delete song"):
            queries.delete_song(self.conn, song_id)
        logger.info("Deleted song %s", song_id)

    def add_song_to_binder(self, binder_id: int, song_id: int) -> None:
        with _storage_errors("link song to binder"):
            queries.add_song_to_binder(self.conn, binder_id, song_id)
        logger.info("Linked song %s to binder %s", song_id, binder_id)

    def remove_song_from_binder(self, binder_id: int, song_id: int) -> None:
        with _storage_errors("unlink song from binder"):
            queries.remove_song_from_binder(self.conn, binder_id, song_id)
        logger.info("Unlinked song %s from binder %s", song_id, binder_id)

    def table_info(self, table: str) -> list[tuple[str, str]]:
        with _storage_errors(f"describe {table}"):
            return queries.get_table_info(self.conn, table)
