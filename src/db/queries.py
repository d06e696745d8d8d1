from __future__ import annotations

import sqlite3
from typing import List

from db.errors import StaleReference
from db.models import Binder, Song

# -------------------------------
# BINDERS
# -------------------------------
def get_binders(db: sqlite3.Connection) -> List[Binder]:
    rows = db.execute("SELECT id, number, label FROM binders ORDER BY number").fetchall()
    return [Binder.from_row(row) for row in rows]


def get_binder_by_id(db: sqlite3.Connection, binder_id: int) -> Binder:
    row = db.execute(
        "SELECT id, number, label FROM binders WHERE id = ? LIMIT 1",
        (int(binder_id),),
    ).fetchone()
    if not row:
        raise StaleReference("binder", binder_id)
    return Binder.from_row(row)


# -------------------------------
# SONGS
# -------------------------------
def get_all_songs(db: sqlite3.Connection) -> List[Song]:
    rows = db.execute("""
        SELECT id, title, composer, link
        FROM songs
        ORDER BY title COLLATE NOCASE, composer COLLATE NOCASE
    """).fetchall()
    return [Song.from_row(row) for row in rows]


def get_binder_songs(db: sqlite3.Connection, binder_id: int) -> List[Song]:
    rows = db.execute("""
        SELECT s.id, s.title, s.composer, s.link
        FROM songs s
        INNER JOIN binder_songs bs ON bs.song_id = s.id
        WHERE bs.binder_id = ?
        ORDER BY s.title COLLATE NOCASE, s.composer COLLATE NOCASE
    """, (int(binder_id),)).fetchall()
    return [Song.from_row(row) for row in rows]


def get_available_songs(db: sqlite3.Connection, binder_id: int) -> List[Song]:
    """Songs that are not linked to the given binder yet."""
    rows = db.execute("""
        SELECT s.id, s.title, s.composer, s.link
        FROM songs s
        WHERE NOT EXISTS (
            SELECT 1 FROM binder_songs bs WHERE bs.song_id = s.id AND bs.binder_id = ?
        )
        ORDER BY s.title COLLATE NOCASE, s.composer COLLATE NOCASE
    """, (int(binder_id),)).fetchall()
    return [Song.from_row(row) for row in rows]


def get_song_by_id(db: sqlite3.Connection, song_id: int) -> Song:
    row = db.execute(
        "SELECT id, title, composer, link FROM songs WHERE id = ? LIMIT 1",
        (int(song_id),),
    ).fetchone()
    if not row:
        raise StaleReference("song", song_id)
    return Song.from_row(row)


def get_composers(db: sqlite3.Connection) -> List[str]:
    rows = db.execute("""
        SELECT DISTINCT composer FROM songs
        WHERE composer IS NOT NULL AND composer <> ''
        ORDER BY LOWER(composer), composer
    """).fetchall()
    return [row["composer"] for row in rows]


def add_song(db: sqlite3.Connection, title: str, composer: str, link: str) -> Song:
    cursor = db.execute(
        "INSERT INTO songs (title, composer, link) VALUES (?, ?, ?)",
        (title, composer, link),
    )
    db.commit()
    return Song(id=int(cursor.lastrowid), title=title, composer=composer, link=link)


def update_song(db: sqlite3.Connection, song_id: int, title: str, composer: str, link: str) -> Song:
    cursor = db.execute("""
        UPDATE songs
        SET title = ?, composer = ?, link = ?
        WHERE id = ?
    """, (title, composer, link, int(song_id)))
    db.commit()
    if cursor.rowcount == 0:
        raise StaleReference("song", song_id)
    return get_song_by_id(db, song_id)


def delete_song(db: sqlite3.Connection, song_id: int) -> None:
    # binder_songs rows go with it (ON DELETE CASCADE).
    cursor = db.execute("DELETE FROM songs WHERE id = ?", (int(song_id),))
    db.commit()
    if cursor.rowcount == 0:
        raise StaleReference("song", song_id)


# -------------------------------
# BINDER <-> SONG LINKS
# -------------------------------
def add_song_to_binder(db: sqlite3.Connection, binder_id: int, song_id: int) -> None:
    get_binder_by_id(db, binder_id)
    get_song_by_id(db, song_id)
    db.execute(
        "INSERT OR IGNORE INTO binder_songs (binder_id, song_id) VALUES (?, ?)",
        (int(binder_id), int(song_id)),
    )
    db.commit()


def remove_song_from_binder(db: sqlite3.Connection, binder_id: int, song_id: int) -> None:
    cursor = db.execute(
        "DELETE FROM binder_songs WHERE binder_id = ? AND song_id = ?",
        (int(binder_id), int(song_id)),
    )
    db.commit()
    if cursor.rowcount == 0:
        raise StaleReference("binder song", (binder_id, song_id))


# -------------------------------
# DEBUG
# -------------------------------
def get_table_info(db: sqlite3.Connection, table: str) -> list[tuple[str, str]]:
    cur = db.execute(f"PRAGMA table_info({table})")
    return [(name, col_type) for _cid, name, col_type, _notnull, _default, _pk in cur.fetchall()]
