from __future__ import annotations

CURRENT_DB_VERSION = 2

# Binder numbers 1..DEFAULT_BINDER_COUNT are created on first start.
DEFAULT_BINDER_COUNT = 20

SCHEMA_V1_SQL = """
CREATE TABLE binders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    number INTEGER NOT NULL UNIQUE,
    label TEXT NOT NULL
);

CREATE TABLE songs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    composer TEXT,
    link TEXT
);

CREATE TABLE binder_songs (
    binder_id INTEGER NOT NULL,
    song_id INTEGER NOT NULL,
    PRIMARY KEY (binder_id, song_id),
    FOREIGN KEY(binder_id) REFERENCES binders(id) ON DELETE CASCADE,
    FOREIGN KEY(song_id) REFERENCES songs(id) ON DELETE CASCADE
);
"""

SCHEMA_V2_SQL = """
CREATE INDEX idx_songs_title ON songs(title COLLATE NOCASE);
CREATE INDEX idx_binder_songs_song_id ON binder_songs(song_id);
"""
