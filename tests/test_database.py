import sqlite3

import pytest

from core.config import AppConfig
import db.migrations as migrations
from db.database import Database
from db.errors import StaleReference, StorageError
from db.schema import CURRENT_DB_VERSION


def test_binders_are_seeded(db):
    binders = db.load_binders()
    assert [b.number for b in binders] == [1, 2, 3, 4, 5, 6]
    assert binders[0].label == "Binder 01"
    assert binders[0].title == "Binder 01"


def test_reopen_keeps_existing_data(config, db):
    db.create_song("Ave Maria", "Bach")
    db.close()

    with Database.open(config) as again:
        assert len(again.load_binders()) == 6
        assert [s.title for s in again.load_all_songs()] == ["Ave Maria"]
        version = again.conn.execute("PRAGMA user_version").fetchone()[0]
        assert version == CURRENT_DB_VERSION


def test_songs_sorted_case_insensitively(db):
    db.create_song("amazing Grace")
    db.create_song("Ave Maria", "Bach")
    db.create_song("Ubi Caritas", "Duruflé")
    assert [s.title for s in db.load_all_songs()] == ["amazing Grace", "Ave Maria", "Ubi Caritas"]


def test_null_columns_become_empty_strings(db):
    db.conn.execute("INSERT INTO songs (title, composer, link) VALUES ('Kyrie', NULL, NULL)")
    db.conn.commit()
    song = db.load_all_songs()[0]
    assert (song.composer, song.link) == ("", "")
    assert song.display_title == "Kyrie"


def test_binder_links(db):
    binder = db.load_binders()[0]
    ave = db.create_song("Ave Maria", "Bach")
    grace = db.create_song("Amazing Grace")

    db.add_song_to_binder(binder.id, ave.id)
    db.add_song_to_binder(binder.id, ave.id)
    assert db.load_songs(binder.id) == (ave,)
    assert db.load_available_songs(binder.id) == (grace,)

    db.remove_song_from_binder(binder.id, ave.id)
    assert db.load_songs(binder.id) == ()


def test_delete_song_cascades_to_binders(db):
    binder = db.load_binders()[2]
    song = db.create_song("Locus Iste", "Bruckner")
    db.add_song_to_binder(binder.id, song.id)

    db.delete_song(song.id)
    assert db.load_songs(binder.id) == ()
    assert db.load_all_songs() == ()


def test_update_song(db):
    song = db.create_song("Ave Maria")
    updated = db.update_song(song.id, "Ave Maria", "Biebl", "https://example.com")
    assert updated.composer == "Biebl"
    assert db.load_all_songs() == (updated,)


def test_stale_references(db):
    binder = db.load_binders()[0]
    with pytest.raises(StaleReference) as exc:
        db.update_song(999, "Gone", "", "")
    assert exc.value.entity == "song"
    assert exc.value.entity_id == 999
    assert str(exc.value) == "Song not found: 999"

    with pytest.raises(StaleReference):
        db.delete_song(999)
    with pytest.raises(StaleReference):
        db.add_song_to_binder(binder.id, 999)
    with pytest.raises(StaleReference):
        db.add_song_to_binder(999, 1)
    with pytest.raises(StaleReference):
        db.remove_song_from_binder(binder.id, 999)


def test_composers_are_distinct_and_sorted(db):
    db.create_song("A", "bach")
    db.create_song("B", "Bach")
    db.create_song("C", "Arvo Pärt")
    db.create_song("D", "")
    db.create_song("E", "Bach")
    assert db.load_composers() == ("Arvo Pärt", "Bach", "bach")


def test_sqlite_errors_become_storage_errors(db):
    db.conn.close()
    with pytest.raises(StorageError):
        db.load_binders()


def test_table_info(db):
    columns = dict(db.table_info("songs"))
    assert set(columns) == {"id", "title", "composer", "link"}


def test_unusable_data_dir_is_a_storage_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    config = AppConfig(data_dir=str(blocker / "sub"))
    with pytest.raises(StorageError):
        Database.open(config)


def test_failed_migration_closes_connection(config, monkeypatch):
    opened = []
    real_connect = migrations.sqlite3.connect

    def connect(path):
        conn = real_connect(path)
        opened.append(conn)
        return conn

    def broken_seed(db, count):
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(migrations.sqlite3, "connect", connect)
    monkeypatch.setattr(migrations, "seed_binders_if_empty", broken_seed)

    with pytest.raises(StorageError, match="disk I/O error"):
        Database.open(config)
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")
