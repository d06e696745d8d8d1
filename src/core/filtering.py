from __future__ import annotations

from typing import Iterable

from db.models import Song


def has_link(song: Song) -> bool:
    return bool(song.link.strip())


def matches_query(song: Song, query: str) -> bool:
    """
    Case-insensitive substring match on title or composer.
    A blank query (empty or only whitespace) matches every song.
    """
    if not query.strip():
        return True
    needle = query.lower()
    return needle in song.title.lower() or needle in song.composer.lower()


def filter_songs(songs: Iterable[Song], query: str = "", link_only_filter: bool = False) -> tuple[Song, ...]:
    """
    Visible subset of `songs`, in input order.

    With `link_only_filter` on, only songs WITHOUT a link are kept.
    """
    return tuple(
        song
        for song in songs
        if matches_query(song, query) and not (link_only_filter and has_link(song))
    )
