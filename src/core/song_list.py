from __future__ import annotations

from typing import Iterable, Optional

from core.filtering import filter_songs
from core.navigation import PAGE_STEP, clamp, last_index, move
from core.search import SearchSession
from db.models import Song


class SongListView:
    """
    A song list screen's data: the loaded songs, the search session over them
    and the cursor into the filtered result.

    `visible` is recomputed from (songs, query, link filter) after every
    mutation, and the cursor is clamped right after, so `selected` is always a
    valid index into `visible` (or 0 when nothing is visible).
    """

    def __init__(self, songs: Iterable[Song] = ()):
        self.search = SearchSession()
        self.selected = 0
        self._songs: tuple[Song, ...] = tuple(songs)
        self._visible: tuple[Song, ...] = ()
        self._refresh()

    @property
    def songs(self) -> tuple[Song, ...]:
        return self._songs

    @property
    def visible(self) -> tuple[Song, ...]:
        return self._visible

    def _refresh(self) -> None:
        self._visible = filter_songs(self._songs, self.search.query, self.search.link_only_filter)
        self.selected = clamp(self.selected, len(self._visible))

    # -------------------------
    # Data
    # -------------------------
    def set_songs(self, songs: Iterable[Song]) -> None:
        self._songs = tuple(songs)
        self._refresh()

    def current_song(self) -> Optional[Song]:
        if not self._visible:
            return None
        return self._visible[self.selected]

    # -------------------------
    # Search
    # -------------------------
    def open_search(self) -> None:
        self.search.activate()
        self._refresh()

    def close_search(self) -> None:
        self.search.deactivate()
        self._refresh()

    def type_text(self, text: str) -> None:
        self.search.append(text)
        self._refresh()

    def delete_char(self) -> None:
        self.search.backspace()
        self._refresh()

    def toggle_link_filter(self) -> bool:
        active = self.search.toggle_link_filter()
        self._refresh()
        return active

    # -------------------------
    # Cursor
    # -------------------------
    def move_selection(self, delta: int) -> None:
        self.selected = move(self.selected, delta, len(self._visible))

    def page_up(self) -> None:
        self.move_selection(-PAGE_STEP)

    def page_down(self) -> None:
        self.move_selection(PAGE_STEP)

    def select_first(self) -> None:
        self.selected = 0

    def select_last(self) -> None:
        self.selected = last_index(len(self._visible))
