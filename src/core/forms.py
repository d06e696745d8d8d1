from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from core.navigation import PAGE_STEP, clamp, last_index, move
from db.models import Song

# Composer suggestions start after this many typed characters.
MIN_SUGGESTION_CHARS = 2


class FormError(ValueError):
    pass


class SongField(Enum):
    TITLE = "Title"
    COMPOSER = "Composer"
    LINK = "Link"


_FIELD_ORDER = (SongField.TITLE, SongField.COMPOSER, SongField.LINK)


@dataclass
class SongForm:
    title: str = ""
    composer: str = ""
    link: str = ""
    active: SongField = SongField.TITLE
    error: Optional[str] = None
    suggestion: Optional[str] = None
    autocomplete_disabled: bool = False

    @staticmethod
    def from_song(song: Song) -> "SongForm":
        return SongForm(title=song.title, composer=song.composer, link=song.link)

    def value(self, song_field: SongField) -> str:
        return {
            SongField.TITLE: self.title,
            SongField.COMPOSER: self.composer,
            SongField.LINK: self.link,
        }[song_field]

    def next_field(self) -> None:
        self._focus(1)

    def previous_field(self) -> None:
        self._focus(-1)

    def _focus(self, step: int) -> None:
        pos = _FIELD_ORDER.index(self.active)
        self.active = _FIELD_ORDER[(pos + step) % len(_FIELD_ORDER)]
        if self.active is not SongField.COMPOSER:
            self.suggestion = None

    def push_char(self, ch: str) -> bool:
        if not ch.isprintable():
            return False
        if self.active is SongField.TITLE:
            self.title += ch
        elif self.active is SongField.COMPOSER:
            self.autocomplete_disabled = False
            self.composer += ch
        else:
            self.link += ch
        self.error = None
        return True

    def backspace(self) -> None:
        if self.active is SongField.TITLE:
            self.title = self.title[:-1]
        elif self.active is SongField.COMPOSER:
            self.composer = self.composer[:-1]
            self.autocomplete_disabled = False
        else:
            self.link = self.link[:-1]

    def parse_inputs(self) -> tuple[str, str, str]:
        title = self.title.strip()
        if not title:
            raise FormError("Song title is required.")
        return title, self.composer.strip(), self.link.strip()

    # -------------------------
    # Composer autocomplete
    # -------------------------
    def update_suggestion(self, composers: Iterable[str]) -> None:
        if (
            self.active is not SongField.COMPOSER
            or self.autocomplete_disabled
            or len(self.composer) < MIN_SUGGESTION_CHARS
        ):
            self.suggestion = None
            return

        typed = self.composer.lower()
        match = next((c for c in composers if c.lower().startswith(typed)), None)
        if match is None or match.lower() == typed:
            self.suggestion = None
        else:
            self.suggestion = match

    def suggestion_suffix(self) -> Optional[str]:
        if not self.suggestion:
            return None
        suffix = self.suggestion[len(self.composer):]
        return suffix or None

    def has_active_suggestion(self) -> bool:
        return self.active is SongField.COMPOSER and self.suggestion is not None

    def accept_suggestion(self) -> bool:
        if self.suggestion_suffix() is None:
            return False
        self.composer = self.suggestion
        self.suggestion = None
        self.autocomplete_disabled = True
        return True

    def cancel_autocomplete(self) -> bool:
        if not self.has_active_suggestion():
            return False
        self.suggestion = None
        self.autocomplete_disabled = True
        return True


@dataclass
class SongFormOverlay:
    """Create (song_id is None) or edit a song; binder_id links a created song."""

    form: SongForm = field(default_factory=SongForm)
    song_id: Optional[int] = None
    binder_id: Optional[int] = None

    @property
    def creating(self) -> bool:
        return self.song_id is None

    @property
    def heading(self) -> str:
        return "Create Song" if self.creating else "Edit Song"


class ConfirmKind(Enum):
    REMOVE_FROM_BINDER = "remove"
    DELETE_SONG = "delete"


@dataclass
class ConfirmDialog:
    kind: ConfirmKind
    song: Song
    binder_id: Optional[int] = None

    @property
    def prompt(self) -> str:
        if self.kind is ConfirmKind.REMOVE_FROM_BINDER:
            return f"Remove '{self.song.display_title}' from this binder?"
        return f"Delete '{self.song.display_title}' from every binder?"


@dataclass
class SongPicker:
    """
    Song chooser for adding to a binder. Row 0 is "Create a new song"
    (stored as None); the rest are songs not yet in the binder.
    """

    binder_id: int
    items: list[Optional[Song]] = field(default_factory=lambda: [None])
    selected: int = 0
    checked: set[int] = field(default_factory=set)

    @classmethod
    def with_songs(cls, binder_id: int, songs: Iterable[Song]) -> "SongPicker":
        return cls(binder_id=binder_id, items=[None, *songs])

    def move_selection(self, delta: int) -> None:
        self.selected = move(self.selected, delta, len(self.items))

    def page_up(self) -> None:
        self.move_selection(-PAGE_STEP)

    def page_down(self) -> None:
        self.move_selection(PAGE_STEP)

    def select_first(self) -> None:
        self.selected = 0

    def select_last(self) -> None:
        self.selected = last_index(len(self.items))

    def current_item(self) -> Optional[Song]:
        if not self.items:
            return None
        return self.items[clamp(self.selected, len(self.items))]

    def is_checked(self, index: int) -> bool:
        item = self.items[index] if 0 <= index < len(self.items) else None
        return item is not None and item.id in self.checked

    def toggle_current(self) -> None:
        song = self.current_item()
        if song is None:
            return
        if song.id in self.checked:
            self.checked.discard(song.id)
        else:
            self.checked.add(song.id)

    def checked_songs(self) -> list[Song]:
        return [item for item in self.items if item is not None and item.id in self.checked]
