from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from core.forms import (
    ConfirmDialog,
    ConfirmKind,
    FormError,
    SongForm,
    SongFormOverlay,
    SongPicker,
)
from core.keys import Key, KeyEvent
from core.navigation import GRID_COLUMNS, clamp, grid_move
from core.screens import BinderSongsScreen, GridScreen, Screen, SongManagerScreen
from core.song_list import SongListView
from core.state import AppState, Notify
from db.errors import StaleReference
from db.models import Binder

logger = logging.getLogger(__name__)

Overlay = Union[SongFormOverlay, ConfirmDialog, SongPicker]

_GRID_OFFSETS = {
    Key.LEFT: -1,
    Key.RIGHT: 1,
    Key.UP: -GRID_COLUMNS,
    Key.DOWN: GRID_COLUMNS,
}


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything the renderer needs for one frame."""

    screen: str
    visible_items: tuple[Any, ...]
    selected_index: int
    search_active: bool = False
    query_text: str = ""
    link_only_filter: bool = False
    binder: Optional[Binder] = None
    total_items: int = 0
    overlay: Optional[Overlay] = None
    status: Optional[Notify] = None


class ViewController:
    """
    Routes key events to the active overlay or screen and keeps the loaded
    snapshots, search sessions and cursors consistent with storage.

    `db` is anything with the Database load/write methods; every screen
    transition loads fresh data from it.
    """

    def __init__(self, app_state: AppState, db, open_link: Callable[[str], bool] = webbrowser.open):
        self.app_state = app_state
        self.db = db
        self.open_link = open_link

        self.binders: tuple[Binder, ...] = ()
        self.binder_index = 0
        self.composers: tuple[str, ...] = ()
        self.screen: Screen = GridScreen()
        self.overlay: Optional[Overlay] = None

        self.open_grid()

    # -------------------------
    # Status
    # -------------------------
    def _info(self, message: str) -> None:
        self.app_state.notify(message, "info")

    def _error(self, message: str) -> None:
        self.app_state.notify(message, "error")

    def _stale(self, e: StaleReference) -> None:
        logger.warning("Discarding action: %s", e)
        self.overlay = None
        self.reload_current_screen()
        self._error(str(e))

    # -------------------------
    # Screen transitions
    # -------------------------
    def _set_screen(self, screen: Screen) -> None:
        self.screen = screen
        self.overlay = None
        self.app_state.clear_status()
        logger.info("Screen -> %s", screen.name)
        self.app_state.screen_changed.emit(screen.name)

    def open_grid(self) -> None:
        self.binders = self.db.load_binders()
        self.binder_index = clamp(self.binder_index, len(self.binders))
        self._set_screen(GridScreen())

    def open_binder(self, binder: Binder) -> None:
        songs = self.db.load_songs(binder.id)
        for i, b in enumerate(self.binders):
            if b.id == binder.id:
                self.binder_index = i
                break
        self._set_screen(BinderSongsScreen(binder=binder, view=SongListView(songs)))

    def open_song_manager(self) -> None:
        self._set_screen(SongManagerScreen(view=SongListView(self.db.load_all_songs())))

    def open_relative_binder(self, offset: int) -> None:
        if not isinstance(self.screen, BinderSongsScreen) or not self.binders:
            return
        current = self.screen.binder.id
        pos = next((i for i, b in enumerate(self.binders) if b.id == current), self.binder_index)
        self.open_binder(self.binders[(pos + offset) % len(self.binders)])

    def reload_current_screen(self) -> None:
        """Reload the active screen's data in place; search and cursor survive (clamped)."""
        screen = self.screen
        if isinstance(screen, GridScreen):
            self.binders = self.db.load_binders()
            self.binder_index = clamp(self.binder_index, len(self.binders))
        elif isinstance(screen, BinderSongsScreen):
            self.binders = self.db.load_binders()
            if not any(b.id == screen.binder.id for b in self.binders):
                self.open_grid()
                return
            screen.view.set_songs(self.db.load_songs(screen.binder.id))
        elif isinstance(screen, SongManagerScreen):
            screen.view.set_songs(self.db.load_all_songs())

    def current_view(self) -> Optional[SongListView]:
        if isinstance(self.screen, (BinderSongsScreen, SongManagerScreen)):
            return self.screen.view
        return None

    # -------------------------
    # Key routing
    # -------------------------
    def handle_key(self, event: KeyEvent) -> bool:
        """Process one key event. Returns True when the user asked to exit."""
        try:
            if self.overlay is not None:
                self._handle_overlay(event)
                return False

            screen = self.screen
            if isinstance(screen, GridScreen):
                return self._handle_grid(event)
            if isinstance(screen, BinderSongsScreen):
                return self._handle_binder_songs(event, screen)
            if isinstance(screen, SongManagerScreen):
                return self._handle_song_manager(event, screen)
        except StaleReference as e:
            self._stale(e)
        return False

    def _handle_grid(self, event: KeyEvent) -> bool:
        if event.is_char("q") or event.key is Key.ESCAPE:
            return True
        if event.key in _GRID_OFFSETS:
            self.binder_index = grid_move(self.binder_index, _GRID_OFFSETS[event.key], len(self.binders))
        elif event.key is Key.ENTER:
            if not self.binders:
                self._error("No binder selected.")
            else:
                self.open_binder(self.binders[clamp(self.binder_index, len(self.binders))])
        elif event.is_char("s", "S"):
            self.open_song_manager()
        return False

    def _handle_search(self, event: KeyEvent, view: SongListView) -> None:
        if event.key is Key.ESCAPE:
            view.close_search()
        elif event.key is Key.ENTER:
            self._open_selected_link(view)
        elif event.is_ctrl("e"):
            # The search session stays open under the form.
            self._edit_selected(view)
        elif event.is_ctrl("l"):
            self._toggle_link_filter(view)
        elif event.key is Key.BACKSPACE:
            view.delete_char()
        elif self._navigate(event, view):
            pass
        elif event.printable:
            view.type_text(event.char)

    def _handle_list_common(self, event: KeyEvent, view: SongListView) -> bool:
        """Keys shared by both song-list screens. Returns True when consumed."""
        if event.is_char("f"):
            view.open_search()
        elif event.is_char("l") or event.is_ctrl("l"):
            self._toggle_link_filter(view)
        elif event.key is Key.ENTER:
            self._open_selected_link(view)
        elif event.is_char("e"):
            self._edit_selected(view)
        elif self._navigate(event, view):
            pass
        else:
            return False
        return True

    def _handle_binder_songs(self, event: KeyEvent, screen: BinderSongsScreen) -> bool:
        view = screen.view
        if view.search.active:
            self._handle_search(event, view)
            return False
        if event.is_char("q"):
            return True
        if self._handle_list_common(event, view):
            return False

        if event.key is Key.ESCAPE:
            self.open_grid()
        elif event.is_char("s", "S"):
            self.open_song_manager()
        elif event.key is Key.TAB:
            self.open_relative_binder(1)
        elif event.key is Key.BACKTAB:
            self.open_relative_binder(-1)
        elif event.is_char("+"):
            self._start_add_to_binder(screen.binder)
        elif event.is_char("-"):
            song = view.current_song()
            if song is None:
                self._error("No song selected to remove.")
            else:
                self.overlay = ConfirmDialog(ConfirmKind.REMOVE_FROM_BINDER, song, screen.binder.id)
        return False

    def _handle_song_manager(self, event: KeyEvent, screen: SongManagerScreen) -> bool:
        view = screen.view
        if view.search.active:
            self._handle_search(event, view)
            return False
        if event.is_char("q"):
            return True
        if self._handle_list_common(event, view):
            return False

        if event.key is Key.ESCAPE or event.is_char("s", "S"):
            self.open_grid()
        elif event.is_char("+"):
            self._open_form(SongFormOverlay())
        elif event.is_char("-"):
            song = view.current_song()
            if song is None:
                self._error("No song selected to delete.")
            else:
                self.overlay = ConfirmDialog(ConfirmKind.DELETE_SONG, song)
        return False

    @staticmethod
    def _navigate(event: KeyEvent, view: SongListView) -> bool:
        if event.key is Key.UP:
            view.move_selection(-1)
        elif event.key is Key.DOWN:
            view.move_selection(1)
        elif event.key is Key.PAGE_UP:
            view.page_up()
        elif event.key is Key.PAGE_DOWN:
            view.page_down()
        elif event.key is Key.HOME:
            view.select_first()
        elif event.key is Key.END:
            view.select_last()
        else:
            return False
        return True

    # -------------------------
    # Song-list actions
    # -------------------------
    def _toggle_link_filter(self, view: SongListView) -> None:
        if view.toggle_link_filter():
            self._info("Showing songs without links.")
        else:
            self._info("Showing all songs.")

    def _open_selected_link(self, view: SongListView) -> None:
        song = view.current_song()
        if song is None:
            self._error("No song selected.")
            return
        link = song.link.strip()
        if not link:
            self._error("This song does not have a link.")
            return
        try:
            opened = self.open_link(link)
        except (webbrowser.Error, OSError) as e:
            logger.warning("Failed to open %s: %s", link, e)
            self._error(f"Failed to open link: {e}")
            return
        if opened is False:
            self._error("Failed to open link: no browser available")
            return
        self._info(f"Opened {song.display_title}.")

    def _edit_selected(self, view: SongListView) -> None:
        song = view.current_song()
        if song is None:
            self._error("No song selected to edit.")
            return
        self._open_form(SongFormOverlay(form=SongForm.from_song(song), song_id=song.id))

    def _open_form(self, overlay: SongFormOverlay) -> None:
        self.composers = self.db.load_composers()
        self.overlay = overlay

    def _start_add_to_binder(self, binder: Binder) -> None:
        available = self.db.load_available_songs(binder.id)
        if not available:
            self._open_form(SongFormOverlay(binder_id=binder.id))
        else:
            self.overlay = SongPicker.with_songs(binder.id, available)

    # -------------------------
    # Overlays
    # -------------------------
    def _handle_overlay(self, event: KeyEvent) -> None:
        overlay = self.overlay
        if isinstance(overlay, SongFormOverlay):
            self._handle_form(event, overlay)
        elif isinstance(overlay, ConfirmDialog):
            self._handle_confirm(event, overlay)
        elif isinstance(overlay, SongPicker):
            self._handle_picker(event, overlay)

    def _handle_form(self, event: KeyEvent, overlay: SongFormOverlay) -> None:
        form = overlay.form
        if event.key is Key.ESCAPE:
            if form.cancel_autocomplete():
                return
            self.overlay = None
            self._info("Song creation cancelled." if overlay.creating else "Edit cancelled.")
            return

        if event.key is Key.ENTER:
            self._submit_form(overlay)
            return

        if event.key is Key.TAB:
            if not (form.has_active_suggestion() and form.accept_suggestion()):
                form.next_field()
        elif event.key in (Key.BACKTAB, Key.UP):
            form.previous_field()
        elif event.key is Key.DOWN:
            form.next_field()
        elif event.key is Key.BACKSPACE:
            form.backspace()
        elif event.printable:
            form.push_char(event.char)
        else:
            return
        form.update_suggestion(self.composers)

    def _submit_form(self, overlay: SongFormOverlay) -> None:
        form = overlay.form
        try:
            title, composer, link = form.parse_inputs()
        except FormError as e:
            form.error = str(e)
            return

        if overlay.creating:
            song = self.db.create_song(title, composer, link)
            if overlay.binder_id is not None:
                self.db.add_song_to_binder(overlay.binder_id, song.id)
                message = "Song created and added."
            else:
                message = "Song created."
        else:
            self.db.update_song(overlay.song_id, title, composer, link)
            message = "Song updated."

        self.overlay = None
        self.reload_current_screen()
        self._info(message)

    def _handle_confirm(self, event: KeyEvent, dialog: ConfirmDialog) -> None:
        removing = dialog.kind is ConfirmKind.REMOVE_FROM_BINDER
        if event.is_char("y", "Y") or event.key is Key.ENTER:
            if removing:
                self.db.remove_song_from_binder(dialog.binder_id, dialog.song.id)
                message = "Song removed from binder."
            else:
                self.db.delete_song(dialog.song.id)
                message = "Song deleted."
            self.overlay = None
            self.reload_current_screen()
            self._info(message)
        elif event.is_char("n", "N") or event.key is Key.ESCAPE:
            self.overlay = None
            self._info("Removal cancelled." if removing else "Deletion cancelled.")

    def _handle_picker(self, event: KeyEvent, picker: SongPicker) -> None:
        if event.key is Key.ESCAPE:
            self.overlay = None
        elif event.key is Key.UP:
            picker.move_selection(-1)
        elif event.key is Key.DOWN:
            picker.move_selection(1)
        elif event.key is Key.PAGE_UP:
            picker.page_up()
        elif event.key is Key.PAGE_DOWN:
            picker.page_down()
        elif event.key is Key.HOME:
            picker.select_first()
        elif event.key is Key.END:
            picker.select_last()
        elif event.is_char(" "):
            picker.toggle_current()
        elif event.key is Key.ENTER:
            self._submit_picker(picker)

    def _submit_picker(self, picker: SongPicker) -> None:
        chosen = picker.checked_songs()
        if not chosen:
            current = picker.current_item()
            if current is None:
                self._open_form(SongFormOverlay(binder_id=picker.binder_id))
                return
            chosen = [current]

        added = 0
        try:
            for song in chosen:
                self.db.add_song_to_binder(picker.binder_id, song.id)
                added += 1
        finally:
            if added:
                self.overlay = None
                self.reload_current_screen()

        self._info("Song added to binder." if added == 1 else f"Added {added} songs to binder.")

    # -------------------------
    # Rendering
    # -------------------------
    def snapshot(self) -> ViewSnapshot:
        status = self.app_state.status
        screen = self.screen
        if isinstance(screen, GridScreen):
            return ViewSnapshot(
                screen=screen.name,
                visible_items=self.binders,
                selected_index=clamp(self.binder_index, len(self.binders)),
                total_items=len(self.binders),
                overlay=self.overlay,
                status=status,
            )

        view = screen.view
        return ViewSnapshot(
            screen=screen.name,
            visible_items=view.visible,
            selected_index=view.selected,
            search_active=view.search.active,
            query_text=view.search.query,
            link_only_filter=view.search.link_only_filter,
            binder=screen.binder if isinstance(screen, BinderSongsScreen) else None,
            total_items=len(view.songs),
            overlay=self.overlay,
            status=status,
        )
