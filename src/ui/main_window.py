from __future__ import annotations

import logging

from blessed import Terminal

from core.controller import ViewController, ViewSnapshot
from core.forms import ConfirmDialog, SongFormOverlay, SongPicker
from core.state import AppState
from ui.dialogs.confirm_dialog import ConfirmDialogView
from ui.dialogs.song_form_dialog import SongFormDialog
from ui.dialogs.song_picker_dialog import SongPickerDialog
from ui.keymap import translate_key
from ui.widgets.binder_grid import BinderGridWidget
from ui.widgets.footer import FooterWidget
from ui.widgets.search_bar import SearchBarWidget
from ui.widgets.song_list import SongListWidget

logger = logging.getLogger(__name__)

FOOTER_HEIGHT = 2
# inkey timeout; a redraw also picks up terminal resizes
POLL_SECONDS = 0.5


class MainWindow:
    def __init__(self, app_state: AppState, controller: ViewController, term=None):
        self.app_state = app_state
        self.controller = controller
        self.term = term or Terminal()

        self.grid = BinderGridWidget(self.term)
        self.song_list = SongListWidget(self.term)
        self.search_bar = SearchBarWidget(self.term)
        self.footer = FooterWidget(self.term)
        self.song_form = SongFormDialog(self.term)
        self.confirm = ConfirmDialogView(self.term)
        self.picker = SongPickerDialog(self.term)

        self.app_state.notification.connect(self._on_notify)
        self.app_state.screen_changed.connect(self._on_screen_changed)

    def _on_notify(self, n):
        level = logging.WARNING if n.notify_type == "error" else logging.DEBUG
        logger.log(level, "Status: %s", n.message)

    def _on_screen_changed(self, name: str):
        logger.debug("Now showing %s", name)

    # ------------------ loop ------------------
    def run(self) -> None:
        term = self.term
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            while True:
                self.draw(self.controller.snapshot())
                ks = term.inkey(timeout=POLL_SECONDS)
                event = translate_key(ks)
                if event is None:
                    continue
                if self.controller.handle_key(event):
                    logger.info("Exit requested")
                    break

    # ------------------ rendering ------------------
    def render(self, snapshot: ViewSnapshot) -> str:
        term = self.term
        body_height = max(term.height - FOOTER_HEIGHT - 1, 1)
        out = [term.home + term.clear]

        if snapshot.screen == "grid":
            out.append(self.grid.render(snapshot.visible_items, snapshot.selected_index, 0, body_height))
        else:
            out.append(self.song_list.render(snapshot, 0, body_height))
            out.append(self.search_bar.render(snapshot, body_height))

        out.append(self.footer.render(snapshot, term.height - FOOTER_HEIGHT))

        overlay = snapshot.overlay
        if isinstance(overlay, SongFormOverlay):
            text, (cx, cy) = self.song_form.render(overlay)
            out.append(text)
            out.append(term.move_xy(cx, cy) + term.reverse(" "))
        elif isinstance(overlay, ConfirmDialog):
            out.append(self.confirm.render(overlay))
        elif isinstance(overlay, SongPicker):
            out.append(self.picker.render(overlay))
        return "".join(out)

    def draw(self, snapshot: ViewSnapshot) -> None:
        print(self.render(snapshot), end="", flush=True)
