from __future__ import annotations

from core.controller import ViewSnapshot
from core.forms import ConfirmDialog, SongFormOverlay, SongPicker
from ui.helpers import fit

INSTRUCTIONS = {
    "grid": "[←↑↓→] Move   [Enter] Open   [s] Song Manager   [q] Quit",
    "binder_songs": (
        "[↑↓] Select   [Enter] Open Link   [f] Search   [l] Toggle No-Link   [+] Add   "
        "[-] Remove   [e] Edit   [Tab] Next Binder   [s] Song Manager   [Esc] Back   [q] Quit"
    ),
    "song_manager": (
        "[↑↓] Select   [Enter] Open Link   [f] Search   [l] Toggle No-Link   [+] Add   "
        "[-] Delete   [e] Edit   [s] Binders   [q] Quit"
    ),
}
SEARCH_INSTRUCTIONS = "[type] Filter   [↑↓] Select   [Enter] Open Link   [Ctrl+L] Toggle No-Link   [Ctrl+E] Edit   [Esc] Close Search"


def instructions_for(snapshot: ViewSnapshot) -> str:
    overlay = snapshot.overlay
    if isinstance(overlay, SongPicker):
        return "[↑↓] Navigate   [Space] Toggle   [Enter] Add Selected   [Esc] Cancel"
    if isinstance(overlay, SongFormOverlay):
        return "[Enter] Save   [Tab] Next Field / Accept   [Shift+Tab] Previous   [Esc] Cancel"
    if isinstance(overlay, ConfirmDialog):
        return "[y] Confirm   [n/Esc] Cancel"
    if snapshot.search_active:
        return SEARCH_INSTRUCTIONS
    return INSTRUCTIONS.get(snapshot.screen, "")


class FooterWidget:
    def __init__(self, term):
        self.term = term

    def render(self, snapshot: ViewSnapshot, y: int) -> str:
        term = self.term
        out = []
        status = snapshot.status
        if status is not None:
            paint = term.red if status.notify_type == "error" else term.green
            out.append(term.move_xy(0, y) + paint(fit(status.message, term.width)))
        out.append(term.move_xy(0, y + 1) + term.cyan(fit(instructions_for(snapshot), term.width)))
        return "".join(out)
