from __future__ import annotations

from core.controller import ViewSnapshot
from ui.helpers import fit


class SearchBarWidget:
    """One-line search prompt drawn above the footer while a search is open."""

    def __init__(self, term):
        self.term = term

    def render(self, snapshot: ViewSnapshot, y: int) -> str:
        term = self.term
        if not snapshot.search_active:
            return ""
        toggle = "  [no-link only]" if snapshot.link_only_filter else ""
        hint = "  (Esc close • Ctrl+L toggle • Ctrl+E edit)"
        line = fit(f"Search: {snapshot.query_text}{toggle}{hint}", term.width)
        return term.move_xy(0, y) + term.cyan(line)
