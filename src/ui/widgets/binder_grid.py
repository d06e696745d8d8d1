from __future__ import annotations

from core.navigation import GRID_COLUMNS, grid_rows
from ui.helpers import BINDER_ART, binder_label_line, draw_box, repeat_pattern_row


class BinderGridWidget:
    """Binder covers on a fixed four-column grid; the selected card is highlighted."""

    def __init__(self, term):
        self.term = term

    def render(self, binders, selected: int, top: int, height: int) -> str:
        term = self.term
        if not binders:
            msg = "No binders yet."
            return term.move_xy(max((term.width - len(msg)) // 2, 0), top + height // 2) + msg

        rows = grid_rows(len(binders))
        card_w = max(term.width // GRID_COLUMNS, 6)
        card_h = max(min(height // max(rows, 1), 8), 3)

        # Keep the selected row visible when the grid is taller than the screen.
        visible_rows = max(height // card_h, 1)
        sel_row = selected // GRID_COLUMNS
        first_row = max(sel_row - visible_rows + 1, 0)

        out = []
        for i, binder in enumerate(binders):
            row, col = divmod(i, GRID_COLUMNS)
            if row < first_row or row >= first_row + visible_rows:
                continue
            x = col * card_w
            y = top + (row - first_row) * card_h
            out.append(self._card(binder, i, i == selected, x, y, card_w, card_h))
        return "".join(out)

    def _card(self, binder, index: int, selected: bool, x: int, y: int, w: int, h: int) -> str:
        term = self.term
        style = term.yellow if selected else None
        out = [draw_box(term, x, y, w, h, binder.title, style)]

        inner_w, inner_h = w - 2, h - 2
        if inner_w <= 0 or inner_h <= 0:
            return "".join(out)

        pattern = BINDER_ART[index % len(BINDER_ART)]
        pattern_style = term.white if selected else term.bright_black
        label_lines = 2 if inner_h >= 2 else 1
        for r in range(inner_h - label_lines):
            row = repeat_pattern_row(pattern[r % len(pattern)], inner_w)
            out.append(term.move_xy(x + 1, y + 1 + r) + pattern_style(row))

        label = binder_label_line(binder.label, inner_w)
        out.append(term.move_xy(x + 1, y + inner_h) + (term.bold(label) if selected else label))
        return "".join(out)
