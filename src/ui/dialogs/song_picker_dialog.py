from __future__ import annotations

from core.forms import SongPicker
from ui.helpers import centered_box, draw_box, fit, scroll_window

CREATE_NEW_LABEL = "Create a new song"


class SongPickerDialog:
    def __init__(self, term):
        self.term = term

    def render(self, picker: SongPicker) -> str:
        term = self.term
        x, y, w, h = centered_box(term.width, term.height, max(term.width * 7 // 10, 30), max(term.height * 7 // 10, 6))
        out = [draw_box(term, x, y, w, h, "Add Songs to Binder")]

        inner_w = w - 4
        capacity = max(h - 2, 1)
        start, end = scroll_window(picker.selected, len(picker.items), capacity)
        for row, index in enumerate(range(start, end)):
            item = picker.items[index]
            if item is None:
                text = f"  + {CREATE_NEW_LABEL}"
            else:
                box = "[x]" if picker.is_checked(index) else "[ ]"
                text = f"{box} {item.display_title}"
            text = fit(text, inner_w)
            if index == picker.selected:
                text = term.reverse(text)
            out.append(term.move_xy(x + 2, y + 1 + row) + text)
        return "".join(out)
