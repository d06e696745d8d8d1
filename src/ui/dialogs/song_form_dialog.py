from __future__ import annotations

from core.forms import SongField, SongFormOverlay
from ui.helpers import centered_box, draw_box, fit

_LABELS = (
    (SongField.TITLE, "Title: "),
    (SongField.COMPOSER, "Composer: "),
    (SongField.LINK, "Link: "),
)


class SongFormDialog:
    """Create/edit popup. Returns the cursor position along with the output."""

    def __init__(self, term):
        self.term = term

    def render(self, overlay: SongFormOverlay) -> tuple[str, tuple[int, int]]:
        term = self.term
        form = overlay.form
        x, y, w, h = centered_box(term.width, term.height, max(term.width * 7 // 10, 30), 9)
        out = [draw_box(term, x, y, w, h, overlay.heading)]
        inner = w - 4
        cursor = (x + 2, y + 1)

        for row, (song_field, label) in enumerate(_LABELS):
            value = form.value(song_field)
            active = form.active is song_field
            line_y = y + 1 + row
            text = label + value
            out.append(term.move_xy(x + 2, line_y) + (term.bold(fit(text, inner)) if active else fit(text, inner)))
            if active:
                cursor = (min(x + 2 + len(text), x + w - 2), line_y)
                if song_field is SongField.COMPOSER:
                    suffix = form.suggestion_suffix()
                    if suffix and len(text) < inner:
                        out.append(term.move_xy(cursor[0], line_y) + term.bright_black(suffix[: inner - len(text)]))

        if form.error:
            out.append(term.move_xy(x + 2, y + 5) + term.red(fit(form.error, inner)))
        else:
            hint = "Enter to save • Tab to switch • Esc to cancel"
            out.append(term.move_xy(x + 2, y + 5) + term.bright_black(fit(hint, inner)))
        return "".join(out), cursor
