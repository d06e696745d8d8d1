from __future__ import annotations

from core.forms import ConfirmDialog, ConfirmKind
from ui.helpers import centered_box, draw_box, fit


class ConfirmDialogView:
    def __init__(self, term):
        self.term = term

    def render(self, dialog: ConfirmDialog) -> str:
        term = self.term
        x, y, w, h = centered_box(term.width, term.height, max(term.width * 6 // 10, 30), 7)
        if dialog.kind is ConfirmKind.REMOVE_FROM_BINDER:
            title, note = "Remove Song", "This will not delete the song from other binders."
        else:
            title, note = "Delete Song", "This will remove the song from all binders."

        inner = w - 4
        lines = (
            term.bold(fit(dialog.prompt, inner)),
            fit(note, inner),
            "",
            term.yellow(fit("Press Y to confirm or N / Esc to cancel.", inner)),
        )
        out = [draw_box(term, x, y, w, h, title, term.red)]
        for row, line in enumerate(lines):
            out.append(term.move_xy(x + 2, y + 1 + row) + line)
        return "".join(out)
