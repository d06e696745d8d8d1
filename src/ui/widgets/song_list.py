from __future__ import annotations

from core.controller import ViewSnapshot
from ui.helpers import fit, scroll_window

SONG_ROW_HEIGHT = 2


def empty_message(snapshot: ViewSnapshot) -> str:
    if snapshot.total_items == 0:
        return "No songs yet. Press '+' to add one."
    has_search = bool(snapshot.query_text.strip())
    if snapshot.link_only_filter and has_search:
        return "No songs match the current search without links."
    if snapshot.link_only_filter:
        return "No songs without links yet."
    if has_search:
        return "No songs match the current search."
    return "No songs to display."


def header_lines(snapshot: ViewSnapshot) -> list[str]:
    if snapshot.binder is not None:
        b = snapshot.binder
        lines = [f"{b.title}  •  {b.label}", f"{snapshot.total_items} songs linked"]
    else:
        lines = ["Song Manager", f"{snapshot.total_items} songs"]
    if snapshot.link_only_filter:
        lines.append("No-link filter active - showing only songs without links (press [l] to show all)")
    return lines


class SongListWidget:
    def __init__(self, term):
        self.term = term

    def render(self, snapshot: ViewSnapshot, top: int, height: int) -> str:
        term = self.term
        width = term.width
        out = []

        header = header_lines(snapshot)
        for i, line in enumerate(header):
            text = fit(line, width)
            if i == 0:
                text = term.bold(text)
            elif snapshot.link_only_filter and i == len(header) - 1:
                text = term.yellow(text)
            out.append(term.move_xy(0, top + i) + text)

        list_top = top + len(header) + 1
        list_height = height - len(header) - 1
        items = snapshot.visible_items
        if not items:
            msg = empty_message(snapshot)
            out.append(term.move_xy(max((width - len(msg)) // 2, 0), list_top + max(list_height // 2, 0)) + msg)
            return "".join(out)

        capacity = max(list_height // SONG_ROW_HEIGHT, 1)
        start, end = scroll_window(snapshot.selected_index, len(items), capacity)
        for row, index in enumerate(range(start, end)):
            song = items[index]
            y = list_top + row * SONG_ROW_HEIGHT
            selected = index == snapshot.selected_index
            marker = "▶ " if selected else "  "
            title = fit(marker + song.title, width)
            detail = fit("    " + (song.composer or "Unknown composer") + ("" if song.link.strip() else "  (no link)"), width)
            if selected:
                title = term.reverse(title)
            out.append(term.move_xy(0, y) + title)
            out.append(term.move_xy(0, y + 1) + term.bright_black(detail))
        return "".join(out)
