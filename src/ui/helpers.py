from __future__ import annotations

# Cover motifs for the binder cards, picked by grid position.
BINDER_ART = (
    ("/\\/\\/", "\\/\\/\\"),
    ("*+*+", "+*+*"),
    ("=--=", "--=="),
    ("<>><", "><<>"),
    ("..--", "--.."),
    ("oOo ", " OoO"),
    ("##  ", "  ##"),
    ("||--", "--||"),
    ("[]__", "__[]"),
    ("~~  ", "  ~~"),
    ("^v^v", "v^v^"),
    ("&&..", "..&&"),
    ("::''", "''::"),
    ("+-+-", "-+-+"),
    ("ooOO", "OOoo"),
    ("[]<>", "<>[]"),
    ("/--/", "--//"),
    ("=__=", "__=="),
    ("|..|", ".||."),
    ("x  x", "  xx"),
)


def repeat_pattern_row(row: str, width: int) -> str:
    if width <= 0:
        return ""
    if not row:
        return " " * width
    return (row * (width // len(row) + 2))[:width]


def binder_label_line(label: str, width: int) -> str:
    """`[ label ]` centred in `width` columns."""
    if width <= 0:
        return ""
    label = label.strip()
    if not label:
        return " " * width
    decorated = f"[ {label} ]"[:width]
    return decorated.center(width)


def fit(text: str, width: int) -> str:
    """Truncate with an ellipsis, then pad to exactly `width` columns."""
    if width <= 0:
        return ""
    if len(text) > width:
        text = text[: max(width - 1, 0)] + "…" if width > 1 else text[:width]
    return text.ljust(width)


def scroll_window(selected: int, total: int, capacity: int) -> tuple[int, int]:
    """[start, end) slice of `total` rows that keeps `selected` on screen."""
    capacity = max(capacity, 1)
    start = selected + 1 - capacity if selected >= capacity else 0
    start = max(min(start, total - capacity), 0)
    return start, min(start + capacity, total)


def centered_box(width: int, height: int, box_width: int, box_height: int) -> tuple[int, int, int, int]:
    box_width = min(box_width, width)
    box_height = min(box_height, height)
    return (width - box_width) // 2, (height - box_height) // 2, box_width, box_height


def draw_box(term, x: int, y: int, width: int, height: int, title: str = "", style=None) -> str:
    """Box-drawing frame as one blessed output string."""
    if width < 2 or height < 2:
        return ""
    style = style or (lambda s: s)
    inner = width - 2
    top = f" {title} "[:inner].ljust(inner, "─") if title else "─" * inner
    out = [term.move_xy(x, y) + style("┌" + top + "┐")]
    for row in range(1, height - 1):
        out.append(term.move_xy(x, y + row) + style("│") + " " * (width - 2) + style("│"))
    out.append(term.move_xy(x, y + height - 1) + style("└" + "─" * (width - 2) + "┘"))
    return "".join(out)
