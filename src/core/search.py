from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SearchSession:
    """Inline search bar state for one song-list screen."""

    active: bool = False
    query: str = ""
    link_only_filter: bool = False

    def activate(self) -> None:
        # The link toggle survives opening and closing the bar.
        self.active = True
        self.query = ""

    def deactivate(self) -> None:
        self.active = False
        self.query = ""

    def append(self, text: str) -> None:
        if self.active:
            self.query += text

    def backspace(self) -> None:
        if self.active:
            self.query = self.query[:-1]

    def toggle_link_filter(self) -> bool:
        self.link_only_filter = not self.link_only_filter
        return self.link_only_filter
