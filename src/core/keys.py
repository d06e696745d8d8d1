from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    TAB = "tab"
    BACKTAB = "backtab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True)
class KeyEvent:
    """A key press as the core sees it, independent of the terminal library."""

    key: Key
    char: str = ""
    ctrl: bool = False

    @classmethod
    def from_char(cls, ch: str) -> "KeyEvent":
        return cls(Key.CHAR, ch)

    @classmethod
    def with_ctrl(cls, ch: str) -> "KeyEvent":
        return cls(Key.CHAR, ch.lower(), ctrl=True)

    def is_char(self, *chars: str) -> bool:
        return self.key is Key.CHAR and not self.ctrl and self.char in chars

    def is_ctrl(self, ch: str) -> bool:
        return self.key is Key.CHAR and self.ctrl and self.char == ch

    @property
    def printable(self) -> bool:
        return self.key is Key.CHAR and not self.ctrl and self.char.isprintable() and self.char != ""
