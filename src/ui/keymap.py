from __future__ import annotations

from typing import Optional

from core.keys import Key, KeyEvent

# blessed Keystroke.name -> core key
_NAMED_KEYS = {
    "KEY_ENTER": Key.ENTER,
    "KEY_ESCAPE": Key.ESCAPE,
    "KEY_BACKSPACE": Key.BACKSPACE,
    "KEY_DELETE": Key.BACKSPACE,
    "KEY_TAB": Key.TAB,
    "KEY_BTAB": Key.BACKTAB,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_PGUP": Key.PAGE_UP,
    "KEY_PPAGE": Key.PAGE_UP,
    "KEY_PGDOWN": Key.PAGE_DOWN,
    "KEY_NPAGE": Key.PAGE_DOWN,
    "KEY_HOME": Key.HOME,
    "KEY_END": Key.END,
}

# raw characters that arrive without a sequence name
_RAW_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\t": Key.TAB,
    "\x1b": Key.ESCAPE,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}


def translate_key(ks) -> Optional[KeyEvent]:
    """
    Turn a blessed Keystroke (or any str subclass with an optional `.name`)
    into a KeyEvent. Returns None for timeouts and keys the app ignores.
    """
    name = getattr(ks, "name", None)
    if name in _NAMED_KEYS:
        return KeyEvent(_NAMED_KEYS[name])

    text = str(ks)
    if not text:
        return None
    if getattr(ks, "is_sequence", False):
        return None

    if text in _RAW_KEYS:
        return KeyEvent(_RAW_KEYS[text])
    if len(text) == 1 and ord(text) < 32:
        return KeyEvent.with_ctrl(chr(ord(text) + 96))
    if len(text) == 1 and text.isprintable():
        return KeyEvent.from_char(text)
    return None
