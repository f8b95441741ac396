"""
oldphonepad.keys
================
Translates keyboard events into keypad symbols and buffers presses
until the send key completes a message.

Nothing here imports pynput: events are read duck-typed through their
``char``, ``vk`` and ``name`` attributes, so plain stand-ins work too.
"""

from __future__ import annotations

from typing import Mapping

from .engine import DELETE, DIGITS, PAUSE, SEND, decode

# Numpad keys when Num Lock is OFF (pynput reports these as named keys)
NAMED_KEYS: dict[str, str] = {
    "insert":    "0",
    "end":       "1",
    "down":      "2",
    "page_down": "3",
    "left":      "4",
    "right":     "6",
    "home":      "7",
    "up":        "8",
    "page_up":   "9",
    "space":     PAUSE,
    "enter":     SEND,
}

CHAR_KEYS: dict[str, str] = {
    DELETE: DELETE,
    SEND:   SEND,
    PAUSE:  PAUSE,
    "/":    PAUSE,
    "+":    SEND,
}

# Windows virtual key codes for numpad (fallback)
VK_KEYS: dict[int, str] = {
    96: "0",  97: "1",  98: "2",  99: "3",
    100: "4", 101: "5", 102: "6", 103: "7",
    104: "8", 105: "9",
    106: DELETE,
    107: SEND,
    111: PAUSE,
    13:  SEND,
}


def symbol_for_key(key: object) -> str | None:
    """Map a key event to a keypad symbol, or ``None`` if it is not one."""
    name = getattr(key, "name", None)
    if isinstance(name, str) and name in NAMED_KEYS:
        return NAMED_KEYS[name]

    ch = getattr(key, "char", None) or ""
    if len(ch) == 1:
        if ch in DIGITS:
            return ch
        if ch in CHAR_KEYS:
            return CHAR_KEYS[ch]

    # Xlib reports keysyms in vk, so only trust it for keys without a char
    vk = getattr(key, "vk", None)
    if not ch and vk is not None:
        return VK_KEYS.get(vk)
    return None


class PressRecorder:
    """
    Collects keypad symbols and decodes them once the send key arrives.

    Usage::

        rec = PressRecorder()
        for symbol in "4433555 555666":
            rec.press(symbol)        # → None
        rec.press("#")               # → 'HELLO'
    """

    def __init__(self, keypad: Mapping[str, str] | None = None) -> None:
        self.keypad = keypad
        self._presses: list[str] = []

    @property
    def pending(self) -> str:
        return "".join(self._presses)

    def reset(self) -> None:
        self._presses = []

    def press(self, symbol: str) -> str | None:
        """Record one symbol. Returns the decoded message on send, else ``None``."""
        if symbol != SEND:
            self._presses.append(symbol)
            return None
        message = decode(self.pending + SEND, self.keypad)
        self.reset()
        return message
