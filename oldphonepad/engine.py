"""
oldphonepad.engine
==================
Pure multi-tap decoding engine — no UI, no keyboard hooks.
Can be imported and used standalone for testing or embedding.
"""

from __future__ import annotations

from itertools import groupby
from types import MappingProxyType
from typing import Iterator, Mapping

# ─── Keypad symbols ───────────────────────────────────────────────────────────

SEND = "#"
DELETE = "*"
PAUSE = " "
DIGITS = "0123456789"

# ─── Keypad layout ────────────────────────────────────────────────────────────

KEYPAD: Mapping[str, str] = MappingProxyType({
    "1": "&'(",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
    "0": " ",
})


def _build_char_to_key(keypad: Mapping[str, str]) -> dict[str, tuple[str, int]]:
    mapping: dict[str, tuple[str, int]] = {}
    for digit, chars in keypad.items():
        for presses, ch in enumerate(chars, 1):
            # First key wins if a layout lists a character twice
            mapping.setdefault(ch.lower(), (digit, presses))
    return mapping


CHAR_TO_KEY: Mapping[str, tuple[str, int]] = MappingProxyType(_build_char_to_key(KEYPAD))


# ─── Errors ───────────────────────────────────────────────────────────────────

class InvalidInput(ValueError):
    """The press sequence cannot be decoded at all."""


class MissingInput(InvalidInput):
    """No sequence was given (``None``, as opposed to an empty string)."""


class MissingSendMarker(InvalidInput):
    """The sequence never presses the send key."""


class UnsupportedCharacter(ValueError):
    """The text holds a character the keypad cannot produce."""


# ─── Decoding ─────────────────────────────────────────────────────────────────

def iter_runs(sequence: str) -> Iterator[tuple[str, int]]:
    """Yield ``(symbol, count)`` for each run of identical symbols."""
    for symbol, group in groupby(sequence):
        yield symbol, sum(1 for _ in group)


def decode_run(digit: str, presses: int, keypad: Mapping[str, str] | None = None) -> str:
    """
    Return the character produced by pressing ``digit`` ``presses`` times.

    Presses wrap around the key's characters, so one press past the last
    character lands on the first again.  Returns ``""`` for a digit the
    layout gives no characters.
    """
    chars = (KEYPAD if keypad is None else keypad).get(digit, "")
    if not chars or presses < 1:
        return ""
    return chars[(presses - 1) % len(chars)].upper()


def decode(sequence: str | None, keypad: Mapping[str, str] | None = None) -> str:
    """
    Decode a multi-tap press sequence into text.

    Everything from the first ``#`` on is discarded.  Spaces only pause,
    ending the current run so the same key can be pressed again for a new
    letter.  Each ``*`` deletes the last decoded character, if there is one.
    Symbols that are none of these are skipped.

    Raises :class:`MissingInput` for ``None`` and :class:`MissingSendMarker`
    when the sequence holds no ``#``.
    """
    if sequence is None:
        raise MissingInput("Input cannot be None.")
    if SEND not in sequence:
        raise MissingSendMarker(f"Input must contain the send character {SEND!r}.")

    result: list[str] = []
    for symbol, count in iter_runs(sequence[:sequence.index(SEND)]):
        if symbol == DELETE:
            del result[max(len(result) - count, 0):]
        elif symbol in DIGITS:
            ch = decode_run(symbol, count, keypad)
            if ch:
                result.append(ch)
    return "".join(result)


# ─── Encoding ─────────────────────────────────────────────────────────────────

def encode(text: str, keypad: Mapping[str, str] | None = None) -> str:
    """
    Encode text as a press sequence that :func:`decode` turns back into it.

    Consecutive characters on the same key are split with a pause.  The
    result always ends with the send key.
    """
    char_to_key = CHAR_TO_KEY if keypad is None else _build_char_to_key(keypad)
    parts: list[str] = []
    last_digit = None
    for ch in text:
        try:
            digit, presses = char_to_key[ch.lower()]
        except KeyError:
            raise UnsupportedCharacter(f"Unsupported character: {ch!r}") from None
        if digit == last_digit:
            parts.append(PAUSE)
        parts.append(digit * presses)
        last_digit = digit
    parts.append(SEND)
    return "".join(parts)
