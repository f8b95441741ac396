"""
oldphonepad
===========
Decodes old phone keypad multi-tap presses into text.

Public API
----------
    from oldphonepad import decode, encode, load_config

    decode("4433555 555666#")    # 'HELLO'
    decode("8 88777444666*664#") # 'TURING'
    encode("hi")                 # '44 444#'

The live capture app (``oldphonepad.app.KeypadApp``) needs pynput and a
display, so it is not imported here.
"""

from .config import build_keypad, load_config
from .engine import (
    KEYPAD,
    InvalidInput,
    MissingInput,
    MissingSendMarker,
    UnsupportedCharacter,
    decode,
    decode_run,
    encode,
    iter_runs,
)
from .keys import PressRecorder, symbol_for_key

__all__ = [
    "KEYPAD",
    "InvalidInput",
    "MissingInput",
    "MissingSendMarker",
    "PressRecorder",
    "UnsupportedCharacter",
    "build_keypad",
    "decode",
    "decode_run",
    "encode",
    "iter_runs",
    "load_config",
    "symbol_for_key",
]
__version__ = "1.0.0"
