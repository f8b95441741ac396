"""
oldphonepad.config
==================
Loads and validates config.json.
Falls back to sane defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .engine import DIGITS, KEYPAD

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

ENV_VAR = "OLDPHONEPAD_CONFIG"


DEFAULTS: dict = {
    # digit → characters, applied over the built-in layout
    "keypad": {},
    "listen": {
        "type_result": False,
        "echo_presses": False,
    },
}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``OLDPHONEPAD_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``oldphonepad/config.json``

    Returns a fully-populated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        candidates.append(Path(env_path))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if candidate.exists():
            try:
                with open(candidate, "r", encoding="utf-8") as f:
                    user = json.load(f)
                # Strip comment keys (keys starting with _)
                user = {k: v for k, v in user.items() if not k.startswith("_")}
                for section in ("keypad", "listen"):
                    if section in user:
                        cfg[section].update(user.pop(section))
                cfg.update(user)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                print(f"[oldphonepad] Warning: could not parse {candidate}: {e}")
            break   # stop at first found

    return cfg


def build_keypad(config: dict) -> Mapping[str, str]:
    """Return the built-in layout with the config's ``keypad`` overrides applied."""
    layout = dict(KEYPAD)
    for digit, chars in config.get("keypad", {}).items():
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS or not isinstance(chars, str):
            print(f"[oldphonepad] Warning: ignoring keypad entry for {digit!r}")
            continue
        layout[digit] = chars
    return MappingProxyType(layout)
