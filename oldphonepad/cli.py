"""
oldphonepad.cli
===============
Command-line entry point.
Registered as the ``oldphonepad`` console script in pyproject.toml.

Usage:
    oldphonepad "4433555 555666#"      # decode one or more sequences
    oldphonepad -i presses.txt         # decode a file, one sequence per line
    oldphonepad -i -                   # ... or stdin
    oldphonepad --encode "hello"       # text → press sequence
    oldphonepad --show-keypad          # print the active layout and exit
    oldphonepad --listen               # decode live numpad presses
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Mapping

from .config import build_keypad, load_config
from .engine import InvalidInput, UnsupportedCharacter, decode, encode


def _show_keypad(keypad: Mapping[str, str]) -> None:
    print("Keypad layout:\n")
    for digit in sorted(keypad, key=lambda d: (d == "0", d)):
        chars = keypad[digit]
        shown = " ".join("␣" if ch == " " else ch for ch in chars.upper())
        print(f"  {digit}  {shown or '(none)'}")
    print()


def _read_sequences(source: str) -> list[str]:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    # Spaces are meaningful, only line endings are stripped
    return [ln.rstrip("\r\n") for ln in text.splitlines() if ln.strip()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="oldphonepad",
        description="Decode old phone keypad multi-tap presses into text.",
    )
    parser.add_argument(
        "sequences",
        nargs="*",
        metavar="SEQUENCE",
        help="Press sequence ending with '#', e.g. \"4433555 555666#\".",
    )
    parser.add_argument(
        "--input", "-i",
        metavar="PATH",
        help="Read sequences from a file, one per line (use - for stdin).",
    )
    parser.add_argument(
        "--encode", "-e",
        metavar="TEXT",
        help="Print the press sequence that types TEXT and exit.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--show-keypad",
        action="store_true",
        help="Print the active keypad layout and exit.",
    )
    parser.add_argument(
        "--listen",
        action="store_true",
        help="Capture numpad presses system-wide; Esc stops.",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    keypad = build_keypad(config)

    if args.show_keypad:
        _show_keypad(keypad)
        sys.exit(0)

    try:
        if args.encode is not None:
            print(encode(args.encode, keypad))
            return

        sequences = list(args.sequences)
        if args.input:
            try:
                sequences.extend(_read_sequences(args.input))
            except (OSError, UnicodeDecodeError) as e:
                print(f"Error: could not read {args.input}: {e}", file=sys.stderr)
                sys.exit(1)

        if sequences:
            for seq in sequences:
                print(decode(seq, keypad))
            return
    except (InvalidInput, UnsupportedCharacter) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.listen:
        parser.print_usage(sys.stderr)
        sys.exit(2)

    # Import here so the CLI works without a display or pynput installed
    from .app import KeypadApp

    print("=" * 54)
    print("  Old Phone Pad — listening")
    print("=" * 54)
    print("  0-9 : keys            * : delete last letter")
    print("  /   : pause           + / Enter / # : send")
    print("  Esc : quit")
    print("=" * 54)

    app = KeypadApp(config)
    app.run()


if __name__ == "__main__":
    main()
