"""
oldphonepad.app
===============
Live capture: wires a global keyboard listener to the press recorder
and prints (optionally types) every message sent with ``#``.
"""

from __future__ import annotations

try:
    from pynput import keyboard
    from pynput.keyboard import Controller, Key, KeyCode
except ImportError as exc:
    raise ImportError(
        "pynput is required for --listen.\n"
        "Install it with:  pip install pynput\n"
        "Or, from the repo:  pip install -e .[listen]"
    ) from exc

from .config import build_keypad
from .keys import PressRecorder, symbol_for_key


class KeypadApp:
    """
    Full application.  Instantiate then call :meth:`run`.

    Example::

        from oldphonepad import load_config
        from oldphonepad.app import KeypadApp
        app = KeypadApp(load_config())
        app.run()
    """

    def __init__(self, config: dict) -> None:
        self.config = config
        listen_cfg = config.get("listen", {})
        self.type_result: bool = bool(listen_cfg.get("type_result", False))
        self.echo_presses: bool = bool(listen_cfg.get("echo_presses", False))
        self.recorder = PressRecorder(build_keypad(config))
        self.messages: list[str] = []
        self.kb = Controller()

        self._listener = keyboard.Listener(
            on_press=self._on_press,
            suppress=False,
        )

    # ── Key dispatch (listener thread) ────────────────────────────────────────

    def _on_press(self, key: Key | KeyCode | None) -> bool | None:
        if key == Key.esc:
            return False    # stops the listener

        symbol = symbol_for_key(key)
        if symbol is None:
            return None

        message = self.recorder.press(symbol)
        if message is None:
            if self.echo_presses:
                print(f"[oldphonepad] {self.recorder.pending!r}")
            return None

        self.messages.append(message)
        print(message)
        if self.type_result:
            self._type(message)
        return None

    # ── Typing helpers ────────────────────────────────────────────────────────

    def _type(self, text: str) -> None:
        try:
            self.kb.type(text)
        except Exception as ex:
            print(f"[oldphonepad] Type error: {ex}")

    # ── Run ───────────────────────────────────────────────────────────────────

    def stop(self) -> None:
        self._listener.stop()

    def run(self) -> None:
        """Start the keyboard listener and block until Esc or :meth:`stop`."""
        self._listener.start()
        try:
            self._listener.join()
        except KeyboardInterrupt:
            self._listener.stop()
        print("\n[oldphonepad] Stopped.")
