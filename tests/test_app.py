import importlib
import sys
import types
from types import SimpleNamespace

import pytest


class FakeListener:
    def __init__(self, on_press, suppress=False):
        self.on_press = on_press
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def join(self):
        pass

    def stop(self):
        self.stopped = True


class FakeController:
    def __init__(self):
        self.typed = []

    def type(self, text):
        self.typed.append(text)


class BrokenController(FakeController):
    def type(self, text):
        raise RuntimeError("no display")


@pytest.fixture
def app_module(monkeypatch):
    """Import oldphonepad.app against an in-memory pynput."""
    keyboard = types.ModuleType("pynput.keyboard")
    keyboard.Listener = FakeListener
    keyboard.Controller = FakeController
    keyboard.Key = SimpleNamespace(esc="<esc>")
    keyboard.KeyCode = SimpleNamespace
    pynput = types.ModuleType("pynput")
    pynput.keyboard = keyboard

    monkeypatch.setitem(sys.modules, "pynput", pynput)
    monkeypatch.setitem(sys.modules, "pynput.keyboard", keyboard)
    monkeypatch.delitem(sys.modules, "oldphonepad.app", raising=False)
    module = importlib.import_module("oldphonepad.app")
    yield module
    sys.modules.pop("oldphonepad.app", None)


def make_app(app_module, **listen):
    return app_module.KeypadApp({"keypad": {}, "listen": listen})


def press_all(app, presses):
    return [app._on_press(SimpleNamespace(char=ch, vk=None)) for ch in presses]


def test_message_is_printed_and_kept(app_module, capsys):
    app = make_app(app_module)
    assert press_all(app, "4433555 555666#") == [None] * 15
    assert app.messages == ["HELLO"]
    assert capsys.readouterr().out == "HELLO\n"
    assert app.kb.typed == []


def test_message_is_typed_when_enabled(app_module):
    app = make_app(app_module, type_result=True)
    press_all(app, "33#227*#")
    assert app.messages == ["E", "B"]
    assert app.kb.typed == ["E", "B"]


def test_echo_presses(app_module, capsys):
    app = make_app(app_module, echo_presses=True)
    press_all(app, "22")
    assert capsys.readouterr().out.splitlines() == ["[oldphonepad] '2'", "[oldphonepad] '22'"]


def test_other_keys_are_ignored(app_module, capsys):
    app = make_app(app_module)
    press_all(app, "xyz")
    assert app.recorder.pending == ""
    assert capsys.readouterr().out == ""


def test_esc_stops_listener(app_module):
    app = make_app(app_module)
    assert app._on_press("<esc>") is False


def test_typing_failure_keeps_listening(app_module, capsys):
    app = make_app(app_module, type_result=True)
    app.kb = BrokenController()
    assert press_all(app, "33#") == [None, None, None]
    assert "[oldphonepad] Type error: no display" in capsys.readouterr().out
    press_all(app, "2#")
    assert app.messages == ["E", "A"]


def test_custom_keypad_from_config(app_module):
    app = app_module.KeypadApp({"keypad": {"1": ".,?!"}, "listen": {}})
    press_all(app, "1111#")
    assert app.messages == ["!"]


def test_run_and_stop(app_module, capsys):
    app = make_app(app_module)
    app.run()
    assert app._listener.started
    assert "[oldphonepad] Stopped." in capsys.readouterr().out
    app.stop()
    assert app._listener.stopped
