import subprocess
import sys

from registro_autos import console
from registro_autos.carro import MAX_CHAR


def _feed(monkeypatch, *lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_read_line_returns_text(monkeypatch):
    _feed(monkeypatch, "Nissan")
    assert console.read_line("Marca: ") == "Nissan"


def test_read_line_truncates(monkeypatch):
    _feed(monkeypatch, "x" * 100)
    assert console.read_line() == "x" * (MAX_CHAR - 1)


def test_read_int_leading_number(monkeypatch):
    _feed(monkeypatch, "  2020 nuevo")
    assert console.read_int() == 2020


def test_read_int_negative(monkeypatch):
    _feed(monkeypatch, "-3")
    assert console.read_int() == -3


def test_read_int_invalid(monkeypatch):
    _feed(monkeypatch, "abc")
    assert console.read_int() is None


def test_pause_prints_message_and_waits(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr("builtins.input", lambda prompt="": calls.append(prompt) or "")
    console.pause()
    assert calls == [""]
    assert "Presione ENTER para continuar..." in capsys.readouterr().out


def test_clear_screen_unix(monkeypatch):
    calls = []
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: calls.append((cmd, kw["shell"])))
    result = console.clear_screen()
    assert result is None
    assert calls == [(["clear"], False)]


def test_clear_screen_windows(monkeypatch):
    calls = []
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: calls.append((cmd, kw["shell"])))
    result = console.clear_screen()
    assert result is None
    assert calls == [("cls", True)]


def test_clear_screen_missing_command(monkeypatch):
    calls = []

    def fail(cmd, **kw):
        calls.append(cmd)
        raise FileNotFoundError(cmd)

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(subprocess, "run", fail)
    result = console.clear_screen()
    assert result is None
    assert calls == [["clear"]]