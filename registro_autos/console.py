"""Small helpers for line-oriented console interaction."""

from __future__ import annotations

import re
import subprocess
import sys

from .carro import MAX_CHAR

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_line(prompt: str = "") -> str:
    """Read one line, without its newline, cut to the field length."""
    return input(prompt)[: MAX_CHAR - 1]


def read_int(prompt: str = "") -> int | None:
    """Read a line and return the integer it starts with, or None."""
    match = _LEADING_INT.match(input(prompt))
    return int(match.group(1)) if match else None


def pause() -> None:
    """Wait for the user to press ENTER."""
    print("\nPresione ENTER para continuar...", end="", flush=True)
    input()


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    if sys.platform.startswith("win"):
        command, shell = "cls", True
    else:
        command, shell = ["clear"], False
    try:
        subprocess.run(command, shell=shell, check=False)
    except OSError:
        pass