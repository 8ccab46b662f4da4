"""Application loop: screen switching, terminal rendering and key input."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

from myplant.menu import MenuAction, MenuConfig
from myplant.model import AppState, Key, decode_key
from myplant.run import RunConfig, sample_plants

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - platforms without POSIX terminals
    termios = None
    tty = None

_CLEAR_SCREEN = "\x1b[2J"
_ESCAPE = "\x1b"
_SEQUENCE_INTRODUCERS = ("[", "O")
_GOODBYE = "\nWyłączanie aplikacji..."


class App:
    """Whole application state: the active screen, its configuration and liveness."""

    def __init__(self) -> None:
        self.state: AppState = AppState.MENU
        self.config: MenuConfig | RunConfig = MenuConfig()
        self.running: bool = True

    def handle_key(self, key: Key) -> None:
        """Pass a key to the active screen and switch screens when it asks to."""
        if key is Key.Q:
            self.running = False
            return
        target: AppState | None = None
        if self.state is AppState.MENU and isinstance(self.config, MenuConfig):
            action = self.config.handle_key(key)
            if action is MenuAction.LEAVE:
                self.running = False
            elif action is not None:
                target = action.target
        elif self.state is AppState.RUN and isinstance(self.config, RunConfig):
            target = self.config.handle_key(key)
        if target is not None:
            self.initialize(target)

    def initialize(self, target: AppState) -> None:
        """Switch to the given screen, setting up its fresh configuration."""
        if target is AppState.MENU:
            self.config = MenuConfig()
        elif target is AppState.RUN:
            self.config = RunConfig(plants=sample_plants())
        self.state = target

    def lines(self) -> list[str]:
        """Screen lines of the active screen; empty for screens without a view."""
        if self.state is AppState.MENU and isinstance(self.config, MenuConfig):
            return self.config.lines()
        if self.state is AppState.RUN and isinstance(self.config, RunConfig):
            return self.config.lines()
        return []


def _move_to(row: int) -> str:
    return f"\x1b[{row + 1};1H"


def render(lines: list[str], stream: IO[str] | None = None) -> None:
    """Clear the terminal and draw each line on its own row."""
    out = sys.stdout if stream is None else stream
    if out.isatty():
        try:
            subprocess.run(["clear"], check=False)
        except OSError:
            pass
    out.write(_CLEAR_SCREEN + _move_to(0))
    for row, line in enumerate(lines):
        out.write(_move_to(row) + line)
    out.flush()


def _read_char(stream: IO[Any]) -> str:
    data = stream.read(1)
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def read_key(stream: IO[Any]) -> Key | None:
    """Read one key press from the stream; None for keys the application ignores."""
    char = _read_char(stream)
    if not char:
        raise EOFError("input stream exhausted")
    sequence = char
    if char == _ESCAPE:
        introducer = _read_char(stream)
        sequence += introducer
        if introducer in _SEQUENCE_INTRODUCERS:
            sequence += _read_char(stream)
    return decode_key(sequence)


def run(stream: IO[Any] | None = None) -> App:
    """Drive the application from key presses on the stream until it stops."""
    source = sys.stdin.buffer if stream is None else stream
    app = App()
    render(app.lines(), sys.stdout)
    while app.running:
        try:
            key = read_key(source)
        except EOFError:
            break
        if key is None:
            continue
        if key is Key.Q:
            app.running = False
            return app
        app.handle_key(key)
        render(app.lines(), sys.stdout)
    return app


@contextmanager
def _raw_mode(stream: IO[Any]) -> Iterator[None]:
    if termios is None or tty is None or not stream.isatty():
        yield
        return
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: list[str] | None = None) -> int:
    """Start the plant tracker in the terminal."""
    parser = argparse.ArgumentParser(prog="myplant", description="Terminal plant tracker.")
    parser.parse_args(argv)
    with _raw_mode(sys.stdin):
        run(sys.stdin.buffer)
        print(_GOODBYE)
    return 0