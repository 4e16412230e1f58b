"""Terminal output helpers: styled text, status lines and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"
_BLUE = "\x1b[34m"


def _colors_enabled() -> bool:
    if os.environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(code: str, text: object) -> str:
    text = str(text)
    if _colors_enabled():
        return f"{code}{text}{_RESET}"
    return text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> str:
    return _paint(_BOLD, text)


def red(text: object) -> str:
    return _paint(_RED, text)


def green(text: object) -> str:
    return _paint(_GREEN, text)


def blue(text: object) -> str:
    return _paint(_BLUE, text)


def warn(message: str) -> None:
    """Print a warning line in red."""
    prefix = "!" if no_emoji() else "⚠️ "
    print(f"{red(prefix)} {red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    prefix = "✓" if no_emoji() else "✅"
    print(f"{green(prefix)} {green(message)}")


class Spinner:
    """A spinner drawn on standard error while work is in progress.

    Nothing is drawn when standard error is not a terminal.
    """

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"
    _TICK = 0.1

    def __init__(self, message: str) -> None:
        self.message = message
        self.active = False
        self._stream = sys.stderr
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def set_message(self, message: str) -> None:
        with self._lock:
            self.message = message

    def start(self) -> None:
        if self.active:
            return
        self.active = True
        self._stop.clear()
        isatty = getattr(self._stream, "isatty", None)
        if isatty and isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            with self._lock:
                message = self.message
            self._stream.write(f"\r\x1b[2K{frame} {message}")
            self._stream.flush()
            if self._stop.wait(self._TICK):
                break

    def finish_and_clear(self) -> None:
        if not self.active:
            return
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            self._stream.write("\r\x1b[2K")
            self._stream.flush()
        self.active = False

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()