"""Timestamped, coloured console logging."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum


class Color(IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


_lock = threading.Lock()
_debug_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn debug messages on or off."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def time_now() -> str:
    """The current local time as '[YYYY-MM-DD HH:MM:SS] '."""
    lt = time.localtime()
    return (
        f"[{lt.tm_year:02d}-{lt.tm_mon:02d}-{lt.tm_mday:02d} "
        f"{lt.tm_hour:02d}:{lt.tm_min:02d}:{lt.tm_sec:02d}] "
    )


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


def _emit(text: str, to_stderr: bool = False) -> None:
    stream = sys.stderr if to_stderr else sys.stdout
    with _lock:
        stream.write(text)
        stream.flush()


def raw(message: str, *args) -> None:
    _emit(f"{time_now()}\x1b[0m{_format(message, args)}\n")


def info(message: str, *args) -> None:
    _emit(f"{time_now()}\x1b[47;30m INFO \x1b[0m {_format(message, args)}\n")


def error(message: str, *args) -> None:
    _emit(
        f"{time_now()}\x1b[30;41m ERRR \x1b[31;40m {_format(message, args)}\x1b[0m\n",
        to_stderr=True,
    )


def error_with_dialog(message: str, *args) -> None:
    """Log an error; message dialogs are not available, which is noted at debug level."""
    error(message, *args)
    debug("error_with_dialog: message dialogs are not available on this platform")


def debug(message: str, *args) -> None:
    if not _debug_enabled:
        return
    _emit(f"{time_now()}\x1b[30;46m DEBG \x1b[36;40m {_format(message, args)}\x1b[0m\n")


def clear_window() -> None:
    """Scroll the console clear."""
    _emit("\n" * 20)