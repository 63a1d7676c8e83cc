"""Single-keypress reader for the terminal frontends.

Translates raw keys into board actions: cursor movement (arrows / WASD),
reveal (Space / Enter), restart and quit.  Works on macOS / Linux
(tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


def _read_char_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_char_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Windows reports arrows as a "\xe0" / "\x00" prefix plus a scan code.
    if ch in ("\x00", "\xe0"):
        return _WIN_SCAN_CODES.get(msvcrt.getwch(), "")
    return ch


_WIN_SCAN_CODES: dict[str, str] = {
    "H": "\x1b[A",
    "P": "\x1b[B",
    "M": "\x1b[C",
    "K": "\x1b[D",
}

_read_char = _read_char_windows if os.name == "nt" else _read_char_unix


# -- key -> action --------------------------------------------------------------

_ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "reveal",
    "\r": "reveal",
    "\n": "reveal",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROWS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _action_for(ch: str) -> str:
    if ch.lower() in _ACTIONS:
        return _ACTIONS[ch.lower()]
    return ch if ch.isprintable() else ""


def get_key() -> str:
    """Block for one keypress and return its action name.

    Possible return values:
        "up", "down", "left", "right"  — move the cursor
        "reveal"                       — Space / Enter
        "restart"                      — r (new board)
        "quit"                         — q / Ctrl-C / Escape
        "<char>"                       — any other printable char
        ""                             — unrecognised key
    """
    ch = _read_char()
    if len(ch) == 3:
        # Already-decoded arrow from the Windows reader.
        return _ARROWS.get(ch[2], "")
    if ch == "\x1b" and os.name == "nt":
        return "quit"
    if ch != "\x1b":
        return _action_for(ch)

    # Escape sequences (ESC [ A/B/C/D); a bare Escape quits.
    if _read_char() != "[":
        return "quit"
    return _ARROWS.get(_read_char(), "")
