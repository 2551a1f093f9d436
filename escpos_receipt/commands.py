"""ESC/POS command table.

Commands are kept as ``str`` fragments (one character per byte) so they can be
interleaved with text in the builder buffer and encoded once at the end. They
are ``Command`` instances, which tells the encoder to send them byte for byte
instead of through the text codepage.
"""

from __future__ import annotations

from types import SimpleNamespace

from .const import MAX_FEED_LINES
from .models import Align, TextSize


class Command(str):
    """A raw command fragment, one character per byte."""

    __slots__ = ()


# Control characters
ESC = "\x1b"
GS = "\x1d"

# === Initialization ===
INITIALIZE = Command(f"{ESC}@")
SELECT_CHARSET = Command(f"{ESC}R\x00")  # International character set: USA / Latin

# === Text size ===
RESET_SIZE = Command(f"{GS}!\x00")

# === Text formatting ===
BOLD_ON = Command(f"{ESC}E\x01")
BOLD_OFF = Command(f"{ESC}E\x00")

UNDERLINE_ON = Command(f"{ESC}-\x01")
UNDERLINE_OFF = Command(f"{ESC}-\x00")

# === Paper control ===
CUT_FULL = Command(f"{GS}V\x00")
CUT_PARTIAL = Command(f"{GS}V\x01")

# === Buzzer ===
BEEP = Command(f"{ESC}B\x03\x02")


def align_command(align: Align) -> Command:
    """ESC a n."""
    return Command(f"{ESC}a{chr(int(align))}")


def set_size(size: TextSize) -> Command:
    """GS ! n."""
    return Command(f"{GS}!{chr(int(size))}")


def feed(lines: int) -> Command:
    """ESC d n, print and feed n lines."""
    lines = max(0, min(MAX_FEED_LINES, int(lines)))
    return Command(f"{ESC}d{chr(lines)}")


Commands = SimpleNamespace(
    INITIALIZE=INITIALIZE,
    SELECT_CHARSET=SELECT_CHARSET,
    ALIGN_LEFT=align_command(Align.LEFT),
    ALIGN_CENTER=align_command(Align.CENTER),
    ALIGN_RIGHT=align_command(Align.RIGHT),
    SET_SIZE=set_size,
    RESET_SIZE=RESET_SIZE,
    BOLD_ON=BOLD_ON,
    BOLD_OFF=BOLD_OFF,
    UNDERLINE_ON=UNDERLINE_ON,
    UNDERLINE_OFF=UNDERLINE_OFF,
    CUT_FULL=CUT_FULL,
    CUT_PARTIAL=CUT_PARTIAL,
    FEED=feed,
    BEEP=BEEP,
)
