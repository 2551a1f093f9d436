"""Greedy word wrapping for fixed-width receipt lines."""

from __future__ import annotations


def wrap_text(text: str, max_width: int) -> str:
    """Wrap text to fit within a maximum width.

    Words are split on single spaces and packed greedily. A word longer than
    ``max_width`` is not broken; it occupies its own line and overflows.

    Args:
        text: Text to wrap.
        max_width: Maximum characters per line.

    Returns:
        Wrapped text with ``\\n`` between lines. The last line is not
        terminated.
    """
    result = ""
    current = ""

    for word in str(text).split(" "):
        if not current:
            current = word
        elif len(current) + len(word) + 1 <= max_width:
            current += " " + word
        else:
            # A trailing space flushed here leaves the result ending in "\n"
            result += current + "\n"
            current = word

    if current:
        result += current

    return result
