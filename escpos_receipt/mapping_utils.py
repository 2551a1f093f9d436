"""Utility functions for mapping caller-supplied option values."""

from __future__ import annotations

import logging

from .const import ALIGN_CHOICES, DEFAULT_ALIGN, DEFAULT_RULE_STYLE, RULE_CHARS
from .models import Align

_LOGGER = logging.getLogger(__name__)


def map_align(align: str | Align | None) -> Align:
    """Map alignment string (or Align value) to the ESC a parameter."""
    if isinstance(align, Align):
        return align
    if not align:
        return Align[DEFAULT_ALIGN.upper()]
    align_l = str(align).lower()
    if align_l not in ALIGN_CHOICES:
        _LOGGER.debug("Unknown alignment '%s', using %s", align, DEFAULT_ALIGN)
        align_l = DEFAULT_ALIGN
    return Align[align_l.upper()]


def map_cell_align(align: str | None) -> str:
    """Map a table cell alignment to one of left/center/right."""
    if not align:
        return DEFAULT_ALIGN
    align_l = str(align).lower()
    return align_l if align_l in ALIGN_CHOICES else DEFAULT_ALIGN


def map_rule_char(style: str | None) -> str:
    """Map horizontal rule style to its fill character."""
    if not style:
        return RULE_CHARS[DEFAULT_RULE_STYLE]
    char = RULE_CHARS.get(str(style).lower())
    if char is None:
        _LOGGER.debug("Unknown rule style '%s', using %s", style, DEFAULT_RULE_STYLE)
        return RULE_CHARS[DEFAULT_RULE_STYLE]
    return char


def map_cut(mode: str | bool | None) -> bool:
    """Map cut mode to True for a full cut and False for a partial cut.

    Accepts booleans (``full``) or the strings "full"/"partial". Anything else
    is treated as a full cut.
    """
    if mode is None:
        return True
    if isinstance(mode, bool):
        return mode
    mode_l = str(mode).lower()
    if mode_l == "partial":
        return False
    if mode_l != "full":
        _LOGGER.debug("Unknown cut mode '%s', using full cut", mode)
    return True


def map_count(val: int | str | None, default: int = 1) -> int:
    """Map a line count to a non-negative int.

    Accepts ints or numeric strings; negatives clamp to 0 and unparseable
    values fall back to ``default``.
    """
    if val is None:
        return default
    try:
        return max(0, int(val))
    except (ValueError, TypeError):
        _LOGGER.debug("Invalid line count '%s', using %s", val, default)
        return default
