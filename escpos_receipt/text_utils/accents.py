"""Accent stripping for single-byte printer charsets."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

# Combining diacritical marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
# Ordinal indicators and degree sign have no combining form to strip
_ORDINALS = re.compile("[\u00aa\u00ba\u00b0]")


def strip_diacritics(text: Any) -> str:
    """Remove accents and ordinal/degree symbols from text.

    Args:
        text: Text to process. Non-string values are converted with str().

    Returns:
        Text in NFD form without combining marks.
    """
    decomposed = unicodedata.normalize("NFD", str(text))
    return _ORDINALS.sub("", _COMBINING_MARKS.sub("", decomposed))


# Alias exposed through builder.helpers
remove_accents = strip_diacritics
