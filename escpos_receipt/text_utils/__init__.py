"""Text utilities for fixed-width receipt layout.

All helpers strip accents before measuring, since receipt printers run
single-byte charsets and cannot render combining marks. Widths are counted in
characters of the printer's normal font.
"""

from __future__ import annotations

from .accents import remove_accents, strip_diacritics
from .codepage_mapping import CODEPAGE_TO_CODEC, encode_command, encode_text, get_codec_name
from .formatting import create_product_line, create_row, format_currency
from .wrapping import wrap_text

__all__ = [
    "CODEPAGE_TO_CODEC",
    "create_product_line",
    "create_row",
    "encode_command",
    "encode_text",
    "format_currency",
    "get_codec_name",
    "remove_accents",
    "strip_diacritics",
    "wrap_text",
]
