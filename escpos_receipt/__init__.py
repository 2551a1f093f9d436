"""ESC/POS receipt builder for thermal printers.

Builds printer command streams through a chainable API, adapting the output to
each printer's capabilities and known quirks.
"""

from __future__ import annotations

from .builder import ReceiptBuilder, helpers, receipt
from .capabilities import (
    BEMATECH_MP4200_PROFILE,
    DARUMA_DR800_PROFILE,
    ELGIN_I9_PROFILE,
    GENERIC_PROFILE,
    PRINTER_58MM_PROFILE,
    PROFILES,
    PrinterCapabilities,
    PrinterProfile,
    PrinterQuirks,
    get_default_profile,
    get_profile,
    profile_from_dict,
    profile_from_escpos,
)
from .commands import ESC, GS, Commands
from .models import Align, RowData, TableColumn, TextSize
from .text_utils import create_product_line, create_row, remove_accents, wrap_text

__version__ = "1.0.0"

__all__ = [
    "BEMATECH_MP4200_PROFILE",
    "Commands",
    "DARUMA_DR800_PROFILE",
    "ELGIN_I9_PROFILE",
    "ESC",
    "GENERIC_PROFILE",
    "GS",
    "PRINTER_58MM_PROFILE",
    "PROFILES",
    "Align",
    "PrinterCapabilities",
    "PrinterProfile",
    "PrinterQuirks",
    "ReceiptBuilder",
    "RowData",
    "TableColumn",
    "TextSize",
    "create_product_line",
    "create_row",
    "get_default_profile",
    "get_profile",
    "helpers",
    "profile_from_dict",
    "profile_from_escpos",
    "receipt",
    "remove_accents",
    "wrap_text",
]
