"""Printer profiles: capability flags and quirks.

Profiles come from three places: the built-in catalog of tested printers,
plain dictionaries validated with voluptuous (for profiles kept in
configuration files), and python-escpos' printer capability database.
"""

from __future__ import annotations

from .catalog import (
    BEMATECH_MP4200_PROFILE,
    DARUMA_DR800_PROFILE,
    ELGIN_I9_PROFILE,
    GENERIC_PROFILE,
    PRINTER_58MM_PROFILE,
    PROFILES,
    get_default_profile,
    get_profile,
    get_profile_choices,
)
from .escpos_db import clear_capabilities_cache, get_escpos_profile_keys, profile_from_escpos
from .profile import PrinterCapabilities, PrinterProfile, PrinterQuirks
from .schema import PROFILE_SCHEMA, profile_from_dict, profile_to_dict

__all__ = [
    "BEMATECH_MP4200_PROFILE",
    "DARUMA_DR800_PROFILE",
    "ELGIN_I9_PROFILE",
    "GENERIC_PROFILE",
    "PRINTER_58MM_PROFILE",
    "PROFILES",
    "PROFILE_SCHEMA",
    "PrinterCapabilities",
    "PrinterProfile",
    "PrinterQuirks",
    "clear_capabilities_cache",
    "get_default_profile",
    "get_escpos_profile_keys",
    "get_profile",
    "get_profile_choices",
    "profile_from_dict",
    "profile_from_escpos",
    "profile_to_dict",
]
