"""Built-in printer profiles."""

from __future__ import annotations

from types import MappingProxyType

from ..const import DEFAULT_PROFILE
from .profile import PrinterCapabilities, PrinterProfile, PrinterQuirks

_FULL = PrinterCapabilities(
    align=True,
    bold=True,
    underline=True,
    double_width=True,
    double_height=True,
    cut=True,
    partial_cut=True,
    qr_code=True,
    beep=True,
)

# Works with most modern thermal printers (Epson, Star, ...)
GENERIC_PROFILE = PrinterProfile(
    name="Generic ESC/POS",
    cols=48,
    capabilities=_FULL,
    quirks=PrinterQuirks(extra_feed_before_cut=3),
)

ELGIN_I9_PROFILE = PrinterProfile(
    name="Elgin i9",
    cols=48,
    capabilities=PrinterCapabilities(
        align=True,
        bold=False,  # ESC E is broken on the i9
        underline=True,
        double_width=True,
        double_height=True,
        cut=True,
        partial_cut=False,
        qr_code=True,
        beep=True,
    ),
    quirks=PrinterQuirks(
        needs_crlf=True,
        broken_bold_command=True,
        needs_init_before_every_print=True,
        extra_feed_before_cut=5,
    ),
)

BEMATECH_MP4200_PROFILE = PrinterProfile(
    name="Bematech MP-4200 TH",
    cols=48,
    capabilities=PrinterCapabilities(
        align=True,
        bold=True,
        underline=True,
        double_width=True,
        double_height=True,
        cut=True,
        partial_cut=True,
        qr_code=False,
        beep=True,
    ),
    quirks=PrinterQuirks(extra_feed_before_cut=4),
)

DARUMA_DR800_PROFILE = PrinterProfile(
    name="Daruma DR800",
    cols=48,
    capabilities=_FULL,
    quirks=PrinterQuirks(extra_feed_before_cut=3),
)

PRINTER_58MM_PROFILE = PrinterProfile(
    name="Generic 58mm",
    cols=32,
    capabilities=_FULL,
    quirks=PrinterQuirks(extra_feed_before_cut=3),
)

PROFILES: MappingProxyType[str, PrinterProfile] = MappingProxyType(
    {
        "generic": GENERIC_PROFILE,
        "elgin_i9": ELGIN_I9_PROFILE,
        "bematech_mp4200": BEMATECH_MP4200_PROFILE,
        "daruma_dr800": DARUMA_DR800_PROFILE,
        "printer_58mm": PRINTER_58MM_PROFILE,
    }
)


def get_default_profile() -> PrinterProfile:
    """Return the generic ESC/POS profile."""
    return PROFILES[DEFAULT_PROFILE]


def get_profile(profile_key: str) -> PrinterProfile:
    """Look up a built-in profile by key.

    Raises:
        KeyError: If the key is not a built-in profile.
    """
    try:
        return PROFILES[profile_key]
    except KeyError:
        raise KeyError(
            f"Unknown printer profile '{profile_key}', expected one of: {', '.join(sorted(PROFILES))}"
        ) from None


def get_profile_choices() -> list[tuple[str, str]]:
    """Get (profile_key, display_name) tuples sorted by display name."""
    choices = [(key, profile.name) for key, profile in PROFILES.items()]
    choices.sort(key=lambda x: x[1].lower())
    return choices
