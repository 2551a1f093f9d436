"""Build profiles from python-escpos' printer capability database.

The database (escpos-printer-db, bundled with python-escpos) knows fonts, cut
support and QR support for many printer models. It says nothing about text
styling or quirks, so those fields take ESC/POS defaults.
"""

from __future__ import annotations

from functools import lru_cache
import logging
from typing import Any

from ..const import DEFAULT_LINE_WIDTH
from .profile import PrinterCapabilities, PrinterProfile, PrinterQuirks

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_capabilities() -> dict[str, Any]:
    """Load the python-escpos capabilities database (cached)."""
    from escpos.capabilities import CAPABILITIES  # noqa: PLC0415

    return CAPABILITIES  # type: ignore[no-any-return]


def clear_capabilities_cache() -> None:
    """Forget the loaded database so the next profile lookup reads it again."""
    _LOGGER.debug("Clearing python-escpos capability cache")
    _get_capabilities.cache_clear()


def get_escpos_profile_keys() -> list[str]:
    """Sorted keys of all profiles in the database."""
    return sorted(_get_capabilities().get("profiles", {}))


def _profile_columns(profile: dict[str, Any]) -> int:
    """Column count of the profile's default font (font "0", else the first)."""
    fonts = profile.get("fonts", {})
    candidates = [fonts.get("0")] + list(fonts.values())
    for font_data in candidates:
        if isinstance(font_data, dict):
            columns = font_data.get("columns")
            if isinstance(columns, int) and columns > 0:
                return columns
    _LOGGER.debug("Profile '%s' has no font columns, using %s", profile.get("name"), DEFAULT_LINE_WIDTH)
    return DEFAULT_LINE_WIDTH


def profile_from_escpos(profile_key: str) -> PrinterProfile:
    """Create a PrinterProfile from a python-escpos database profile.

    Args:
        profile_key: Database key such as "TM-T88V" or "default".

    Returns:
        Profile with columns and cut/QR support taken from the database.

    Raises:
        KeyError: If the key is not in the database.
    """
    profiles = _get_capabilities().get("profiles", {})
    if profile_key not in profiles:
        raise KeyError(f"Unknown python-escpos profile '{profile_key}'")

    data = profiles[profile_key]
    features = data.get("features", {})
    vendor = data.get("vendor", "Generic")
    name = data.get("name", profile_key)
    display = f"{vendor} {name}" if vendor and vendor != "Generic" else name

    capabilities = PrinterCapabilities(
        align=True,
        bold=True,
        underline=True,
        double_width=True,
        double_height=True,
        cut=bool(features.get("paperFullCut", False)),
        partial_cut=bool(features.get("paperPartCut", False)),
        qr_code=bool(features.get("qrCode", False)),
        beep=False,
    )
    return PrinterProfile(
        name=display,
        cols=_profile_columns(data),
        capabilities=capabilities,
        quirks=PrinterQuirks(),
    )
