"""Validation schemas for printer profiles given as plain dictionaries."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import voluptuous as vol

from ..const import (
    CAPABILITY_FLAGS,
    CONF_CAPABILITIES,
    CONF_COLS,
    CONF_NAME,
    CONF_QUIRKS,
    MAX_FEED_LINES,
    QUIRK_ALTERNATIVE_CUT_COMMAND,
    QUIRK_BROKEN_BOLD_COMMAND,
    QUIRK_EXTRA_FEED_BEFORE_CUT,
    QUIRK_MAX_LINE_LENGTH,
    QUIRK_NEEDS_CRLF,
    QUIRK_NEEDS_INIT_BEFORE_EVERY_PRINT,
)
from .profile import PrinterCapabilities, PrinterProfile, PrinterQuirks

CAPABILITIES_SCHEMA = vol.Schema(
    {vol.Optional(flag, default=False): vol.Boolean() for flag in CAPABILITY_FLAGS}
)

QUIRKS_SCHEMA = vol.Schema(
    {
        vol.Optional(QUIRK_MAX_LINE_LENGTH): vol.Any(None, vol.All(vol.Coerce(int), vol.Range(min=1))),
        vol.Optional(QUIRK_NEEDS_CRLF, default=False): vol.Boolean(),
        vol.Optional(QUIRK_BROKEN_BOLD_COMMAND, default=False): vol.Boolean(),
        vol.Optional(QUIRK_NEEDS_INIT_BEFORE_EVERY_PRINT, default=False): vol.Boolean(),
        vol.Optional(QUIRK_EXTRA_FEED_BEFORE_CUT): vol.Any(
            None, vol.All(vol.Coerce(int), vol.Range(min=0, max=MAX_FEED_LINES))
        ),
        vol.Optional(QUIRK_ALTERNATIVE_CUT_COMMAND): vol.Any(None, str),
    }
)

PROFILE_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME): vol.All(str, vol.Length(min=1)),
        vol.Required(CONF_COLS): vol.All(vol.Coerce(int), vol.Range(min=1)),
        vol.Optional(CONF_CAPABILITIES, default=dict): CAPABILITIES_SCHEMA,
        vol.Optional(CONF_QUIRKS, default=dict): QUIRKS_SCHEMA,
    }
)


def profile_from_dict(data: dict[str, Any]) -> PrinterProfile:
    """Validate a profile dictionary and build a PrinterProfile.

    Missing capability flags default to False, missing quirks to "not
    affected".

    Raises:
        voluptuous.Invalid: If the dictionary does not match PROFILE_SCHEMA.
    """
    validated = PROFILE_SCHEMA(data)
    return PrinterProfile(
        name=validated[CONF_NAME],
        cols=validated[CONF_COLS],
        capabilities=PrinterCapabilities(**validated[CONF_CAPABILITIES]),
        quirks=PrinterQuirks(**validated[CONF_QUIRKS]),
    )


def profile_to_dict(profile: PrinterProfile) -> dict[str, Any]:
    """Convert a PrinterProfile to a dictionary accepted by profile_from_dict."""
    quirks = {key: value for key, value in asdict(profile.quirks).items() if value is not None}
    return {
        CONF_NAME: profile.name,
        CONF_COLS: profile.cols,
        CONF_CAPABILITIES: asdict(profile.capabilities),
        CONF_QUIRKS: quirks,
    }
