from collections.abc import Generator
from dataclasses import replace
from typing import Any

import pytest

from escpos_receipt.capabilities import (
    GENERIC_PROFILE,
    PrinterCapabilities,
    PrinterProfile,
    PrinterQuirks,
    clear_capabilities_cache,
)
from escpos_receipt.capabilities import escpos_db


@pytest.fixture
def generic_profile() -> PrinterProfile:
    return GENERIC_PROFILE


@pytest.fixture
def bare_profile() -> PrinterProfile:
    """A printer that supports nothing beyond plain text."""
    return PrinterProfile(name="Bare", cols=32, capabilities=PrinterCapabilities(), quirks=PrinterQuirks())


@pytest.fixture
def make_profile() -> Any:
    """Build a variant of the generic profile with some fields replaced."""

    def _make(cols: int = 48, **quirks: Any) -> PrinterProfile:
        caps = quirks.pop("capabilities", GENERIC_PROFILE.capabilities)
        return replace(
            GENERIC_PROFILE,
            name="Test",
            cols=cols,
            capabilities=caps,
            quirks=replace(GENERIC_PROFILE.quirks, **quirks),
        )

    return _make


@pytest.fixture
def fake_escpos_db(monkeypatch: Any) -> Generator[dict[str, Any], None, None]:
    """Replace the python-escpos capability database with a small fixture."""
    data: dict[str, Any] = {
        "profiles": {
            "default": {
                "name": "Default",
                "vendor": "Generic",
                "fonts": {"0": {"name": "Font A", "columns": 42}},
                "features": {"paperFullCut": True, "paperPartCut": True, "qrCode": True},
            },
            "TM-T88V": {
                "name": "TM-T88V",
                "vendor": "Epson",
                "fonts": {"0": {"name": "Font A", "columns": 42}, "1": {"name": "Font B", "columns": 56}},
                "features": {"paperFullCut": True, "paperPartCut": False, "qrCode": True},
            },
            "NoCutter": {
                "name": "NoCutter",
                "vendor": "Generic",
                "fonts": {},
                "features": {},
            },
        }
    }
    clear_capabilities_cache()
    monkeypatch.setattr(escpos_db, "_get_capabilities", lambda: data)
    yield data
