"""Printer profile dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..const import DEFAULT_FEED_BEFORE_CUT


@dataclass(frozen=True)
class PrinterCapabilities:
    """Formatting features a printer implements correctly."""

    align: bool = False
    bold: bool = False
    underline: bool = False
    double_width: bool = False
    double_height: bool = False
    cut: bool = False
    partial_cut: bool = False
    qr_code: bool = False
    beep: bool = False


@dataclass(frozen=True)
class PrinterQuirks:
    """Printer-specific deviations and their workarounds."""

    # Characters per line when it differs from cols
    max_line_length: int | None = None
    # Line feeds must be sent as CR LF
    needs_crlf: bool = False
    # ESC E garbles output; bold is never sent
    broken_bold_command: bool = False
    # Every document starts with ESC @
    needs_init_before_every_print: bool = False
    # Lines fed before the knife so the last line clears it
    extra_feed_before_cut: int | None = None
    # Raw command replacing the whole feed-and-cut sequence
    alternative_cut_command: str | None = None

    @property
    def feed_before_cut(self) -> int:
        if self.extra_feed_before_cut is None:
            return DEFAULT_FEED_BEFORE_CUT
        return self.extra_feed_before_cut


@dataclass(frozen=True)
class PrinterProfile:
    """Complete printer profile configuration."""

    name: str
    cols: int
    capabilities: PrinterCapabilities = field(default_factory=PrinterCapabilities)
    quirks: PrinterQuirks = field(default_factory=PrinterQuirks)

    def __post_init__(self) -> None:
        if self.cols < 1:
            raise ValueError(f"Printer profile '{self.name}' needs at least one column, got {self.cols}")

    @property
    def line_width(self) -> int:
        """Width used for wrapping and layout."""
        if self.quirks.max_line_length:
            return self.quirks.max_line_length
        return self.cols
