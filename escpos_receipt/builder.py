"""Fluent receipt builder.

Each method appends command and text fragments to an in-memory buffer and
returns the builder, so a receipt reads as one chained expression::

    data = (
        receipt(get_profile("elgin_i9"))
        .center().h1("Padaria Central")
        .left().hr()
        .product_line(2, "Pão francês", 1.5)
        .money("Total", 3.0)
        .cut()
        .build()
    )

Features the printer profile does not support degrade to plain text or are
skipped; no builder method raises for well-typed input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
import logging
from types import SimpleNamespace
from typing import Any

from . import commands
from .capabilities import PrinterProfile, get_default_profile, get_profile
from .const import DEFAULT_QR_SIZE
from .layout import render_table
from .mapping_utils import map_align, map_count, map_cut, map_rule_char
from .models import Align, RowData, TableColumn, TextSize
from .text_utils import (
    create_product_line,
    create_row,
    encode_command,
    encode_text,
    format_currency,
    remove_accents,
    strip_diacritics,
    wrap_text,
)

_LOGGER = logging.getLogger(__name__)


def _row_pair(item: RowData | Mapping[str, Any] | Sequence[Any]) -> tuple[Any, Any]:
    """Accept RowData, {"label", "value"} mappings and (label, value) pairs."""
    if isinstance(item, RowData):
        return item.label, item.value
    if isinstance(item, Mapping):
        return item.get("label", ""), item.get("value", "")
    label, value = item
    return label, value


class ReceiptBuilder:
    """Accumulates an ESC/POS document for one printer profile."""

    def __init__(self, profile: PrinterProfile | None = None) -> None:
        self._profile: PrinterProfile = profile or get_default_profile()
        self._buffer: list[str] = []
        self._warnings: list[str] = []
        _LOGGER.debug("New receipt for '%s' (%s columns)", self._profile.name, self.cols)

        if self._profile.quirks.needs_init_before_every_print:
            self.initialize()

    @property
    def profile(self) -> PrinterProfile:
        """Return the printer profile."""
        return self._profile

    @property
    def cols(self) -> int:
        """Effective characters per line."""
        return self._profile.line_width

    # ------------------------------------------------------------------
    # Alignment
    # ------------------------------------------------------------------

    def align(self, align: str | Align | None) -> ReceiptBuilder:
        """Set alignment for the following lines ("left", "center", "right")."""
        if self._profile.capabilities.align:
            self._buffer.append(commands.align_command(map_align(align)))
        return self

    def left(self) -> ReceiptBuilder:
        return self.align(Align.LEFT)

    def center(self) -> ReceiptBuilder:
        return self.align(Align.CENTER)

    def right(self) -> ReceiptBuilder:
        return self.align(Align.RIGHT)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def _width(self, width: int | None) -> int:
        return self.cols if width is None else width

    def _wrap(self, text: Any) -> str:
        return wrap_text(strip_diacritics(text), self.cols)

    def _sized(self, text: Any, size: TextSize, supported: bool) -> ReceiptBuilder:
        wrapped = self._wrap(text)
        if not supported:
            self._buffer.append(wrapped)
            return self

        for index, line in enumerate(wrapped.split("\n")):
            if index:
                self._buffer.append("\n")
            self._buffer.extend((commands.set_size(size), line, commands.RESET_SIZE))
        return self

    def h1(self, text: Any) -> ReceiptBuilder:
        """Large header (triple width and height)."""
        caps = self._profile.capabilities
        return self._sized(text, TextSize.EXTRA_LARGE, caps.double_width and caps.double_height)

    def h2(self, text: Any) -> ReceiptBuilder:
        """Medium header (double width and height)."""
        caps = self._profile.capabilities
        return self._sized(text, TextSize.LARGE, caps.double_width and caps.double_height)

    def h3(self, text: Any) -> ReceiptBuilder:
        """Small header (double width)."""
        return self._sized(text, TextSize.DOUBLE_WIDTH, self._profile.capabilities.double_width)

    def text(self, text: Any) -> ReceiptBuilder:
        """Add wrapped text. No newline is appended."""
        self._buffer.append(self._wrap(text))
        return self

    def p(self, text: Any) -> ReceiptBuilder:
        """Add a paragraph (same output as text())."""
        return self.text(text)

    def _bold_enabled(self) -> bool:
        return self._profile.capabilities.bold and not self._profile.quirks.broken_bold_command

    def strong(self) -> ReceiptBuilder:
        """Start bold text."""
        if self._bold_enabled():
            self._buffer.append(commands.BOLD_ON)
        return self

    def end_strong(self) -> ReceiptBuilder:
        """End bold text."""
        if self._bold_enabled():
            self._buffer.append(commands.BOLD_OFF)
        return self

    def bold(self, text: Any) -> ReceiptBuilder:
        """Add wrapped text in bold."""
        return self.strong().text(text).end_strong()

    def underline(self, text: Any) -> ReceiptBuilder:
        """Add wrapped, underlined text."""
        wrapped = self._wrap(text)
        if self._profile.capabilities.underline:
            self._buffer.extend((commands.UNDERLINE_ON, wrapped, commands.UNDERLINE_OFF))
        else:
            self._buffer.append(wrapped)
        return self

    def br(self, lines: int = 1) -> ReceiptBuilder:
        """Add line break(s)."""
        self._buffer.append("\n" * map_count(lines))
        return self

    def hr(self, width: int | None = None, style: str = "dashed") -> ReceiptBuilder:
        """Add a horizontal rule on its own line.

        Args:
            width: Rule length, capped at the line width.
            style: "dashed" (-), "solid" (_) or "double" (=).
        """
        length = min(width if width is not None else self.cols, self.cols)
        self._buffer.append(f"\n{map_rule_char(style) * max(0, length)}\n")
        return self

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def table(
        self,
        columns: Sequence[TableColumn | Mapping[str, Any]],
        rows: Iterable[Sequence[Any]],
    ) -> ReceiptBuilder:
        """Add a table with wrapped cells.

        Columns may be TableColumn instances or mappings with the same keys.
        """
        cols = [col if isinstance(col, TableColumn) else TableColumn(**col) for col in columns]
        self._buffer.append(render_table(cols, list(rows), self.cols))
        return self

    def row(self, label: Any, value: Any, width: int | None = None) -> ReceiptBuilder:
        """Add a "label: value" row."""
        self._buffer.append(create_row(label, value, self._width(width)))
        return self

    def rows(
        self,
        items: Iterable[RowData | Mapping[str, Any] | Sequence[Any]],
        width: int | None = None,
    ) -> ReceiptBuilder:
        """Add several "label: value" rows."""
        self._buffer.append(
            "\n".join(create_row(*_row_pair(item), self._width(width)) for item in items)
        )
        return self

    def product_line(
        self,
        quantity: int | float | str,
        name: Any,
        price: float | Decimal | str | None = None,
        width: int | None = None,
    ) -> ReceiptBuilder:
        """Add "2x Name......R$ 3,00"."""
        self._buffer.append(create_product_line(quantity, name, price, self._width(width)))
        return self

    def money(self, label: Any, value: float | Decimal, width: int | None = None) -> ReceiptBuilder:
        """Add a row with the value formatted as currency."""
        self._buffer.append(create_row(label, format_currency(value), self._width(width)))
        return self

    # ------------------------------------------------------------------
    # Printer control
    # ------------------------------------------------------------------

    def initialize(self) -> ReceiptBuilder:
        """Reset the printer and select the character set."""
        self._buffer.append(commands.INITIALIZE)
        self._buffer.append(commands.SELECT_CHARSET)
        return self

    def cut(self, full: bool | str = True, feed_lines: int | None = None) -> ReceiptBuilder:
        """Feed and cut the paper.

        A profile with an alternative cut command sends only that command.
        Otherwise the paper is fed ``feed_lines`` lines (default: the
        profile's extra feed, 3 if unset) and cut when the printer has a
        cutter. Partial cuts fall back to full cuts on printers without them.

        Args:
            full: True/"full" for a full cut, False/"partial" for a partial cut.
            feed_lines: Lines to feed before cutting.
        """
        quirks = self._profile.quirks
        caps = self._profile.capabilities

        if quirks.alternative_cut_command:
            _LOGGER.debug("Using alternative cut command for '%s'", self._profile.name)
            self._buffer.append(commands.Command(quirks.alternative_cut_command))
            return self

        lines = quirks.feed_before_cut if feed_lines is None else map_count(feed_lines, quirks.feed_before_cut)
        self._buffer.append(commands.feed(lines))

        if not caps.cut:
            _LOGGER.debug("'%s' has no cutter, feeding only", self._profile.name)
            return self

        want_full = map_cut(full)
        if not want_full and not caps.partial_cut:
            _LOGGER.debug("'%s' cannot partial cut, using full cut", self._profile.name)
            want_full = True
        self._buffer.append(commands.CUT_FULL if want_full else commands.CUT_PARTIAL)
        return self

    def feed(self, lines: int = 1) -> ReceiptBuilder:
        """Feed paper by emitting newlines."""
        self._buffer.append("\n" * map_count(lines))
        return self

    def beep(self) -> ReceiptBuilder:
        """Sound the buzzer."""
        if self._profile.capabilities.beep:
            self._buffer.append(commands.BEEP)
        return self

    def qr_code(self, data: str, size: int = DEFAULT_QR_SIZE) -> ReceiptBuilder:
        """Add a QR code.

        QR commands differ between manufacturers and are not generated yet.
        Printers that declare QR support get a warning instead; the document
        is otherwise unaffected.
        """
        if self._profile.capabilities.qr_code:
            _LOGGER.warning("QR code support not yet implemented, skipping %s characters of data", len(str(data)))
            self._warnings.append(f"qr_code skipped: not implemented (size {size})")
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _crlf(self, fragment: str) -> str:
        # Every 0x0A is rewritten, command parameters included: ESC d 10
        # goes out as ESC d CR LF on CRLF printers.
        if self._profile.quirks.needs_crlf:
            return fragment.replace("\n", "\r\n")
        return fragment

    def build(self) -> str:
        """Join the buffer into the final ESC/POS string.

        The buffer is left untouched, so calling build() again returns the
        same result.
        """
        return self._crlf("".join(self._buffer))

    def build_bytes(self, codepage: str | None = None) -> bytes:
        """Build and encode the document for writing to the printer.

        Text fragments are encoded with ``codepage``; command fragments are
        sent byte for byte whatever the codepage.
        """
        out = bytearray()
        for fragment in self._buffer:
            if isinstance(fragment, commands.Command):
                out.extend(encode_command(self._crlf(fragment)))
            else:
                out.extend(encode_text(self._crlf(fragment), codepage))
        return bytes(out)

    def get_diagnostics(self) -> dict[str, Any]:
        """Return diagnostic information about the document."""
        return {
            "profile": self._profile.name,
            "line_width": self.cols,
            "fragments": len(self._buffer),
            "warnings": list(self._warnings),
        }


def receipt(profile: PrinterProfile | str | None = None) -> ReceiptBuilder:
    """Create a new receipt builder.

    Args:
        profile: Printer profile or built-in profile key; the generic ESC/POS
            profile when omitted.

    Raises:
        KeyError: If ``profile`` is an unknown profile key.
    """
    if isinstance(profile, str):
        profile = get_profile(profile)
    return ReceiptBuilder(profile)


# Text helpers for callers laying out their own lines
helpers = SimpleNamespace(
    remove_accents=remove_accents,
    wrap_text=wrap_text,
    create_row=create_row,
    create_product_line=create_product_line,
)
