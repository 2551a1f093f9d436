"""Tests for the receipt builder."""

import logging
from typing import Any

import pytest

from escpos_receipt import ReceiptBuilder, RowData, TableColumn, helpers, receipt
from escpos_receipt.capabilities import ELGIN_I9_PROFILE, PrinterCapabilities, PrinterProfile
from escpos_receipt.commands import (
    BEEP,
    BOLD_OFF,
    BOLD_ON,
    CUT_FULL,
    CUT_PARTIAL,
    INITIALIZE,
    RESET_SIZE,
    SELECT_CHARSET,
    UNDERLINE_OFF,
    UNDERLINE_ON,
    Commands,
)

H1 = "\x1d!\x22"
H2 = "\x1d!\x11"
H3 = "\x1d!\x10"


class TestConstruction:
    def test_default_profile(self) -> None:
        builder = receipt()
        assert builder.profile.name == "Generic ESC/POS"
        assert builder.cols == 48
        assert builder.build() == ""

    def test_profile_by_key(self) -> None:
        assert receipt("printer_58mm").cols == 32

    def test_unknown_profile_key(self) -> None:
        with pytest.raises(KeyError):
            receipt("does_not_exist")

    def test_init_quirk_initializes_once(self) -> None:
        out = receipt(ELGIN_I9_PROFILE).build()
        assert out == INITIALIZE + SELECT_CHARSET

    def test_max_line_length_overrides_cols(self, make_profile: Any) -> None:
        builder = receipt(make_profile(cols=48, max_line_length=42))
        assert builder.cols == 42

    def test_chaining_returns_same_builder(self) -> None:
        builder = receipt()
        assert builder.left().text("a").br().cut() is builder
        assert isinstance(builder, ReceiptBuilder)

    def test_builders_do_not_share_buffers(self) -> None:
        first = receipt().text("one")
        second = receipt().text("two")
        assert first.build() == "one"
        assert second.build() == "two"


class TestAlignment:
    def test_alignment_codes(self) -> None:
        out = receipt().left().center().right().build()
        assert out == "\x1ba\x00\x1ba\x01\x1ba\x02"

    def test_align_by_name(self) -> None:
        assert receipt().align("CENTER").build() == Commands.ALIGN_CENTER

    def test_unknown_align_name_is_left(self) -> None:
        assert receipt().align("middle").build() == Commands.ALIGN_LEFT

    def test_unsupported_alignment_is_noop(self, bare_profile: PrinterProfile) -> None:
        assert receipt(bare_profile).left().center().right().build() == ""


class TestHeaders:
    def test_h1_wraps_each_line(self, make_profile: Any) -> None:
        out = receipt(make_profile(cols=10)).h1("Hello big world").build()
        assert out == f"{H1}Hello big{RESET_SIZE}\n{H1}world{RESET_SIZE}"

    def test_h2(self) -> None:
        assert receipt().h2("Menu").build() == f"{H2}Menu{RESET_SIZE}"

    def test_h3_needs_only_double_width(self, make_profile: Any) -> None:
        caps = PrinterCapabilities(double_width=True)
        assert receipt(make_profile(capabilities=caps)).h3("Sub").build() == f"{H3}Sub{RESET_SIZE}"

    def test_h1_h2_need_double_height(self, make_profile: Any) -> None:
        caps = PrinterCapabilities(double_width=True)
        builder = receipt(make_profile(capabilities=caps))
        assert builder.h1("A").h2("B").build() == "AB"

    def test_headers_plain_when_unsupported(self, bare_profile: PrinterProfile) -> None:
        assert receipt(bare_profile).h1("Açaí").h3("x").build() == "Acaix"


class TestText:
    def test_text_wrapped_and_stripped(self, make_profile: Any) -> None:
        out = receipt(make_profile(cols=12)).text("Obrigado pela preferência").build()
        assert out == "Obrigado\npela\npreferencia"

    def test_p_same_as_text(self) -> None:
        assert receipt().p("hello").build() == receipt().text("hello").build()

    def test_non_string_coerced(self) -> None:
        assert receipt().text(42).build() == "42"

    def test_bold(self) -> None:
        assert receipt().strong().text("x").end_strong().build() == f"{BOLD_ON}x{BOLD_OFF}"

    def test_bold_helper(self) -> None:
        assert receipt().bold("x").build() == f"{BOLD_ON}x{BOLD_OFF}"

    def test_broken_bold_emits_nothing(self, make_profile: Any) -> None:
        profile = make_profile(broken_bold_command=True)
        assert profile.capabilities.bold
        assert receipt(profile).strong().text("x").end_strong().build() == "x"

    def test_bold_unsupported(self, bare_profile: PrinterProfile) -> None:
        assert receipt(bare_profile).bold("x").build() == "x"

    def test_underline(self) -> None:
        assert receipt().underline("Note").build() == f"{UNDERLINE_ON}Note{UNDERLINE_OFF}"

    def test_underline_unsupported(self, bare_profile: PrinterProfile) -> None:
        assert receipt(bare_profile).underline("Note").build() == "Note"


class TestBreaksAndRules:
    def test_br(self) -> None:
        assert receipt().br().br(3).build() == "\n\n\n\n"

    def test_negative_br_is_empty(self) -> None:
        assert receipt().br(-2).build() == ""

    def test_feed(self) -> None:
        assert receipt().feed(2).build() == "\n\n"

    def test_hr_full_width(self, make_profile: Any) -> None:
        assert receipt(make_profile(cols=10)).hr().build() == "\n----------\n"

    @pytest.mark.parametrize(("style", "char"), [("dashed", "-"), ("solid", "_"), ("double", "=")])
    def test_hr_styles(self, style: str, char: str) -> None:
        assert receipt().hr(5, style).build() == f"\n{char * 5}\n"

    def test_hr_capped_at_line_width(self, make_profile: Any) -> None:
        assert receipt(make_profile(cols=8)).hr(20).build() == "\n--------\n"


class TestRows:
    def test_row(self, make_profile: Any) -> None:
        assert receipt(make_profile(cols=12)).row("Mesa", 7).build() == "Mesa: 7" + " " * 5

    def test_row_explicit_width(self) -> None:
        assert receipt().row("A", "B", width=6).build() == "A: B  "

    def test_rows_accepts_several_shapes(self, make_profile: Any) -> None:
        items = [RowData("A", "1"), {"label": "B", "value": "2"}, ("C", "3")]
        out = receipt(make_profile(cols=6)).rows(items).build()
        assert out == "A: 1  \nB: 2  \nC: 3  "

    def test_product_line(self, make_profile: Any) -> None:
        out = receipt(make_profile(cols=20)).product_line(1, "Widget", 9.5).build()
        assert out == "1x Widget....R$ 9,50"

    def test_money(self, make_profile: Any) -> None:
        out = receipt(make_profile(cols=20)).money("Total", 12.3).build()
        assert out == "Total: R$ 12,30" + " " * 5

    def test_table(self, make_profile: Any) -> None:
        columns = [TableColumn("Item"), {"title": "Qty", "width": 5, "align": "right"}]
        out = receipt(make_profile(cols=20)).table(columns, [["Cafe", 2]]).build()
        assert out.split("\n") == ["Item" + " " * 11 + "  Qty", "-" * 20, "Cafe" + " " * 11 + "    2"]


class TestControl:
    def test_initialize(self) -> None:
        assert receipt().initialize().build() == "\x1b@\x1bR\x00"

    def test_beep(self) -> None:
        assert receipt().beep().build() == BEEP

    def test_beep_unsupported(self, bare_profile: PrinterProfile) -> None:
        assert receipt(bare_profile).beep().build() == ""

    def test_cut_default(self) -> None:
        assert receipt().cut().build() == "\x1bd\x03" + CUT_FULL

    def test_cut_partial(self) -> None:
        assert receipt().cut(False).build() == "\x1bd\x03" + CUT_PARTIAL

    def test_cut_partial_by_name(self) -> None:
        assert receipt().cut("partial", 1).build() == "\x1bd\x01" + CUT_PARTIAL

    def test_cut_partial_falls_back_to_full(self) -> None:
        out = receipt(ELGIN_I9_PROFILE).cut(False).build()
        assert out.endswith("\x1bd\x05" + CUT_FULL)

    def test_cut_uses_profile_feed(self) -> None:
        assert receipt("bematech_mp4200").cut().build() == "\x1bd\x04" + CUT_FULL

    def test_cut_without_cutter_only_feeds(self, bare_profile: PrinterProfile) -> None:
        assert receipt(bare_profile).cut().build() == "\x1bd\x03"

    @pytest.mark.parametrize("has_cutter", [True, False])
    def test_alternative_cut_command_overrides(self, make_profile: Any, has_cutter: bool) -> None:
        caps = PrinterCapabilities(cut=has_cutter)
        profile = make_profile(capabilities=caps, alternative_cut_command="\x1bi")
        assert receipt(profile).cut(False, 8).build() == "\x1bi"

    def test_feed_count_clamped(self) -> None:
        assert receipt().cut(True, 999).build() == "\x1bd\xff" + CUT_FULL


class TestQrCode:
    def test_warns_when_supported(self, caplog: pytest.LogCaptureFixture) -> None:
        builder = receipt()
        with caplog.at_level(logging.WARNING):
            out = builder.qr_code("https://example.com").text("after").build()
        assert out == "after"
        assert "not yet implemented" in caplog.text
        assert len(builder.get_diagnostics()["warnings"]) == 1

    def test_silent_when_unsupported(self, caplog: pytest.LogCaptureFixture) -> None:
        builder = receipt("bematech_mp4200")
        with caplog.at_level(logging.WARNING):
            builder.qr_code("data")
        assert caplog.text == ""
        assert builder.get_diagnostics()["warnings"] == []


class TestBuild:
    def test_order_preserved(self) -> None:
        out = receipt().center().text("A").br().strong().text("B").end_strong().build()
        assert out == f"{Commands.ALIGN_CENTER}A\n{BOLD_ON}B{BOLD_OFF}"

    def test_crlf_quirk(self) -> None:
        out = receipt(ELGIN_I9_PROFILE).text("a").br(2).hr(3).build()
        assert "\r\n" in out
        assert "\n" not in out.replace("\r\n", "")

    def test_build_is_idempotent(self) -> None:
        builder = receipt(ELGIN_I9_PROFILE).h1("Loja").br().money("Total", 5).cut()
        assert builder.build() == builder.build()

    def test_build_bytes(self) -> None:
        data = receipt().initialize().text("Olá").cut().build_bytes()
        assert data == b"\x1b@\x1bR\x00Ola\x1bd\x03\x1dV\x00"

    def test_build_bytes_keeps_command_parameters(self) -> None:
        data = receipt().text("ß").cut(True, 200).build_bytes("CP850")
        assert data == b"\xe1\x1bd\xc8\x1dV\x00"

    def test_build_bytes_alternative_cut_is_raw(self, make_profile: Any) -> None:
        builder = receipt(make_profile(alternative_cut_command="\x1bi\xc8"))
        assert builder.cut().build_bytes("CP850") == b"\x1bi\xc8"

    def test_build_bytes_styled_text_uses_codepage(self) -> None:
        data = receipt().underline("x").h3("y").build_bytes("CP437")
        assert data == b"\x1b-\x01x\x1b-\x00\x1d!\x10y\x1d!\x00"

    def test_build_bytes_matches_build_for_crlf(self) -> None:
        builder = receipt(ELGIN_I9_PROFILE).text("a").br().cut()
        assert builder.build_bytes() == builder.build().encode("latin-1")

    def test_crlf_quirk_rewrites_feed_parameter(self, make_profile: Any) -> None:
        # ESC d 10 carries a line feed as its parameter byte
        out = receipt(make_profile(needs_crlf=True)).cut(True, 10).build()
        assert out.startswith("\x1bd\r\n")

    def test_diagnostics(self) -> None:
        diag = receipt("printer_58mm").text("x").br().get_diagnostics()
        assert diag == {"profile": "Generic 58mm", "line_width": 32, "fragments": 2, "warnings": []}

    def test_full_receipt(self) -> None:
        out = (
            receipt("printer_58mm")
            .center()
            .h2("Padaria")
            .left()
            .hr()
            .product_line(2, "Pão francês", 1.5)
            .br()
            .money("Total", 3)
            .cut()
            .build()
        )
        assert "2x Pao frances" in out
        assert "Total: R$ 3,00" in out
        assert out.endswith(CUT_FULL)


class TestHelpers:
    def test_helpers_namespace(self) -> None:
        assert helpers.remove_accents("é") == "e"
        assert helpers.wrap_text("a b", 1) == "a\nb"
        assert helpers.create_row("a", "b", 4) == "a: b"
        assert helpers.create_product_line(1, "x", None, 4) == "1x x"
