"""Tests for mapping_utils functions."""

from escpos_receipt.mapping_utils import map_align, map_cell_align, map_count, map_cut, map_rule_char
from escpos_receipt.models import Align


class TestMapAlign:
    def test_named(self) -> None:
        assert map_align("left") is Align.LEFT
        assert map_align("center") is Align.CENTER
        assert map_align("right") is Align.RIGHT

    def test_case_insensitive(self) -> None:
        assert map_align("Right") is Align.RIGHT

    def test_enum_passthrough(self) -> None:
        assert map_align(Align.CENTER) is Align.CENTER

    def test_none_and_unknown_default_left(self) -> None:
        assert map_align(None) is Align.LEFT
        assert map_align("justify") is Align.LEFT


class TestMapCellAlign:
    def test_values(self) -> None:
        assert map_cell_align("CENTER") == "center"
        assert map_cell_align(None) == "left"
        assert map_cell_align("diagonal") == "left"


class TestMapRuleChar:
    def test_styles(self) -> None:
        assert map_rule_char("dashed") == "-"
        assert map_rule_char("solid") == "_"
        assert map_rule_char("DOUBLE") == "="

    def test_unknown_is_dashed(self) -> None:
        assert map_rule_char("dotted") == "-"
        assert map_rule_char(None) == "-"


class TestMapCut:
    def test_bool(self) -> None:
        assert map_cut(True) is True
        assert map_cut(False) is False

    def test_strings(self) -> None:
        assert map_cut("full") is True
        assert map_cut("PARTIAL") is False

    def test_none_and_unknown_full(self) -> None:
        assert map_cut(None) is True
        assert map_cut("sideways") is True


class TestMapCount:
    def test_int_passthrough(self) -> None:
        assert map_count(3) == 3

    def test_numeric_string(self) -> None:
        assert map_count("4") == 4

    def test_negative_clamped(self) -> None:
        assert map_count(-1) == 0

    def test_invalid_uses_default(self) -> None:
        assert map_count("many", default=2) == 2
        assert map_count(None) == 1
