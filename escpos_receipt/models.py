"""Value types shared by the layout helpers and the receipt builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

CellAlign = Literal["left", "right", "center"]


class Align(IntEnum):
    """ESC a parameter values."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class TextSize(IntEnum):
    """GS ! parameter values used for headers.

    The high nibble selects the width multiplier and the low nibble the height
    multiplier (both zero-based).
    """

    NORMAL = 0x00
    DOUBLE_WIDTH = 0x10
    LARGE = 0x11
    EXTRA_LARGE = 0x22


@dataclass(frozen=True)
class TableColumn:
    """Column definition for ReceiptBuilder.table().

    A non-zero ``width`` fixes the column; otherwise the column shares the
    remaining line width with the other flexible columns by ``flex`` weight.
    """

    title: str
    width: int | None = None
    flex: float | None = None
    align: CellAlign = "left"


@dataclass(frozen=True)
class ComputedColumn:
    """A TableColumn together with the width the allocator gave it."""

    column: TableColumn
    computed_width: int

    @property
    def title(self) -> str:
        return self.column.title

    @property
    def align(self) -> CellAlign:
        return self.column.align


@dataclass(frozen=True)
class RowData:
    """Label/value pair rendered by ReceiptBuilder.rows()."""

    label: str
    value: str
