"""Column-width allocation for receipt tables."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import math

from ..const import MIN_COLUMN_WIDTH
from ..models import ComputedColumn, TableColumn

_LOGGER = logging.getLogger(__name__)


def _is_fixed(column: TableColumn) -> bool:
    return bool(column.width)


def _flex(column: TableColumn) -> float:
    return column.flex if column.flex is not None else 1


def compute_column_widths(columns: Sequence[TableColumn], max_width: int) -> list[ComputedColumn]:
    """Distribute ``max_width`` characters over the table columns.

    Fixed columns keep their width (negatives count as 0). Flexible columns
    share what is left in proportion to their flex weight, never going below
    MIN_COLUMN_WIDTH. If the result overflows ``max_width`` every column is
    scaled down and floored again; the total can still miss ``max_width`` by a
    few characters, which is left as is so existing receipts keep their
    layout.

    Args:
        columns: Column definitions in display order.
        max_width: Characters available on the line.

    Returns:
        One ComputedColumn per input column, in the same order.
    """
    fixed_total = sum(max(0, int(col.width)) for col in columns if _is_fixed(col))
    total_flex = sum(_flex(col) for col in columns if not _is_fixed(col))
    remaining = max(max_width - fixed_total, 0)

    widths: list[int] = []
    for col in columns:
        if _is_fixed(col):
            widths.append(max(0, int(col.width)))
            continue

        if total_flex > 0:
            proportional = math.floor(remaining * _flex(col) / total_flex)
        else:
            proportional = 0
        widths.append(max(proportional, MIN_COLUMN_WIDTH))

    total = sum(widths)
    if total > max_width:
        scale = max_width / total
        _LOGGER.debug("Table columns need %s of %s characters, scaling by %.3f", total, max_width, scale)
        widths = [max(MIN_COLUMN_WIDTH, math.floor(width * scale)) for width in widths]

    return [ComputedColumn(column=col, computed_width=width) for col, width in zip(columns, widths)]
