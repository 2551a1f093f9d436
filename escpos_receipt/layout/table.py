"""Table rendering with per-cell word wrapping."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..mapping_utils import map_cell_align
from ..models import ComputedColumn, TableColumn
from ..text_utils import strip_diacritics, wrap_text
from .columns import compute_column_widths


def align_cell(text: Any, width: int, align: str | None = "left") -> str:
    """Fit text into a cell of exactly ``width`` characters.

    Text longer than the cell is truncated; shorter text is padded according
    to ``align`` (center puts the odd space on the right).
    """
    width = max(0, width)
    truncated = strip_diacritics(text)[:width]
    padding = width - len(truncated)

    align = map_cell_align(align)
    if align == "right":
        return " " * padding + truncated
    if align == "center":
        left = padding // 2
        return " " * left + truncated + " " * (padding - left)
    return truncated + " " * padding


def wrap_cell(text: Any, width: int) -> list[str]:
    """Wrap cell text into lines for a column of ``width`` characters."""
    return wrap_text(strip_diacritics(text), width).split("\n")


def _cell_value(row: Sequence[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def render_table(
    columns: Sequence[TableColumn],
    rows: Sequence[Sequence[Any]],
    max_width: int,
) -> str:
    """Render a table as fixed-width text.

    Layout is a header of column titles, a dash separator, then each data row.
    Cells wrap inside their column and a row is as tall as its tallest cell.

    Args:
        columns: Column definitions.
        rows: Cell values, positionally matched to ``columns``. Short rows
            are padded with empty cells.
        max_width: Line width in characters.

    Returns:
        Table lines joined with ``\\n`` (no trailing newline).
    """
    computed: list[ComputedColumn] = compute_column_widths(columns, max_width)
    lines: list[str] = []

    header = "".join(align_cell(col.title, col.computed_width, col.align) for col in computed)
    lines.append(header)
    lines.append("-" * max(0, min(max_width, len(header))))

    for row in rows:
        wrapped_cells = [
            wrap_cell(_cell_value(row, index), col.computed_width)
            for index, col in enumerate(computed)
        ]
        max_lines = max((len(cell) for cell in wrapped_cells), default=0)

        for line_index in range(max_lines):
            lines.append(
                "".join(
                    align_cell(
                        cell[line_index] if line_index < len(cell) else "",
                        col.computed_width,
                        col.align,
                    )
                    for col, cell in zip(computed, wrapped_cells)
                )
            )

    return "\n".join(lines)
