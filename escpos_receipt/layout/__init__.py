"""Table layout: column-width allocation and multi-line cell rendering."""

from __future__ import annotations

from .columns import compute_column_widths
from .table import align_cell, render_table, wrap_cell

__all__ = [
    "align_cell",
    "compute_column_widths",
    "render_table",
    "wrap_cell",
]
