"""Fixed-width row formatting: key/value rows, product lines, money."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

from ..const import CURRENCY_PREFIX, DECIMAL_SEPARATOR, DEFAULT_LINE_WIDTH, FILL_CHAR
from .accents import strip_diacritics

CENT = Decimal("0.01")


def format_currency(value: Any) -> str:
    """Format a price as currency text.

    Numbers (including ``Decimal``) get two decimals with a comma separator
    ("R$ 9,50"), rounding halves away from zero. Strings are assumed to be
    preformatted and only get the prefix.

    Args:
        value: Price as number or string.

    Returns:
        Currency text.
    """
    if isinstance(value, (Real, Decimal)) and not isinstance(value, bool):
        amount = Decimal(value) if isinstance(value, (int, Decimal)) else Decimal(float(value))
        if amount.is_finite():
            cents = amount.quantize(CENT, rounding=ROUND_HALF_UP)
            return f"{CURRENCY_PREFIX} {cents:f}".replace(".", DECIMAL_SEPARATOR)
    return f"{CURRENCY_PREFIX} {value}"


def create_row(label: Any, value: Any, width: int) -> str:
    """Create a row with label and value.

    Args:
        label: Row label.
        value: Row value.
        width: Total row width.

    Returns:
        ``"label: value"`` padded to ``width``, or ``"label:\\nvalue"`` when it
        does not fit.
    """
    clean_label = strip_diacritics(str(label).strip())
    clean_value = strip_diacritics(str(value).strip())
    combined = f"{clean_label}: {clean_value}"

    if len(combined) <= width:
        return combined + " " * (width - len(combined))

    return f"{clean_label}:\n{clean_value}"


def create_product_line(
    quantity: Any,
    name: Any,
    price: Any = None,
    width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """Create a product line with quantity, name and optional price.

    With a price the name and price are joined by a dot leader. When fewer
    than two dots would fit, the price moves to its own right-aligned line.

    Args:
        quantity: Product quantity.
        name: Product name.
        price: Optional price (number or preformatted string).
        width: Line width.

    Returns:
        Formatted product line (one or two lines).
    """
    clean_name = strip_diacritics(str(name).strip())
    left_part = f"{quantity}x {clean_name}"

    if price is None or price == "":
        return left_part + " " * max(0, width - len(left_part))

    right_part = format_currency(price)
    dots_needed = width - len(left_part) - len(right_part)

    if dots_needed <= 1:
        return f"{left_part}\n{' ' * max(0, width - len(right_part))}{right_part}"

    return f"{left_part}{FILL_CHAR * dots_needed}{right_part}"
