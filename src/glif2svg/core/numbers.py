"""Numeric formatting for SVG output.

Every number written to a document goes through format_number so path data
and attributes share one rounding rule.
"""

from decimal import ROUND_DOWN, Decimal, localcontext


def format_number(value: float, precision: int = 6) -> str:
    """Format a number with at most `precision` decimals.

    The value is truncated toward zero starting from its shortest decimal
    representation, so 2/3 at six digits is written 0.666666. Trailing zeros
    and a bare decimal point are removed, and negative zero is written as 0.

    Args:
        value: Number to format
        precision: Number of decimal digits to keep (>= 0)

    Returns:
        Formatted number using '.' as decimal separator

    Raises:
        ValueError: If precision is negative

    Examples:
        >>> format_number(1 / 3)
        '0.333333'
        >>> format_number(12.5, 0)
        '12'
        >>> format_number(100.0)
        '100'
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    number = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-precision)

    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals.
        ctx.prec = max(number.adjusted() + 1, 1) + precision + 2
        rounded = number.quantize(quantum, rounding=ROUND_DOWN)

    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text
