"""Decimal money helpers for tier prices and discount amounts.

Amounts are display-only here: the engine labels tiers, it never recomputes
charges. Missing or unparseable amounts read as zero.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


def to_decimal(value: object) -> Decimal:
    """Coerce an optional amount to Decimal; None/garbage -> 0."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if not amount.is_finite():
        return Decimal(0)
    return amount


def money_to_display(amount: Decimal) -> str:
    """Format an amount as dollars: 65 -> '$65.00', -12.5 -> '-$12.50'."""
    quantized = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if quantized < 0:
        return f"-${-quantized:,.2f}"
    return f"${quantized:,.2f}"


def percent_to_display(value: Decimal) -> str:
    """Format a percentage discount: 10 -> '10%', 12.5 -> '12.5%'."""
    normalized = value.normalize()
    if normalized == normalized.to_integral_value():
        return f"{int(normalized)}%"
    return f"{normalized}%"
