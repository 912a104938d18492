"""Currency formatting utilities."""

from decimal import Decimal


def format_currency(amount: Decimal | int | float) -> str:
    """Format an amount as dollars with thousands separators.

    Whole amounts render without decimals ("$1,234") and fractional ones
    with two places ("$1,234.50"). Negative amounts keep the sign after the
    dollar sign ("$-300").
    """
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return f"${value:,.0f}"
    return f"${value:,.2f}"
