"""
Money Utilities - integer minor units in, Decimal out.

Prices and totals are carried as integer minor units (cents) and only
turned into text with two fractional digits when they are displayed.
Conversion works on the integer itself, so no decimal context limits or
rounds large totals.
"""
from decimal import Decimal

# Minor units per major unit
MINOR_UNITS = 100


def _split(minor: int) -> str:
    """Exact "major.minor" text for an integer amount, e.g. -5 -> "-0.05"."""
    sign = "-" if minor < 0 else ""
    major, cents = divmod(abs(int(minor)), MINOR_UNITS)
    return f"{sign}{major}.{cents:02d}"


def from_minor_units(minor: int) -> Decimal:
    """
    Convert integer minor units to a major-unit Decimal with 2 digits.

    Args:
        minor: Amount in minor units (e.g., 28800)

    Returns:
        Amount in major units (e.g., Decimal("288.00"))
    """
    # Decimal(str) is exact, independent of the context precision
    return Decimal(_split(minor))


def format_money(minor: int, symbol: str) -> str:
    """
    Format a minor-unit amount with a currency symbol.

    The symbol is prepended as-is; symbols such as "LEI " carry their own
    spacing. No thousands separators are added.

    Args:
        minor: Amount in minor units
        symbol: Display symbol

    Returns:
        Formatted string, e.g. "€2.00"
    """
    return f"{symbol}{_split(minor)}"


def multiply(unit_price: int, quantity: int) -> int:
    """Line total in minor units."""
    return int(unit_price) * int(quantity)
