"""
Currency shaping for dashboard records.

Amounts are stored as integer cents. Aggregates coming back from the driver
may be int, Decimal or text, and SUM over an empty set is NULL, so every
value goes through ``to_number`` before it is formatted.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Union

Number = Union[int, float, Decimal]

CENTS = Decimal(100)
TWO_PLACES = Decimal("0.01")


def to_number(value: Any, default: Number = 0) -> Number:
    """
    Coerce a driver value to a number.

    None and blank strings become ``default``. Text is parsed as an int when
    it is integral, otherwise as a Decimal.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float, Decimal)):
        return value
    text = str(value).strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Not a numeric value: {value!r}")


def format_currency(amount: Any) -> str:
    """
    Format an amount in cents as US dollars, e.g. 123456 -> "$1,234.56".

    None formats the same as 0.
    """
    value = to_number(amount)
    if isinstance(value, float):
        value = Decimal(repr(value))
    dollars = (Decimal(value) / CENTS).quantize(TWO_PLACES)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def cents_to_units(amount: Any) -> float:
    return float(Decimal(to_number(amount)) / CENTS)
