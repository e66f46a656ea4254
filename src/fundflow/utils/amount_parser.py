"""Amount parsing and formatting utilities."""

from decimal import Decimal, ROUND_HALF_UP
import math
import re


def parse_amount(amount_str: str) -> float:
    """Parse an amount string into a float.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Finite float amount

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$,\s]", "", amount_str)

    try:
        amount = float(amount_str)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not math.isfinite(amount):
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount


def parse_percentage(percentage_str: str) -> float:
    """Parse a percentage like "25", "12.5" or "40%" into a float.

    Range checking is left to the validator.

    Raises:
        ValueError: If the string is not a finite number
    """
    cleaned = percentage_str.strip().rstrip("%").strip()
    try:
        value = float(cleaned)
    except ValueError as e:
        raise ValueError(f"Could not parse percentage '{percentage_str}': {e}")
    if not math.isfinite(value):
        raise ValueError(f"Could not parse percentage '{percentage_str}': not a finite number")
    return value


def format_currency(amount: float) -> str:
    """Format an amount as whole-dollar USD, e.g. ``$1,235`` or ``-$50``.

    Halves round away from zero.
    """
    rounded = Decimal(repr(abs(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}${rounded:,}"
