"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

# Anything that is not part of the number: currency symbols and codes,
# whitespace, apostrophes used as separators.
_NON_NUMERIC = re.compile(r"[^\d.,()+\-]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45", "CAD$123.45", "123.45 EUR"
    - "-123.45", "-$123.45", "$-123.45"
    - "1,234.56"
    - "(123.45)", "($1,234.50)" (negative in parentheses)
    - "123.45-" (trailing minus)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = _NON_NUMERIC.sub("", amount_str.strip())

    is_negative = False
    if cleaned.endswith(")") and "(" in cleaned:
        is_negative = True
        cleaned = cleaned.replace("(", "").replace(")", "")

    if cleaned.endswith("-"):
        is_negative = True
        cleaned = cleaned[:-1]

    cleaned = cleaned.replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'") from None

    if is_negative:
        amount = -abs(amount)
    return amount
