"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money string into a Decimal rounded to cents.

    Handles both decimal conventions:
    - "120", "120.00", "120,00"
    - "R$ 120,00", "$120.00"
    - "1.234,56" (Brazilian grouping) and "1,234.56"

    When both separators appear, the last one is the decimal separator.
    A lone comma is always a decimal separator.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount with two decimal places

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace and currency symbols
    cleaned = re.sub(r"(R\$|[$€£])", "", amount_str.strip()).strip()
    cleaned = cleaned.replace(" ", "")

    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(",", ".")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount.quantize(Decimal("0.01"))


def parse_pieces(pieces_str: str) -> int:
    """Parse a piece count such as "10", "+10" or "-3".

    Raises:
        ValueError: If the string is not a whole number
    """
    if not pieces_str or not pieces_str.strip():
        raise ValueError("Empty piece count")

    cleaned = pieces_str.strip()
    if not re.fullmatch(r"[+-]?\d+", cleaned):
        raise ValueError(f"Could not parse piece count '{pieces_str}'")
    return int(cleaned)
