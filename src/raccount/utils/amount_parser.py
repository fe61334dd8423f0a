"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Accepts "3.4", "-12.50", "1,234.56" and "(12.50)" for negatives.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()
    is_negative = amount_str.startswith("(") and amount_str.endswith(")")
    if is_negative:
        amount_str = amount_str[1:-1]
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{amount_str}'")
    return -amount if is_negative else amount
