"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


_UNIT_SUFFIX = re.compile(r"\s*(/|per\s+)\s*[a-z. ]+$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a price string into a Decimal.

    Handles the ways residents type prices:
    - "150"
    - "$150.00"
    - "1,250"
    - "160/mo", "$45 per hour" (unit suffix is ignored)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip().lower()
    text = _UNIT_SUFFIX.sub("", text)
    text = re.sub(r"[$€£¥]", "", text)
    text = text.replace(",", "").strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount


def parse_assignment(assignment: str) -> tuple[str, str]:
    """Split a 'KIND=VALUE' command-line assignment.

    Raises:
        ValueError: If there is no '=' or either side is empty
    """
    key, sep, value = assignment.partition("=")
    if not sep or not key.strip() or not value.strip():
        raise ValueError(f"Expected KIND=VALUE, got '{assignment}'")
    return key.strip(), value.strip()
