"""Parsing of integer identifiers sent as numbers or numeric text."""

from src.errors import ValidationError

# Identifier columns are 32-bit Integer
MIN_INT_ID = -(2**31)
MAX_INT_ID = 2**31 - 1


def parse_int_id(value: int | str, field: str) -> int:
    """Parse ``value`` as an integer id that fits an Integer column.

    Raises:
        ValidationError: not an integer, or outside the 32-bit range.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError as e:
            raise ValidationError(f"{field} must be an integer") from e

    if not MIN_INT_ID <= parsed <= MAX_INT_ID:
        raise ValidationError(f"{field} is out of range")
    return parsed
