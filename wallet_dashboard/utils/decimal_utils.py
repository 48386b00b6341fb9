"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal | None:
    """Normalize numeric values to a finite Decimal.

    Args:
        value: Raw numeric value from a collaborator payload.

    Returns:
        Decimal | None: Normalized value, or None when the input is not a
        finite number (None, booleans, text, NaN or infinities).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not result.is_finite():
        return None
    return result


__all__ = ["coerce_decimal"]
