"""Formatting of wallet amounts for display."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from wallet_dashboard.domain.constants import DISPLAY_DECIMAL_PLACES
from wallet_dashboard.domain.models.wallet import (
    FormattedWalletBalance,
    WalletBalance,
)
from wallet_dashboard.utils.decimal_utils import coerce_decimal

_QUANTUM = Decimal(1).scaleb(-DISPLAY_DECIMAL_PLACES)


def format_amount(amount) -> str:
    """Render an amount with exactly two decimals.

    Values are rounded half up on their decimal representation, so a float
    such as 1.005 is read as "1.005" and renders as "1.01". Precision grows
    with the magnitude, so large amounts keep every integer digit.

    Args:
        amount: Decimal, int or float amount.

    Returns:
        str: Plain decimal string without currency symbol or grouping.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    value = coerce_decimal(amount)
    if value is None:
        raise ValueError(f"Cannot format non-numeric amount: {amount!r}")
    with localcontext() as ctx:
        ctx.prec = max(
            ctx.prec,
            value.adjusted() + DISPLAY_DECIMAL_PLACES + 2,
        )
        rounded = value.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = abs(rounded)
    return f"{rounded:f}"


def format_balance(balance: WalletBalance) -> FormattedWalletBalance:
    """Attach the display string to a balance."""
    return FormattedWalletBalance(
        currency=balance.currency,
        amount=balance.amount,
        blockchain=balance.blockchain,
        formatted=format_amount(balance.amount),
    )


__all__ = ["format_amount", "format_balance"]
