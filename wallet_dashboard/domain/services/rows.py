"""Display row construction."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from wallet_dashboard.domain.models.wallet import (
    DisplayRow,
    FormattedWalletBalance,
)
from wallet_dashboard.utils.decimal_utils import coerce_decimal


def compute_usd_value(
    amount: Decimal,
    currency: str,
    prices: Mapping[str, Decimal],
    logger: Logger | None = None,
) -> Decimal | None:
    """Convert an amount into the reference fiat currency.

    Args:
        amount: Amount in the source currency.
        currency: Currency code used for the price lookup.
        prices: Mapping of currency code to positive unit price.
        logger: Optional logger used for warnings.

    Returns:
        Decimal | None: Fiat value or None when no usable price exists.
    """
    price = coerce_decimal(prices.get(currency))
    if price is None or price <= 0:
        if logger is not None:
            logger.warning(f"Missing USD price for {currency}")
        return None
    return price * amount


def build_row(
    balance: FormattedWalletBalance,
    prices: Mapping[str, Decimal],
    key: int,
    logger: Logger | None = None,
) -> DisplayRow:
    """Join a formatted balance with its price into a display row."""
    return DisplayRow(
        key=key,
        currency=balance.currency,
        blockchain=balance.blockchain,
        amount=balance.amount,
        usd_value=compute_usd_value(
            balance.amount,
            balance.currency,
            prices,
            logger,
        ),
        formatted_amount=balance.formatted,
    )


__all__ = ["compute_usd_value", "build_row"]
