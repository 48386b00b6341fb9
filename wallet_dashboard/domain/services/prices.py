"""Helpers for reading live price tables."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from wallet_dashboard.domain.services.normalization import normalize_currency
from wallet_dashboard.utils.decimal_utils import coerce_decimal


def build_price_map(
    prices: Mapping,
    logger: Logger,
) -> dict[str, Decimal]:
    """Build a currency to unit price map from a raw price table.

    Entries with blank currencies or non-positive, non-numeric prices are
    skipped so they surface as unavailable values downstream.

    Args:
        prices: Raw mapping of currency code to unit price.
        logger: Logger used for warnings.

    Returns:
        dict[str, Decimal]: Valid unit prices keyed by currency code.
    """
    price_map: dict[str, Decimal] = {}
    for currency, raw_price in prices.items():
        code = normalize_currency(currency) if isinstance(currency, str) else None
        if code is None:
            logger.warning(f"Skipping price with invalid currency: {currency!r}")
            continue
        price = coerce_decimal(raw_price)
        if price is None or price <= 0:
            logger.warning(f"Skipping invalid price for {code}: {raw_price!r}")
            continue
        price_map[code] = price
    return price_map


__all__ = ["build_price_map"]
