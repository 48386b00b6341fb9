"""Domain normalization helpers."""

from collections.abc import Mapping
from logging import Logger

from wallet_dashboard.domain.models.wallet import WalletBalance
from wallet_dashboard.utils.decimal_utils import coerce_decimal

_REQUIRED_FIELDS = ("currency", "amount", "blockchain")


def normalize_currency(currency: str | None) -> str | None:
    """Normalize currency codes.

    Args:
        currency: Raw currency code from a collaborator.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_balance(raw, logger: Logger) -> WalletBalance | None:
    """Turn a raw balance record into a WalletBalance.

    Args:
        raw: WalletBalance instance or mapping with currency, amount and
            blockchain keys.
        logger: Logger used for warnings.

    Returns:
        WalletBalance | None: Normalized balance, or None when the record is
        malformed and must be skipped.
    """
    if isinstance(raw, WalletBalance):
        currency, amount, blockchain = (
            raw.currency,
            raw.amount,
            raw.blockchain,
        )
    elif isinstance(raw, Mapping):
        missing = [name for name in _REQUIRED_FIELDS if name not in raw]
        if missing:
            logger.warning(
                f"Skipping balance record missing fields: {', '.join(missing)}"
            )
            return None
        currency = raw["currency"]
        amount = raw["amount"]
        blockchain = raw["blockchain"]
    else:
        logger.warning(
            f"Skipping balance record of type {type(raw).__name__}"
        )
        return None

    if not isinstance(currency, str) or normalize_currency(currency) is None:
        logger.warning(f"Skipping balance with invalid currency: {currency!r}")
        return None
    if not isinstance(blockchain, str):
        logger.warning(
            f"Skipping {currency} balance with invalid blockchain: "
            f"{blockchain!r}"
        )
        return None
    parsed_amount = coerce_decimal(amount)
    if parsed_amount is None:
        logger.warning(
            f"Skipping {currency} balance with non-numeric amount: {amount!r}"
        )
        return None
    return WalletBalance(
        currency=normalize_currency(currency),
        amount=parsed_amount,
        blockchain=blockchain.strip(),
    )


__all__ = ["normalize_currency", "normalize_balance"]
