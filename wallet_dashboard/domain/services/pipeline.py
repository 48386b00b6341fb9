"""Domain pipeline turning raw wallet balances into display rows."""

from collections.abc import Iterable, Mapping
from logging import Logger, getLogger

from wallet_dashboard.domain.models.priorities import (
    DEFAULT_PRIORITY_TABLE,
    PriorityTable,
)
from wallet_dashboard.domain.models.wallet import (
    DisplayRow,
    FormattedWalletBalance,
)
from wallet_dashboard.domain.policies.balance_filters import is_significant
from wallet_dashboard.domain.services.formatting import format_balance
from wallet_dashboard.domain.services.normalization import normalize_balance
from wallet_dashboard.domain.services.ordering import sort_by_priority
from wallet_dashboard.domain.services.prices import build_price_map
from wallet_dashboard.domain.services.rows import build_row

_default_logger = getLogger(__name__)


def format_wallet_balances(
    balances: Iterable,
    priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
    logger: Logger | None = None,
) -> tuple[FormattedWalletBalance, ...]:
    """Filter, order and format raw wallet balances.

    Args:
        balances: Raw balance records (WalletBalance or mappings).
        priorities: Chain priority table.
        logger: Logger used for warnings on malformed records.

    Returns:
        tuple[FormattedWalletBalance, ...]: Significant balances by
        descending chain priority, with input order kept for ties.
    """
    log = logger or _default_logger
    normalized = []
    for raw in balances:
        balance = normalize_balance(raw, log)
        if balance is not None:
            normalized.append(balance)
    significant = [
        balance
        for balance in normalized
        if is_significant(balance, priorities)
    ]
    ordered = sort_by_priority(significant, priorities)
    formatted = []
    for balance in ordered:
        try:
            formatted.append(format_balance(balance))
        except (ArithmeticError, ValueError) as exc:
            log.warning(
                f"Skipping {balance.currency} balance on "
                f"{balance.blockchain} that cannot be formatted: {exc}"
            )
    return tuple(formatted)


def build_rows(
    formatted: Iterable[FormattedWalletBalance],
    prices: Mapping,
    logger: Logger | None = None,
) -> list[DisplayRow]:
    """Build display rows against the current price snapshot.

    Args:
        formatted: Formatted balances in display order.
        prices: Raw mapping of currency code to unit price.
        logger: Logger used for warnings.

    Returns:
        list[DisplayRow]: Rows keyed by their display position.
    """
    log = logger or _default_logger
    price_map = build_price_map(prices, log)
    return [
        build_row(balance, price_map, key=index, logger=log)
        for index, balance in enumerate(formatted)
    ]


def build_display_rows(
    balances: Iterable,
    prices: Mapping,
    priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
    logger: Logger | None = None,
) -> list[DisplayRow]:
    """Run the full wallet pipeline from raw balances to display rows."""
    formatted = format_wallet_balances(balances, priorities, logger)
    return build_rows(formatted, prices, logger)


__all__ = ["format_wallet_balances", "build_rows", "build_display_rows"]
