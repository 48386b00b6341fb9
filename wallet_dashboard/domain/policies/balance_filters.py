"""Policies deciding which wallet balances are worth displaying."""

from wallet_dashboard.domain.constants import UNKNOWN_PRIORITY
from wallet_dashboard.domain.models.priorities import (
    DEFAULT_PRIORITY_TABLE,
    PriorityTable,
)
from wallet_dashboard.domain.models.wallet import WalletBalance


def is_significant(
    balance: WalletBalance,
    priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
) -> bool:
    """Return True when a balance should be displayed.

    A balance is significant when its chain is known and its amount is
    strictly positive.

    Args:
        balance: Normalized wallet balance.
        priorities: Chain priority table.

    Returns:
        bool: Whether the balance passes the display filter.
    """
    if priorities.priority_of(balance.blockchain) <= UNKNOWN_PRIORITY:
        return False
    return balance.amount > 0


__all__ = ["is_significant"]
