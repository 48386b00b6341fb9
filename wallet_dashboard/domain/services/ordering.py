"""Ordering of wallet balances by chain priority."""

from collections.abc import Iterable

from wallet_dashboard.domain.models.priorities import (
    DEFAULT_PRIORITY_TABLE,
    PriorityTable,
)
from wallet_dashboard.domain.models.wallet import WalletBalance


def compare_priority(
    lhs: WalletBalance,
    rhs: WalletBalance,
    priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
) -> int:
    """Compare two balances so higher chain priority sorts first.

    Usable with functools.cmp_to_key; equal priorities compare as 0.
    """
    return priorities.priority_of(rhs.blockchain) - priorities.priority_of(
        lhs.blockchain
    )


def sort_by_priority(
    balances: Iterable[WalletBalance],
    priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
) -> list[WalletBalance]:
    """Return balances ordered by descending chain priority.

    Ties keep their input order; no secondary key is applied.
    """
    return sorted(
        balances,
        key=lambda balance: priorities.priority_of(balance.blockchain),
        reverse=True,
    )


__all__ = ["compare_priority", "sort_by_priority"]
