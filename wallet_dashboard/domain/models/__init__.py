"""Domain models package."""

from .priorities import DEFAULT_PRIORITY_TABLE, PriorityTable, priority_of
from .wallet import DisplayRow, FormattedWalletBalance, WalletBalance

__all__ = [
    "WalletBalance",
    "FormattedWalletBalance",
    "DisplayRow",
    "PriorityTable",
    "DEFAULT_PRIORITY_TABLE",
    "priority_of",
]
