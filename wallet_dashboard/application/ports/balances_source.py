"""Port for reading wallet balances."""

from collections.abc import Sequence
from typing import Protocol


class WalletBalancesSourcePort(Protocol):
    """Port exposing the current wallet balances snapshot."""

    def fetch_balances(self) -> Sequence:
        """Return raw balance records (WalletBalance or mappings)."""


__all__ = ["WalletBalancesSourcePort"]
