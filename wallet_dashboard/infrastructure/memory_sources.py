"""In-memory adapters for wallet balances and prices."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType


class InMemoryBalancesSource:
    """Balances source serving a snapshot handed over by the caller.

    The same collection object is returned until it is replaced, which lets
    the use case reuse formatted balances between price refreshes.
    """

    def __init__(self, balances: Sequence = ()) -> None:
        self._balances = tuple(balances)

    def replace(self, balances: Sequence) -> None:
        """Swap in a new balances snapshot."""
        self._balances = tuple(balances)

    def fetch_balances(self) -> Sequence:
        return self._balances


class InMemoryPriceSource:
    """Price source serving a read-only snapshot."""

    def __init__(self, prices: Mapping | None = None) -> None:
        self._prices = MappingProxyType(dict(prices or {}))

    def replace(self, prices: Mapping) -> None:
        """Swap in a new price snapshot."""
        self._prices = MappingProxyType(dict(prices))

    def fetch_prices(self) -> Mapping:
        return self._prices


__all__ = ["InMemoryBalancesSource", "InMemoryPriceSource"]
