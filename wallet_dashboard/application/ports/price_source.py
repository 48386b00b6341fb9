"""Port for reading live unit prices.

Prices are expressed in the reference fiat currency and keyed by currency
code. The application layer only reads them; refreshing is the adapter's
concern.
"""

from collections.abc import Mapping
from typing import Protocol


class PriceSourcePort(Protocol):
    """Port exposing the latest price table."""

    def fetch_prices(self) -> Mapping:
        """Return a mapping of currency code to unit price.

        Returns:
            Mapping: Unit prices keyed by currency code.
        """


__all__ = ["PriceSourcePort"]
