"""Application ports package."""

from .balances_source import WalletBalancesSourcePort
from .price_source import PriceSourcePort

__all__ = ["WalletBalancesSourcePort", "PriceSourcePort"]
