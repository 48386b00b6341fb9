"""Application use cases package."""

from .get_wallet_rows import (
    DisplayRow,
    FormattedBalancesMemo,
    GetWalletRowsUseCase,
)

__all__ = [
    "DisplayRow",
    "FormattedBalancesMemo",
    "GetWalletRowsUseCase",
]
