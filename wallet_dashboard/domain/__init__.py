"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_CHAIN_PRIORITIES,
    DISPLAY_DECIMAL_PLACES,
    UNKNOWN_PRIORITY,
)
from .models import (
    DEFAULT_PRIORITY_TABLE,
    DisplayRow,
    FormattedWalletBalance,
    PriorityTable,
    WalletBalance,
    priority_of,
)
from .policies import is_significant
from .services import (
    build_display_rows,
    build_price_map,
    build_row,
    build_rows,
    compare_priority,
    compute_usd_value,
    format_amount,
    format_balance,
    format_wallet_balances,
    normalize_balance,
    normalize_currency,
    sort_by_priority,
)

__all__ = [
    "DEFAULT_CHAIN_PRIORITIES",
    "DISPLAY_DECIMAL_PLACES",
    "UNKNOWN_PRIORITY",
    "DEFAULT_PRIORITY_TABLE",
    "DisplayRow",
    "FormattedWalletBalance",
    "PriorityTable",
    "WalletBalance",
    "priority_of",
    "is_significant",
    "build_display_rows",
    "build_price_map",
    "build_row",
    "build_rows",
    "compare_priority",
    "compute_usd_value",
    "format_amount",
    "format_balance",
    "format_wallet_balances",
    "normalize_balance",
    "normalize_currency",
    "sort_by_priority",
]
