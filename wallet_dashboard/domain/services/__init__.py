"""Domain services package."""

from .formatting import format_amount, format_balance
from .normalization import normalize_balance, normalize_currency
from .ordering import compare_priority, sort_by_priority
from .pipeline import build_display_rows, build_rows, format_wallet_balances
from .prices import build_price_map
from .rows import build_row, compute_usd_value

__all__ = [
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
