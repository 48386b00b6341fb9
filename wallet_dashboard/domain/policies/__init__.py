"""Domain policies package."""

from .balance_filters import is_significant

__all__ = ["is_significant"]
