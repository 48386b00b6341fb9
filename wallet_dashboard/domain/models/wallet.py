"""Domain models for wallet balances and display rows."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WalletBalance:
    """Balance held in one currency on one blockchain.

    Attributes:
        currency: Currency code (e.g., ETH).
        amount: Raw amount; may be zero or negative.
        blockchain: Chain identifier, not guaranteed to be a known chain.
    """

    currency: str
    amount: Decimal
    blockchain: str


@dataclass(frozen=True)
class FormattedWalletBalance(WalletBalance):
    """Wallet balance with its amount rendered for display."""

    formatted: str


@dataclass(frozen=True)
class DisplayRow:
    """Render-ready wallet row.

    Attributes:
        key: Position in the sorted sequence, unique within one render pass.
        currency: Currency code of the source balance.
        blockchain: Chain identifier of the source balance.
        amount: Raw amount of the source balance.
        usd_value: Fiat value, or None when no price is available.
        formatted_amount: Amount rendered with two decimals.
    """

    key: int
    currency: str
    blockchain: str
    amount: Decimal
    usd_value: Decimal | None
    formatted_amount: str

    @property
    def value_available(self) -> bool:
        """Return True when a fiat value could be computed."""
        return self.usd_value is not None

    @property
    def content_key(self) -> tuple[str, str]:
        """Return a key derived from the row content instead of its position."""
        return (self.currency, self.blockchain)


__all__ = ["WalletBalance", "FormattedWalletBalance", "DisplayRow"]
