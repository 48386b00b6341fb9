"""Domain constants for wallet balance display."""

UNKNOWN_PRIORITY = -99

DEFAULT_CHAIN_PRIORITIES = {
    "Osmosis": 100,
    "Ethereum": 50,
    "Arbitrum": 30,
    "Zilliqa": 20,
    "Neo": 20,
}

DISPLAY_DECIMAL_PLACES = 2


__all__ = [
    "UNKNOWN_PRIORITY",
    "DEFAULT_CHAIN_PRIORITIES",
    "DISPLAY_DECIMAL_PLACES",
]
