"""Wallet balance display pipeline."""

__all__: list[str] = []
