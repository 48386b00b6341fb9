"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Optional

import dotenv

from wallet_dashboard.domain.constants import DEFAULT_CHAIN_PRIORITIES
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.utils.utils import get_project_root


@dataclass(frozen=True)
class WalletSettings:
    """Settings for the wallet dashboard.

    Attributes:
        chain_priorities: Chain identifier to display priority.
        snapshot_file: Optional path to a JSON balances/prices snapshot.
        fiat_currency: Label of the reference fiat currency.
    """

    chain_priorities: dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_CHAIN_PRIORITIES)
    )
    snapshot_file: Optional[Path] = None
    fiat_currency: str = "USD"

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables.

        Returns:
            WalletSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If WALLET_CHAIN_PRIORITIES is malformed.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_priorities = os.getenv("WALLET_CHAIN_PRIORITIES", "").strip()
        chain_priorities = (
            cls._parse_priorities(raw_priorities)
            if raw_priorities
            else dict(DEFAULT_CHAIN_PRIORITIES)
        )
        raw_snapshot = os.getenv("WALLET_SNAPSHOT_FILE", "").strip()
        snapshot_file = (
            cls._normalize_path(raw_snapshot, logger=logger)
            if raw_snapshot
            else None
        )
        fiat_currency = (
            os.getenv("WALLET_FIAT_CURRENCY", "USD").strip().upper() or "USD"
        )
        return cls(
            chain_priorities=chain_priorities,
            snapshot_file=snapshot_file,
            fiat_currency=fiat_currency,
        )

    @staticmethod
    def _parse_priorities(raw: str) -> dict[str, int]:
        """Parse a "Chain=priority,Chain=priority" string.

        Args:
            raw: Raw environment value.

        Returns:
            dict[str, int]: Parsed chain priorities.

        Raises:
            ValueError: If an entry is not a chain=integer pair.
        """
        priorities: dict[str, int] = {}
        for entry in raw.split(","):
            if not entry.strip():
                continue
            chain, sep, value = entry.partition("=")
            chain = chain.strip()
            if not sep or not chain:
                raise ValueError(
                    f"Invalid WALLET_CHAIN_PRIORITIES entry: {entry!r}"
                )
            try:
                priorities[chain] = int(value.strip())
            except ValueError as exc:
                raise ValueError(
                    f"Invalid priority for {chain}: {value.strip()!r}"
                ) from exc
        return priorities

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve the snapshot path against the project root.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute snapshot path.
        """
        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            path = get_project_root() / path
        path = path.resolve()
        if not path.exists():
            logger.warning(f"Wallet snapshot file does not exist at {path}")
        return path


__all__ = ["WalletSettings"]
