"""JSON snapshot adapters for wallet balances and prices.

A snapshot is a local, read-only document of the form::

    {"balances": [{"currency": "ETH", "amount": 2, "blockchain": "Ethereum"}],
     "prices": {"ETH": 2000.5}}

Numbers are parsed as Decimal. The document is re-read only when the file
changes on disk, so repeated fetches return the same collection objects.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal
import json
from pathlib import Path
from types import MappingProxyType

from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class SnapshotFile:
    """Loader caching a parsed snapshot until the file changes."""

    def __init__(self, path: Path | str, logger=None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._stamp: tuple[int, int] | None = None
        self._balances: tuple = ()
        self._prices: Mapping = MappingProxyType({})

    @property
    def path(self) -> Path:
        return self._path

    def balances(self) -> tuple:
        self._refresh()
        return self._balances

    def prices(self) -> Mapping:
        self._refresh()
        return self._prices

    def _refresh(self) -> None:
        """Reload the snapshot when its modification time or size changed.

        Raises:
            RuntimeError: If the file is missing, unreadable or malformed.
        """
        try:
            stat = self._path.stat()
        except OSError as exc:
            raise RuntimeError(
                f"Wallet snapshot file not found: {self._path}"
            ) from exc
        stamp = (stat.st_mtime_ns, stat.st_size)
        if stamp == self._stamp:
            return
        try:
            payload = json.loads(
                self._path.read_text(encoding="utf-8"),
                parse_float=Decimal,
            )
        except (OSError, ValueError) as exc:
            raise RuntimeError(
                f"Unable to read wallet snapshot {self._path}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Wallet snapshot {self._path} must be a JSON object"
            )
        balances = payload.get("balances", [])
        prices = payload.get("prices", {})
        if not isinstance(balances, list) or not isinstance(prices, dict):
            raise RuntimeError(
                f"Wallet snapshot {self._path} has invalid balances or prices"
            )
        self._balances = tuple(balances)
        self._prices = MappingProxyType(prices)
        self._stamp = stamp
        self._logger.info(
            f"Loaded wallet snapshot {self._path.name}: "
            f"{len(self._balances)} balances, {len(prices)} prices"
        )


class JsonSnapshotBalancesSource:
    """Balances source backed by a snapshot file."""

    def __init__(self, snapshot: SnapshotFile) -> None:
        self._snapshot = snapshot

    def fetch_balances(self) -> Sequence:
        return self._snapshot.balances()


class JsonSnapshotPriceSource:
    """Price source backed by a snapshot file."""

    def __init__(self, snapshot: SnapshotFile) -> None:
        self._snapshot = snapshot

    def fetch_prices(self) -> Mapping:
        return self._snapshot.prices()


__all__ = [
    "SnapshotFile",
    "JsonSnapshotBalancesSource",
    "JsonSnapshotPriceSource",
]
