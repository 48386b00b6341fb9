"""Composition root for wiring infrastructure adapters."""

from wallet_dashboard.application.ports.balances_source import (
    WalletBalancesSourcePort,
)
from wallet_dashboard.application.ports.price_source import PriceSourcePort
from wallet_dashboard.application.use_cases.get_wallet_rows import (
    GetWalletRowsUseCase,
)
from wallet_dashboard.domain.models.priorities import PriorityTable
from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.infrastructure.settings import WalletSettings
from wallet_dashboard.infrastructure.snapshot_sources import (
    JsonSnapshotBalancesSource,
    JsonSnapshotPriceSource,
    SnapshotFile,
)


def _resolve_settings(settings: WalletSettings | None) -> WalletSettings:
    return settings or WalletSettings.from_env()


def _build_snapshot(settings: WalletSettings) -> SnapshotFile:
    if settings.snapshot_file is None:
        raise RuntimeError(
            "Wallet snapshot requires a WALLET_SNAPSHOT_FILE value."
        )
    return SnapshotFile(settings.snapshot_file, logger=get_app_logger())


def build_priority_table(
    settings: WalletSettings | None = None,
) -> PriorityTable:
    """Return the configured chain priority table."""
    resolved = _resolve_settings(settings)
    return PriorityTable(resolved.chain_priorities)


def build_balances_source(
    settings: WalletSettings | None = None,
) -> WalletBalancesSourcePort:
    """Return the configured balances source adapter."""
    resolved = _resolve_settings(settings)
    return JsonSnapshotBalancesSource(_build_snapshot(resolved))


def build_price_source(
    settings: WalletSettings | None = None,
) -> PriceSourcePort:
    """Return the configured price source adapter."""
    resolved = _resolve_settings(settings)
    return JsonSnapshotPriceSource(_build_snapshot(resolved))


def build_wallet_rows_use_case(
    settings: WalletSettings | None = None,
) -> GetWalletRowsUseCase:
    """Return the wallet rows use case wired to one shared snapshot."""
    resolved = _resolve_settings(settings)
    snapshot = _build_snapshot(resolved)
    return GetWalletRowsUseCase(
        balances_source=JsonSnapshotBalancesSource(snapshot),
        price_source=JsonSnapshotPriceSource(snapshot),
        priorities=build_priority_table(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_priority_table",
    "build_balances_source",
    "build_price_source",
    "build_wallet_rows_use_case",
]
