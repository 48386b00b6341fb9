"""CLI adapter printing wallet display rows.

This module wires the GetWalletRowsUseCase to the snapshot adapters from the
composition root and prints one line per row.
"""

from decimal import Decimal

from wallet_dashboard.domain.models import DisplayRow
from wallet_dashboard.domain.services.formatting import format_amount
from wallet_dashboard.infrastructure.container import (
    build_wallet_rows_use_case,
)
from wallet_dashboard.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from wallet_dashboard.infrastructure.settings import WalletSettings


def _format_row(row: DisplayRow, fiat_currency: str) -> str:
    """Render a display row as a single text line."""
    usd = (
        f"{Decimal(format_amount(row.usd_value)):,f}"
        if row.value_available
        else "n/a"
    )
    return (
        f"{row.key:>3} {row.blockchain:<10} {row.currency:<6} "
        f"{row.formatted_amount:>14} {usd:>14} {fiat_currency}"
    )


def main() -> None:
    """Print wallet rows for the configured snapshot."""
    logger = get_app_logger()
    get_usage_logger().info("wallet-rows invoked")
    settings = WalletSettings.from_env()
    if settings.snapshot_file is None:
        logger.warning(
            "WALLET_SNAPSHOT_FILE is required to display wallet rows."
        )
        return
    try:
        use_case = build_wallet_rows_use_case(settings)
        rows = use_case.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    for row in rows:
        print(_format_row(row, settings.fiat_currency))
    print(f"{len(rows)} wallet rows displayed.")


if __name__ == "__main__":  # pragma: no cover
    main()
