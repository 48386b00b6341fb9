"""Use case to build wallet display rows."""

from collections.abc import Sequence
from logging import Logger

from wallet_dashboard.application.ports.balances_source import (
    WalletBalancesSourcePort,
)
from wallet_dashboard.application.ports.price_source import PriceSourcePort
from wallet_dashboard.domain.models import (
    DEFAULT_PRIORITY_TABLE,
    DisplayRow,
    FormattedWalletBalance,
    PriorityTable,
)
from wallet_dashboard.domain.services.pipeline import (
    build_rows,
    format_wallet_balances,
)
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class FormattedBalancesMemo:
    """Cache formatted balances keyed by the identity of their source.

    The cached entry is replaced in a single assignment, so readers always
    see a consistent (source, priorities, result) triple.
    """

    def __init__(self) -> None:
        self._entry: tuple | None = None
        self.computations = 0

    def get(
        self,
        balances: Sequence,
        priorities: PriorityTable,
        logger: Logger,
    ) -> tuple[FormattedWalletBalance, ...]:
        """Return formatted balances, recomputing only for a new source.

        Args:
            balances: Raw balance collection from the source port.
            priorities: Chain priority table.
            logger: Logger used for warnings.

        Returns:
            tuple[FormattedWalletBalance, ...]: Formatted balances.
        """
        entry = self._entry
        if (
            entry is not None
            and entry[0] is balances
            and entry[1] is priorities
        ):
            return entry[2]
        result = format_wallet_balances(balances, priorities, logger)
        self._entry = (balances, priorities, result)
        self.computations += 1
        return result


class GetWalletRowsUseCase:
    """Build ordered, formatted wallet rows with fiat values."""

    def __init__(
        self,
        balances_source: WalletBalancesSourcePort,
        price_source: PriceSourcePort,
        priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balances_source: Port providing wallet balances.
            price_source: Port providing unit prices.
            priorities: Chain priority table.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balances_source = balances_source
        self._price_source = price_source
        self._priorities = priorities
        self._logger = logger or get_app_logger()
        self._memo = FormattedBalancesMemo()

    def execute(self) -> list[DisplayRow]:
        """Return display rows for the current balances and prices.

        Returns:
            list[DisplayRow]: Rows ordered by descending chain priority.
        """
        balances = self._balances_source.fetch_balances()
        prices = self._price_source.fetch_prices()
        formatted = self._memo.get(balances, self._priorities, self._logger)
        rows = build_rows(formatted, prices, logger=self._logger)
        unavailable = sum(1 for row in rows if not row.value_available)
        self._logger.info(
            f"Built {len(rows)} wallet rows "
            f"({unavailable} without USD value)"
        )
        return rows


__all__ = [
    "FormattedBalancesMemo",
    "GetWalletRowsUseCase",
    "DisplayRow",
]
