"""Tests for the wallet display pipeline."""

from dataclasses import FrozenInstanceError
from decimal import Decimal, InvalidOperation
from unittest.mock import MagicMock

import pytest

from wallet_dashboard.domain.constants import UNKNOWN_PRIORITY
from wallet_dashboard.domain.models import (
    DEFAULT_PRIORITY_TABLE,
    PriorityTable,
    WalletBalance,
)
from wallet_dashboard.domain.services import pipeline as pipeline_module
from wallet_dashboard.domain.services.pipeline import (
    build_display_rows,
    format_wallet_balances,
)

SCENARIO_PRIORITIES = PriorityTable({"Ethereum": 50, "Osmosis": 100})


def _mixed_balances() -> list:
    return [
        {"currency": "NEO", "amount": 4, "blockchain": "Neo"},
        {"currency": "ETH", "amount": 0, "blockchain": "Ethereum"},
        {"currency": "ZIL", "amount": 12.345, "blockchain": "Zilliqa"},
        {"currency": "UNK", "amount": 9, "blockchain": "Solana"},
        {"currency": "ARB", "amount": 7, "blockchain": "Arbitrum"},
        {"currency": "GAS", "amount": 1, "blockchain": "Neo"},
        {"currency": "OSMO", "amount": -3, "blockchain": "Osmosis"},
        {"currency": "ATOM", "amount": 2, "blockchain": "Osmosis"},
    ]


def test_scenario_unknown_chain_is_excluded_and_rows_ordered() -> None:
    """Osmosis ranks above Ethereum; the unknown chain is dropped."""
    balances = [
        WalletBalance("ETH", Decimal("2"), "Ethereum"),
        WalletBalance("OSMO", Decimal("5"), "Osmosis"),
        WalletBalance("UNK", Decimal("3"), "UnknownChain"),
    ]

    rows = build_display_rows(
        balances,
        {"ETH": 2000, "OSMO": 10},
        SCENARIO_PRIORITIES,
        logger=MagicMock(),
    )

    assert [row.blockchain for row in rows] == ["Osmosis", "Ethereum"]
    assert [row.usd_value for row in rows] == [Decimal("50"), Decimal("4000")]
    assert [row.formatted_amount for row in rows] == ["5.00", "2.00"]
    assert [row.key for row in rows] == [0, 1]


@pytest.mark.parametrize("amount", [0, -5])
def test_non_positive_amounts_are_excluded(amount) -> None:
    balances = [
        {"currency": "ETH", "amount": amount, "blockchain": "Ethereum"},
        {"currency": "OSMO", "amount": 1, "blockchain": "Osmosis"},
    ]

    rows = build_display_rows(
        balances,
        {"ETH": 2000, "OSMO": 10},
        SCENARIO_PRIORITIES,
        logger=MagicMock(),
    )

    assert [row.currency for row in rows] == ["OSMO"]


def test_missing_price_yields_unavailable_marker() -> None:
    """A currency without a price gets an explicit None value."""
    balances = [{"currency": "ATOM", "amount": 3, "blockchain": "Osmosis"}]
    logger = MagicMock()

    rows = build_display_rows(balances, {"ETH": 2000}, logger=logger)

    assert len(rows) == 1
    assert rows[0].usd_value is None
    assert rows[0].value_available is False
    assert rows[0].formatted_amount == "3.00"
    logger.warning.assert_called_once_with("Missing USD price for ATOM")


def test_rows_are_deterministic() -> None:
    prices = {"NEO": 10, "ZIL": 0.02, "ARB": 1.1, "GAS": 4, "ATOM": 8}

    first = build_display_rows(_mixed_balances(), prices, logger=MagicMock())
    second = build_display_rows(_mixed_balances(), prices, logger=MagicMock())

    assert first == second


def test_rows_have_non_increasing_priority_and_keep_ties_stable() -> None:
    rows = build_display_rows(
        _mixed_balances(),
        {},
        logger=MagicMock(),
    )
    priorities = [
        DEFAULT_PRIORITY_TABLE.priority_of(row.blockchain) for row in rows
    ]

    assert priorities == sorted(priorities, reverse=True)
    assert [row.currency for row in rows] == [
        "ATOM",
        "ARB",
        "NEO",
        "ZIL",
        "GAS",
    ]


def test_rows_only_contain_significant_balances() -> None:
    rows = build_display_rows(_mixed_balances(), {}, logger=MagicMock())

    assert all(row.amount > 0 for row in rows)
    assert all(
        DEFAULT_PRIORITY_TABLE.priority_of(row.blockchain) > UNKNOWN_PRIORITY
        for row in rows
    )
    assert len({row.key for row in rows}) == len(rows)


def test_malformed_record_does_not_abort_pipeline() -> None:
    """Broken records are skipped while the rest still render."""
    balances = [
        None,
        {"currency": "ETH", "amount": "lots", "blockchain": "Ethereum"},
        {"currency": "ETH", "amount": "1.5", "blockchain": "Ethereum"},
    ]
    logger = MagicMock()

    rows = build_display_rows(balances, {"ETH": 2}, logger=logger)

    assert [row.formatted_amount for row in rows] == ["1.50"]
    assert rows[0].usd_value == Decimal("3.0")
    assert logger.warning.call_count == 2


def test_empty_input_yields_no_rows() -> None:
    assert build_display_rows([], {"ETH": 1}, logger=MagicMock()) == []


def test_format_wallet_balances_returns_immutable_sequence() -> None:
    formatted = format_wallet_balances(_mixed_balances(), logger=MagicMock())

    assert isinstance(formatted, tuple)
    assert [item.formatted for item in formatted] == [
        "2.00",
        "7.00",
        "4.00",
        "12.35",
        "1.00",
    ]
    with pytest.raises(FrozenInstanceError):
        formatted[0].formatted = "0.00"


def test_display_rows_are_frozen() -> None:
    rows = build_display_rows(
        [{"currency": "ETH", "amount": 1, "blockchain": "Ethereum"}],
        {"ETH": 1},
        logger=MagicMock(),
    )

    with pytest.raises(FrozenInstanceError):
        rows[0].usd_value = Decimal("0")


def test_huge_amount_is_formatted_next_to_normal_rows() -> None:
    """A very large amount renders without disturbing the other rows."""
    balances = [
        {"currency": "ETH", "amount": Decimal("1e30"), "blockchain": "Ethereum"},
        {"currency": "OSMO", "amount": 5, "blockchain": "Osmosis"},
    ]

    rows = build_display_rows(
        balances,
        {"ETH": 2000, "OSMO": 10},
        SCENARIO_PRIORITIES,
        logger=MagicMock(),
    )

    assert [row.currency for row in rows] == ["OSMO", "ETH"]
    assert rows[1].formatted_amount == "1000000000000000000000000000000.00"
    assert rows[1].usd_value == Decimal("2e33")
    assert rows[0].usd_value == Decimal("50")


def test_formatting_failure_skips_only_that_record(monkeypatch) -> None:
    """A record failing after normalization is dropped; the rest render."""
    real_format_balance = pipeline_module.format_balance

    def _format_balance(balance):
        if balance.currency == "ETH":
            raise InvalidOperation("cannot quantize")
        return real_format_balance(balance)

    monkeypatch.setattr(pipeline_module, "format_balance", _format_balance)
    logger = MagicMock()

    rows = build_display_rows(
        [
            {"currency": "ETH", "amount": 2, "blockchain": "Ethereum"},
            {"currency": "OSMO", "amount": 5, "blockchain": "Osmosis"},
        ],
        {"ETH": 2000, "OSMO": 10},
        SCENARIO_PRIORITIES,
        logger=logger,
    )

    assert [row.currency for row in rows] == ["OSMO"]
    assert [row.key for row in rows] == [0]
    logger.warning.assert_called_once()
    assert "ETH" in logger.warning.call_args.args[0]
