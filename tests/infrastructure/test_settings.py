"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from wallet_dashboard.domain.constants import DEFAULT_CHAIN_PRIORITIES
from wallet_dashboard.infrastructure import settings as settings_module
from wallet_dashboard.infrastructure.settings import WalletSettings


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "WALLET_CHAIN_PRIORITIES",
        "WALLET_SNAPSHOT_FILE",
        "WALLET_FIAT_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    settings = WalletSettings.from_env()

    assert settings.chain_priorities == DEFAULT_CHAIN_PRIORITIES
    assert settings.snapshot_file is None
    assert settings.fiat_currency == "USD"


def test_from_env_parses_chain_priorities(monkeypatch) -> None:
    monkeypatch.setenv("WALLET_CHAIN_PRIORITIES", "Osmosis=100, Solana = 7,")

    settings = WalletSettings.from_env()

    assert settings.chain_priorities == {"Osmosis": 100, "Solana": 7}


@pytest.mark.parametrize("raw", ["Osmosis", "=5", "Osmosis=high"])
def test_from_env_rejects_malformed_priorities(monkeypatch, raw) -> None:
    monkeypatch.setenv("WALLET_CHAIN_PRIORITIES", raw)

    with pytest.raises(ValueError):
        WalletSettings.from_env()


def test_from_env_resolves_snapshot_path(monkeypatch, tmp_path: Path) -> None:
    """Absolute snapshot paths should resolve to Path instances."""
    snapshot = tmp_path / "wallet.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("WALLET_SNAPSHOT_FILE", str(snapshot))
    monkeypatch.setenv("WALLET_FIAT_CURRENCY", "eur")

    settings = WalletSettings.from_env()

    assert settings.snapshot_file == snapshot.resolve()
    assert settings.fiat_currency == "EUR"


def test_relative_snapshot_path_uses_project_root(
    monkeypatch,
    tmp_path: Path,
) -> None:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("WALLET_SNAPSHOT_FILE", "data/missing.json")

    settings = WalletSettings.from_env()

    assert settings.snapshot_file == (tmp_path / "data" / "missing.json").resolve()
    logger.warning.assert_called_once()
