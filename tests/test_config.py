from __future__ import annotations

import logging
from pathlib import Path

import pytest

from txn_analytics.config import get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("TRANSACTIONS_FILE", "LOG_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = get_settings()
    assert s.transactions_file == Path("data/transactions.json")
    assert s.log_path == Path("logs/queries.log")
    assert s.log_level == logging.INFO


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSACTIONS_FILE", "/tmp/tx.json")
    monkeypatch.setenv("LOG_PATH", "")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.transactions_file == Path("/tmp/tx.json")
    assert s.log_path is None
    assert s.log_level == logging.DEBUG


def test_settings_reject_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError):
        get_settings()
