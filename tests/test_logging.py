from __future__ import annotations

import logging
import sys
from pathlib import Path

from txn_analytics.logging_config import configure_logging


def test_configure_logging_streams_to_stderr() -> None:
    configure_logging(None)
    streams = [
        h.stream
        for h in logging.getLogger().handlers
        if type(h) is logging.StreamHandler
    ]
    assert streams == [sys.stderr]


def test_configure_logging_writes_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "queries.log"
    configure_logging(log_path, logging.DEBUG)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

    logging.getLogger("txn_analytics.test").debug("hello")
    for h in root.handlers:
        h.flush()
    assert "hello" in log_path.read_text(encoding="utf-8")
    configure_logging(None)
