"""Load transaction records from JSON files.

Two row shapes are accepted:

- nested rows carry an ``issues`` array of issue objects;
- flat rows carry ``issueId``/``issueSolved``/``issueMessage`` directly and
  repeat the same ``mtn`` once per issue. Flat rows are merged per ``mtn``
  in first-seen order; a row whose ``issueId`` is null adds no issue.

Both shapes may appear in one file. Identifiers must be unique, except that
flat rows for the same ``mtn`` repeat, and those rows must agree on every
non-issue field.

All rows are validated with the pydantic models before being returned.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from txn_analytics.models import ComplianceIssue, Transaction

log = logging.getLogger(__name__)

FLAT_ISSUE_KEYS = ("issueId", "issueSolved", "issueMessage")


def _row_key(row: dict[str, Any]) -> str:
    key = row.get("mtn", row.get("id"))
    if key is None:
        raise ValueError(f"transaction row has no 'mtn' or 'id': {row!r}")
    return str(key)


def _is_flat(row: dict[str, Any]) -> bool:
    return any(k in row for k in FLAT_ISSUE_KEYS)


def _merge_rows(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return one nested record per identifier, in first-seen order.

    Nested rows pass through unchanged. Flat rows sharing an ``mtn`` are
    collapsed into one record and must agree on every non-issue field.

    Raises:
        ValueError: on duplicate identifiers or conflicting flat rows.
    """
    records: dict[str, dict[str, Any]] = {}
    flat_keys: set[str] = set()

    for row in rows:
        key = _row_key(row)

        if not _is_flat(row):
            if key in records:
                raise ValueError(f"duplicate transaction id {key!r}")
            records[key] = row
            continue

        if "issues" in row:
            raise ValueError(f"row {key!r} mixes an 'issues' array with flat issue fields")

        base = {k: v for k, v in row.items() if k not in FLAT_ISSUE_KEYS}
        record = records.get(key)
        if record is None:
            record = records[key] = {**base, "issues": []}
            flat_keys.add(key)
        elif key not in flat_keys:
            raise ValueError(f"duplicate transaction id {key!r}")
        elif {k: v for k, v in record.items() if k != "issues"} != base:
            raise ValueError(f"conflicting rows for transaction {key!r}")

        if row.get("issueId") is not None:
            record["issues"].append(
                ComplianceIssue.model_validate(
                    {k: row.get(k) for k in FLAT_ISSUE_KEYS}
                )
            )

    return list(records.values())


def parse_transactions(rows: Iterable[dict[str, Any]]) -> list[Transaction]:
    """Validate decoded JSON rows into Transaction records.

    Args:
        rows: Decoded JSON objects, nested or flat (see module docstring).

    Returns:
        List of Transaction in first-seen order.

    Raises:
        ValueError: if a row is not an object, lacks an identifier, repeats
            an identifier, or disagrees with an earlier flat row.
        pydantic.ValidationError: if a row fails model validation.
    """
    rows = list(rows)
    for row in rows:
        if not isinstance(row, dict):
            raise ValueError(f"transaction rows must be JSON objects, got {type(row).__name__}")

    return [Transaction.model_validate(r) for r in _merge_rows(rows)]


def load_transactions(path: Path) -> list[Transaction]:
    """Read a JSON array of transactions from `path`.

    Args:
        path: Path to a UTF-8 JSON file holding an array of rows.

    Returns:
        List of validated Transaction records.

    Raises:
        FileNotFoundError: if `path` does not exist.
        ValueError: if the payload is not a JSON array.
    """
    log.info("Reading transactions from %s", path)
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(payload).__name__}")

    transactions = parse_transactions(payload)
    log.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions
