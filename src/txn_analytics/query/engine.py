"""Read-only query engine over a fixed collection of transactions.

`TransactionQueryEngine` snapshots its input at construction and answers
aggregate, compliance and ranking queries without mutating anything. Sums and
grouped rankings run on a pandas view built once from the snapshot.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from txn_analytics.models import Transaction
from txn_analytics.query.frames import (
    rank_by_amount,
    sum_by_sender,
    transactions_to_frame,
)

log = logging.getLogger(__name__)


def _require_name(value: Any, arg: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{arg} must be a str, got {type(value).__name__}")
    return value


def _coerce(record: Any) -> Transaction:
    """Return `record` as a Transaction, validating mappings with pydantic."""
    if isinstance(record, Transaction):
        return record
    if isinstance(record, Mapping):
        return Transaction.model_validate(dict(record))
    raise TypeError(f"expected Transaction or mapping, got {type(record).__name__}")


class TransactionQueryEngine:
    """Answer fixed aggregate queries over a transaction snapshot.

    Args:
        transactions: Transactions (or mappings that validate as
            Transaction) in input order. The sequence is copied into a tuple,
            so later changes to the caller's collection are not observed.

    Raises:
        TypeError: if an element is neither a Transaction nor a mapping.
        pydantic.ValidationError: if a mapping is not a valid Transaction.
    """

    def __init__(self, transactions: Iterable[Any]) -> None:
        self._transactions: tuple[Transaction, ...] = tuple(_coerce(t) for t in transactions)
        self._frame = transactions_to_frame(self._transactions)
        log.info("Query engine ready with %d transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """The held snapshot, in input order."""
        return self._transactions

    # --------------------------------------------------
    # Amounts
    # --------------------------------------------------
    def total_amount(self) -> float:
        """Return the sum of all amounts (0.0 when empty)."""
        return float(self._frame["amount"].sum())

    def total_amount_sent_by(self, name: str) -> float:
        """Return the sum of amounts sent by `name` (0.0 when none match)."""
        name = _require_name(name, "name")
        sent = self._frame.loc[self._frame["sender_full_name"] == name, "amount"]
        return float(sent.sum())

    def max_amount(self) -> float:
        """Return the largest amount, or 0.0 when there are no transactions."""
        if self._frame.empty:
            return 0.0
        return float(self._frame["amount"].max())

    def sent_totals_by_sender(self) -> dict[str, float]:
        """Return summed amount per sender, in first-seen order."""
        totals = sum_by_sender(self._frame)
        return {str(k): float(v) for k, v in totals.items()}

    # --------------------------------------------------
    # Clients
    # --------------------------------------------------
    def count_unique_clients(self) -> int:
        """Count distinct names across senders and beneficiaries."""
        names = set(self._frame["sender_full_name"]) | set(self._frame["beneficiary_full_name"])
        return len(names)

    def top_sender(self) -> str | None:
        """Return the sender with the greatest total sent, or None when empty.

        Senders are grouped in first-seen order; on equal totals the sender
        encountered first in the input wins.
        """
        totals = sum_by_sender(self._frame)
        if totals.empty:
            return None
        # idxmax returns the first label holding the maximum
        return str(totals.idxmax())

    # --------------------------------------------------
    # Compliance
    # --------------------------------------------------
    def has_open_compliance_issue(self, client_name: str) -> bool:
        """Return True if `client_name` is party to a transaction with an unsolved issue."""
        client_name = _require_name(client_name, "client_name")
        return any(t.involves(client_name) and t.has_open_issue for t in self._transactions)

    def unsolved_issue_ids(self) -> frozenset[int]:
        """Return the distinct ids of all unsolved issues."""
        return frozenset(
            issue.issue_id
            for t in self._transactions
            for issue in t.issues
            if not issue.solved
        )

    def all_solved_issue_messages(self) -> list[str]:
        """Return messages of solved issues in input order, duplicates kept."""
        return [
            issue.message
            for t in self._transactions
            for issue in t.issues
            if issue.solved
        ]

    # --------------------------------------------------
    # Indexing and ranking
    # --------------------------------------------------
    def transactions_by_beneficiary(self) -> dict[str, Transaction]:
        """Index transactions by beneficiary name.

        Only the last transaction per beneficiary (in input order) is kept;
        earlier ones are dropped. Use `transactions_grouped_by_beneficiary`
        to keep all of them.
        """
        return {t.beneficiary_full_name: t for t in self._transactions}

    def transactions_grouped_by_beneficiary(self) -> dict[str, list[Transaction]]:
        """Return every transaction per beneficiary name, in input order."""
        grouped: dict[str, list[Transaction]] = {}
        for t in self._transactions:
            grouped.setdefault(t.beneficiary_full_name, []).append(t)
        return grouped

    def top_by_amount(self, n: int) -> list[Transaction]:
        """Return up to `n` transactions by amount, descending.

        Equal amounts keep their input order.

        Raises:
            TypeError: if `n` is not an int.
            ValueError: if `n` is negative.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"n must be an int, got {type(n).__name__}")
        if n < 0:
            raise ValueError("n must be >= 0")
        positions = rank_by_amount(self._frame, n)
        log.debug("top_by_amount(n=%d) -> positions %s", n, positions)
        return [self._transactions[i] for i in positions]

    def top3_by_amount(self) -> list[Transaction]:
        """Return the three largest transactions by amount, descending."""
        return self.top_by_amount(3)

    # --------------------------------------------------
    # Reporting
    # --------------------------------------------------
    def summary(self) -> dict[str, Any]:
        """Return every parameterless query result in a JSON-friendly dict."""
        return {
            "transaction_count": len(self),
            "total_amount": self.total_amount(),
            "max_amount": self.max_amount(),
            "unique_clients": self.count_unique_clients(),
            "top_sender": self.top_sender(),
            "sent_totals_by_sender": self.sent_totals_by_sender(),
            "unsolved_issue_ids": sorted(self.unsolved_issue_ids()),
            "solved_issue_messages": self.all_solved_issue_messages(),
            "top3_by_amount": [t.id for t in self.top3_by_amount()],
            "transactions_by_beneficiary": {
                name: t.id for name, t in self.transactions_by_beneficiary().items()
            },
        }
