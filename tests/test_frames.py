from __future__ import annotations

from txn_analytics.models import Transaction
from txn_analytics.query.frames import (
    FRAME_COLUMNS,
    rank_by_amount,
    sum_by_sender,
    transactions_to_frame,
)


def _tx(i: int, amount: float, sender: str) -> Transaction:
    return Transaction(id=str(i), amount=amount, sender_full_name=sender, beneficiary_full_name="B")


def test_empty_frame_keeps_columns() -> None:
    frame = transactions_to_frame([])
    assert list(frame.columns) == FRAME_COLUMNS
    assert frame.empty
    assert sum_by_sender(frame).empty
    assert rank_by_amount(frame, 3) == []


def test_sum_by_sender_keeps_first_seen_order() -> None:
    frame = transactions_to_frame([_tx(1, 5.0, "Zed"), _tx(2, 1.0, "Amy"), _tx(3, 2.0, "Zed")])
    totals = sum_by_sender(frame)
    assert list(totals.index) == ["Zed", "Amy"]
    assert totals["Zed"] == 7.0


def test_rank_by_amount_is_stable() -> None:
    frame = transactions_to_frame([_tx(1, 10.0, "A"), _tx(2, 30.0, "B"), _tx(3, 10.0, "C")])
    assert rank_by_amount(frame, 3) == [1, 0, 2]
    assert rank_by_amount(frame, 1) == [1]
