"""pandas helpers for grouped and ranked aggregation.

These functions turn a transaction snapshot into a small DataFrame and run
the group-by and ranking steps the query engine needs.

Expectations:
- Input: a DataFrame built by `transactions_to_frame`, one row per
  transaction, in input order, with a default RangeIndex.
- Outputs: plain pandas objects whose order follows the input order wherever
  values tie.
"""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from txn_analytics.models import Transaction

FRAME_COLUMNS = ["id", "amount", "sender_full_name", "beneficiary_full_name"]


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Return a DataFrame view of the transactions.

    Args:
        transactions: Transaction records in input order.

    Returns:
        DataFrame with columns `id`, `amount`, `sender_full_name`,
        `beneficiary_full_name`. Empty input keeps the same columns.
    """
    rows = [
        {
            "id": t.id,
            "amount": t.amount,
            "sender_full_name": t.sender_full_name,
            "beneficiary_full_name": t.beneficiary_full_name,
        }
        for t in transactions
    ]
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return frame.astype({"amount": "float64"})


def sum_by_sender(frame: pd.DataFrame) -> pd.Series:
    """Return summed `amount` per sender.

    Args:
        frame: DataFrame from `transactions_to_frame`.

    Returns:
        Series indexed by `sender_full_name`, in first-seen order.
    """
    return frame.groupby("sender_full_name", sort=False)["amount"].sum()


def rank_by_amount(frame: pd.DataFrame, top_n: int) -> list[int]:
    """Return row positions of the `top_n` largest amounts.

    A stable sort keeps input order among equal amounts.

    Args:
        frame: DataFrame from `transactions_to_frame`.
        top_n: Number of rows to keep.

    Returns:
        List of integer row positions, amount descending.
    """
    ranked = frame.sort_values("amount", ascending=False, kind="stable").head(top_n)
    return [int(i) for i in ranked.index]
