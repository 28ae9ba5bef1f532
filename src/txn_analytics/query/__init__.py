"""Query layer.

Holds the `TransactionQueryEngine` and the pandas helpers it uses for
grouped sums and amount ranking.
"""

from txn_analytics.query.engine import TransactionQueryEngine

__all__ = ["TransactionQueryEngine"]
