"""txn_analytics package.

In-memory analytics over a fixed collection of transaction records: totals,
maxima, unique clients, compliance-issue lookups, top-K ranking and group-by
aggregation.

Architecture:
- JSON rows → validated records (ingest)
- records → read-only query engine (query)
- Pydantic models validate every record; pandas backs grouped aggregation
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
