"""Command-line interface for querying a transactions file.

Provides subcommands: `summary`, `sent-by`, `open-issues` and `top`. Each
command is implemented as a `cmd_*` function that accepts an argparse
namespace and an engine, and returns the JSON-friendly result to print.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Callable, Sequence

from txn_analytics.config import get_settings
from txn_analytics.logging_config import configure_logging
from txn_analytics.ingest.load_transactions import load_transactions
from txn_analytics.query.engine import TransactionQueryEngine

log = logging.getLogger(__name__)


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_summary(_: argparse.Namespace, engine: TransactionQueryEngine) -> Any:
    """Return every parameterless query result."""
    return engine.summary()


def cmd_sent_by(args: argparse.Namespace, engine: TransactionQueryEngine) -> Any:
    """Return the total amount sent by `args.name`."""
    return {"sender": args.name, "total_sent": engine.total_amount_sent_by(args.name)}


def cmd_open_issues(args: argparse.Namespace, engine: TransactionQueryEngine) -> Any:
    """Return whether `args.name` is party to an unsolved compliance issue."""
    return {
        "client": args.name,
        "has_open_compliance_issue": engine.has_open_compliance_issue(args.name),
    }


def cmd_top(args: argparse.Namespace, engine: TransactionQueryEngine) -> Any:
    """Return the top `args.n` transactions by amount."""
    return [t.model_dump(mode="json") for t in engine.top_by_amount(args.n)]


COMMANDS: dict[str, Callable[[argparse.Namespace, TransactionQueryEngine], Any]] = {
    "summary": cmd_summary,
    "sent-by": cmd_sent_by,
    "open-issues": cmd_open_issues,
    "top": cmd_top,
}


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Every subcommand accepts `--file`; when omitted, the path comes from
    `TRANSACTIONS_FILE`.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="txn-analytics")
    sub = p.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", type=Path, default=None)

    sub.add_parser("summary", parents=[common])

    p_sent = sub.add_parser("sent-by", parents=[common])
    p_sent.add_argument("name")

    p_open = sub.add_parser("open-issues", parents=[common])
    p_open.add_argument("name")

    p_top = sub.add_parser("top", parents=[common])
    p_top.add_argument("--n", type=int, default=3)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)
    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    path = args.file if args.file is not None else s.transactions_file
    engine = TransactionQueryEngine(load_transactions(path))

    result = COMMANDS[args.cmd](args, engine)
    log.info("Command %s finished", args.cmd)
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
