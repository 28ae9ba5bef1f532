from __future__ import annotations

import pytest
from pydantic import ValidationError

from txn_analytics.models import ComplianceIssue, Transaction


def test_transaction_validates_from_source_keys() -> None:
    rec = {
        "mtn": 663458,
        "amount": 430.2,
        "senderFullName": "Tom Shelby",
        "senderAge": 22,
        "beneficiaryFullName": "Alfie Solomons",
        "beneficiaryAge": 33,
        "issues": [{"issueId": 1, "issueSolved": False, "issueMessage": "Looks like money laundering"}],
    }
    t = Transaction.model_validate(rec)
    assert t.id == "663458"
    assert t.sender_full_name == "Tom Shelby"
    assert t.issues == (ComplianceIssue(issue_id=1, solved=False, message="Looks like money laundering"),)
    assert t.has_open_issue


def test_missing_issues_become_empty_tuple() -> None:
    t = Transaction(id="a", amount=1.0, sender_full_name="A", beneficiary_full_name="B", issues=None)
    assert t.issues == ()
    assert not t.has_open_issue


def test_null_issue_message_becomes_empty_string() -> None:
    issue = ComplianceIssue.model_validate({"issueId": 9, "issueSolved": True, "issueMessage": None})
    assert issue.message == ""


def test_transaction_rejects_negative_amount() -> None:
    with pytest.raises(ValidationError):
        Transaction(id="a", amount=-0.01, sender_full_name="A", beneficiary_full_name="B")


def test_transaction_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        Transaction.model_validate(
            {"id": "a", "amount": 1.0, "senderFullName": "A", "beneficiaryFullName": "B", "currency": "EUR"}
        )


def test_transaction_is_immutable() -> None:
    t = Transaction(id="a", amount=1.0, sender_full_name="A", beneficiary_full_name="B")
    with pytest.raises(ValidationError):
        t.amount = 2.0  # type: ignore[misc]


def test_involves_matches_exact_names() -> None:
    t = Transaction(id="a", amount=1.0, sender_full_name="Ann", beneficiary_full_name="Bob")
    assert t.involves("Ann")
    assert t.involves("Bob")
    assert not t.involves("ann")
