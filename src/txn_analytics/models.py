"""Pydantic models for transaction records and their compliance issues.

Both models are frozen: once a record is validated it cannot be changed, so a
query engine can hold references to them without copying.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ComplianceIssue(BaseModel):
    """A flagged concern attached to a transaction.

    Attributes:
        issue_id: Issue identifier (not unique across transactions).
        solved: Whether the issue has been resolved.
        message: Free-text message; only meaningful for solved issues.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)
    issue_id: int = Field(..., validation_alias=AliasChoices("issue_id", "issueId"))
    solved: bool = Field(..., validation_alias=AliasChoices("solved", "issueSolved"))
    message: str = Field("", validation_alias=AliasChoices("message", "issueMessage"))

    @field_validator("message", mode="before")
    @classmethod
    def _none_message_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Transaction(BaseModel):
    """A monetary transfer between a sender and a beneficiary.

    Attributes:
        id: Unique transaction identifier (``mtn`` in source files).
        amount: Non-negative transferred amount.
        sender_full_name: Sender identity key (exact, case-sensitive).
        sender_age: Sender age, informational.
        beneficiary_full_name: Beneficiary identity key.
        beneficiary_age: Beneficiary age, informational.
        issues: Compliance issues; empty when the transaction has none.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)
    id: str = Field(..., validation_alias=AliasChoices("id", "mtn"))
    amount: float = Field(..., ge=0)
    sender_full_name: str = Field(
        ..., validation_alias=AliasChoices("sender_full_name", "senderFullName")
    )
    sender_age: int = Field(0, ge=0, validation_alias=AliasChoices("sender_age", "senderAge"))
    beneficiary_full_name: str = Field(
        ..., validation_alias=AliasChoices("beneficiary_full_name", "beneficiaryFullName")
    )
    beneficiary_age: int = Field(
        0, ge=0, validation_alias=AliasChoices("beneficiary_age", "beneficiaryAge")
    )
    issues: tuple[ComplianceIssue, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: Any) -> Any:
        # source files carry numeric mtn values
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator("issues", mode="before")
    @classmethod
    def _none_issues_is_empty(cls, v: Any) -> Any:
        return () if v is None else v

    def involves(self, client_name: str) -> bool:
        """Return True when ``client_name`` is the sender or the beneficiary."""
        return client_name in (self.sender_full_name, self.beneficiary_full_name)

    @property
    def has_open_issue(self) -> bool:
        """True if at least one attached issue is unsolved."""
        return any(not issue.solved for issue in self.issues)
