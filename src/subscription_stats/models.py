"""Pydantic models for the input document and report rows.

Input models are frozen: the collection is read once and never mutated.
`created` and `period` stay as the literal strings from the file; the
reports that need calendar values parse them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Documents(BaseModel):
    """Document counts reported for one period."""
    model_config = ConfigDict(frozen=True)
    incomes: int = Field(..., ge=0)
    expenses: int = Field(..., ge=0)


class PeriodEntry(BaseModel):
    """Document counts of a subscription for one year-month period.

    Attributes:
        period: Year-month label, e.g. ``"2020-02"``.
        documents: Income and expense counts for the period.
    """
    model_config = ConfigDict(frozen=True)
    period: str
    documents: Documents


class Subscription(BaseModel):
    """A package subscription with its per-period summary.

    Attributes:
        package: Subscription tier label (e.g. ``FLEXIBLE``, ``ENTERPRISE``).
        created: ISO-8601 creation timestamp as given in the input.
        summary: Period entries in input order.
    """
    model_config = ConfigDict(frozen=True)
    package: str
    created: str
    summary: tuple[PeriodEntry, ...]


class SubscriptionBatch(BaseModel):
    """Root of the input file: ``{"items": [...]}``."""
    model_config = ConfigDict(frozen=True)
    items: tuple[Subscription, ...]


class PeriodDocuments(BaseModel):
    """Report row with summed document counts for a single period."""
    model_config = ConfigDict(extra="forbid")
    incomes: int = Field(..., ge=0)
    expenses: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
