"""Flatten the subscription collection into pandas frames.

Every row carries `record`, the index of its subscription in `items`, so a
value that fails to parse can be traced back to the input.
"""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from subscription_stats.aggregate.calendar import to_months
from subscription_stats.errors import RecordDateError
from subscription_stats.models import Subscription

SUBSCRIPTION_COLUMNS = ["record", "package", "created"]
ENTRY_COLUMNS = ["record", "package", "period", "incomes", "expenses"]


def subscriptions_frame(items: Sequence[Subscription]) -> pd.DataFrame:
    """Return one row per subscription with columns `record`, `package`, `created`."""
    rows = [
        {"record": i, "package": s.package, "created": s.created}
        for i, s in enumerate(items)
    ]
    return pd.DataFrame(rows, columns=SUBSCRIPTION_COLUMNS)


def entries_frame(items: Sequence[Subscription]) -> pd.DataFrame:
    """Return one row per period entry.

    Columns: `record`, `package`, `period` (literal label), `incomes`,
    `expenses`.
    """
    rows = [
        {
            "record": i,
            "package": s.package,
            "period": e.period,
            "incomes": e.documents.incomes,
            "expenses": e.documents.expenses,
        }
        for i, s in enumerate(items)
        for e in s.summary
    ]
    frame = pd.DataFrame(rows, columns=ENTRY_COLUMNS)
    return frame.astype({"incomes": "int64", "expenses": "int64"})


def _raise_on_unparsed(frame: pd.DataFrame, parsed: pd.Series, field: str) -> None:
    bad = parsed.isna()
    if bad.any():
        row = frame.loc[bad.idxmax()]
        raise RecordDateError(int(row["record"]), field, row[field])


def created_months(frame: pd.DataFrame) -> pd.Series:
    """Parse `created` and truncate each value to its UTC calendar month.

    Raises:
        RecordDateError: for the first record whose `created` is not ISO-8601.
    """
    parsed = pd.to_datetime(frame["created"], utc=True, errors="coerce", format="ISO8601")
    _raise_on_unparsed(frame, parsed, "created")
    return to_months(parsed)


def entry_months(frame: pd.DataFrame) -> pd.Series:
    """Parse `period` labels (``YYYY-MM``) into monthly periods.

    Raises:
        RecordDateError: for the first record with a malformed period label.
    """
    parsed = pd.to_datetime(frame["period"], format="%Y-%m", errors="coerce")
    _raise_on_unparsed(frame, parsed, "period")
    return to_months(parsed)
