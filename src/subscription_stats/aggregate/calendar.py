"""Calendar arithmetic on immutable pandas values.

Months are represented as monthly `pd.Period` objects; a period's
`start_time` is its first-of-month timestamp.
"""

from __future__ import annotations

import pandas as pd

_ONE_DAY = pd.Timedelta(days=1)


def to_months(values: pd.Series) -> pd.Series:
    """Truncate a series of timestamps to calendar months, evaluated in UTC.

    Naive timestamps are taken as UTC.
    """
    if values.dt.tz is not None:
        values = values.dt.tz_convert("UTC").dt.tz_localize(None)
    return values.dt.to_period("M")


def shift_months(period: pd.Period, months: int) -> pd.Period:
    """Return `period` moved by `months` (negative goes back), borrowing years."""
    return period + months


def whole_days_between(start: pd.Period, end: pd.Period) -> int:
    """Whole days from the first day of `start` to the first day of `end`.

    The result truncates toward zero.
    """
    return int((end.start_time - start.start_time) / _ONE_DAY)


def fill_month_gaps(counts: pd.Series) -> pd.Series:
    """Reindex a month-indexed series onto every month from min to max.

    Args:
        counts: Series indexed by monthly `pd.Period`.

    Returns:
        Series over the contiguous month range, missing months set to 0.
    """
    if counts.empty:
        return counts
    months = pd.period_range(counts.index.min(), counts.index.max(), freq="M")
    return counts.reindex(months, fill_value=0)
