"""Report functions.

Each function takes the loaded subscription collection and returns a plain
value suitable for JSON output. Nothing here performs I/O or mutates the
input.

Expectations:
- Input: a sequence of validated `Subscription` models (e.g. the `items`
  of a `SubscriptionBatch`).
- Outputs: mappings keyed by ``YYYY-MM`` strings, or a single int for the
  trailing average.
"""
from __future__ import annotations

import logging
from typing import Sequence

from subscription_stats.aggregate.calendar import (
    fill_month_gaps,
    shift_months,
    whole_days_between,
)
from subscription_stats.aggregate.frames import (
    created_months,
    entries_frame,
    entry_months,
    subscriptions_frame,
)
from subscription_stats.errors import EmptyWindowError
from subscription_stats.models import PeriodDocuments, Subscription

log = logging.getLogger(__name__)

TRAILING_PACKAGES = ("ENTERPRISE", "FLEXIBLE")
TRAILING_MONTHS = 3


def creations_per_month(items: Sequence[Subscription]) -> dict[str, int]:
    """Return the number of subscriptions created in each calendar month.

    Months are evaluated in UTC. Every month between the earliest and the
    latest creation month is present; months without creations count 0.

    Args:
        items: Subscriptions to count.

    Returns:
        Mapping of ``YYYY-MM`` to subscription count. Empty for empty input.

    Raises:
        RecordDateError: if a `created` value cannot be parsed.
    """
    frame = subscriptions_frame(items)
    if frame.empty:
        return {}

    counts = fill_month_gaps(created_months(frame).value_counts())
    log.info("Counted %d subscriptions over %d months", len(frame), len(counts))
    return {str(month): int(n) for month, n in counts.sort_index().items()}


def documents_per_period(items: Sequence[Subscription]) -> dict[str, dict[str, int]]:
    """Return summed income, expense and total documents per period label.

    Periods are grouped by their literal label; only labels present in the
    data appear.

    Args:
        items: Subscriptions whose summaries are summed.

    Returns:
        Mapping of period label to ``{"incomes", "expenses", "total"}``.
    """
    frame = entries_frame(items)
    if frame.empty:
        return {}

    sums = frame.groupby("period")[["incomes", "expenses"]].sum()
    log.info("Summed %d period entries into %d periods", len(frame), len(sums))

    out: dict[str, dict[str, int]] = {}
    for period, row in sums.iterrows():
        incomes, expenses = int(row["incomes"]), int(row["expenses"])
        out[str(period)] = PeriodDocuments(
            incomes=incomes,
            expenses=expenses,
            total=incomes + expenses,
        ).model_dump()
    return out


def trailing_daily_average(items: Sequence[Subscription]) -> int:
    """Return the average number of documents per day in the trailing window.

    The window ends at the latest period of any package and starts on the
    first day of the month three months earlier; both bounds are inclusive.
    Only subscriptions of the `TRAILING_PACKAGES` packages are counted. The
    average is rounded half-up.

    Args:
        items: Subscriptions to average over.

    Returns:
        Integer documents per day.

    Raises:
        EmptyWindowError: if the input has no periods or the window spans
            zero days.
        RecordDateError: if a period label cannot be parsed.
    """
    frame = entries_frame(items)
    if frame.empty:
        raise EmptyWindowError("no periods in input; trailing window is undefined")

    months = entry_months(frame)
    latest = months.max()
    window_start = shift_months(latest, -TRAILING_MONTHS)
    num_days = whole_days_between(window_start, latest)
    log.debug("Trailing window %s..%s (%d days)", window_start, latest, num_days)

    if num_days <= 0:
        raise EmptyWindowError(
            f"trailing window {window_start}..{latest} spans {num_days} days"
        )

    selected = frame[
        frame["package"].isin(TRAILING_PACKAGES)
        & (months >= window_start)
        & (months <= latest)
    ]
    total_docs = int((selected["incomes"] + selected["expenses"]).sum())

    # half-up on non-negative integers
    average = (2 * total_docs + num_days) // (2 * num_days)
    log.info(
        "Trailing average: %d documents over %d days -> %d/day",
        total_docs,
        num_days,
        average,
    )
    return average
