"""Error taxonomy for loading records and computing reports.

Every error raised on purpose by the package derives from
`SubscriptionStatsError`, so the CLI can report it without a traceback.
"""

from __future__ import annotations

from typing import Any


class SubscriptionStatsError(Exception):
    """Base class for all input and report failures."""


class InputFormatError(SubscriptionStatsError):
    """The input file cannot be read or does not match the expected schema."""


class RecordDateError(SubscriptionStatsError, ValueError):
    """A `created` or `period` value of one record cannot be parsed."""

    def __init__(self, record: int, field: str, value: Any):
        super().__init__(
            f"items[{record}]: cannot parse {field} value {value!r}"
        )
        self.record = record
        self.field = field
        self.value = value


class EmptyWindowError(SubscriptionStatsError, ZeroDivisionError):
    """The trailing window has no width, so no daily average exists."""
