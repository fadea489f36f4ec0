"""Report aggregation helpers.

This package turns the validated subscription collection into the three
summary reports: creations per month, documents per period and the trailing
three-month daily average. Every report is a pure function of its input.
"""

from subscription_stats.aggregate.reports import (
    creations_per_month,
    documents_per_period,
    trailing_daily_average,
)

__all__ = ["creations_per_month", "documents_per_period", "trailing_daily_average"]
