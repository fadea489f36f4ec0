"""Command-line interface for the subscription reports.

Loads one JSON input file and prints the three reports in fixed order, each
preceded by a ``>>> <report name>`` label line.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Sequence, TextIO

from dotenv import load_dotenv

from subscription_stats.aggregate import (
    creations_per_month,
    documents_per_period,
    trailing_daily_average,
)
from subscription_stats.config import Settings, get_settings
from subscription_stats.errors import SubscriptionStatsError
from subscription_stats.ingest.load_input import load_subscriptions
from subscription_stats.logging_config import configure_logging
from subscription_stats.models import Subscription

log = logging.getLogger(__name__)

DATA_EXTENSIONS = (".json",)

Report = Callable[[Sequence[Subscription]], Any]

REPORTS: tuple[tuple[str, Report], ...] = (
    ("creations_per_month", creations_per_month),
    ("documents_per_period", documents_per_period),
    ("trailing_daily_average", trailing_daily_average),
)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _data_file(value: str) -> Path:
    """argparse type: accept only paths with a recognised data extension."""
    if not value.lower().endswith(DATA_EXTENSIONS):
        raise argparse.ArgumentTypeError(
            f"{value!r} is not a data file (expected {', '.join(DATA_EXTENSIONS)})"
        )
    return Path(value)


def render_report(name: str, result: Any) -> str:
    """Return the label line and compact JSON body for one report."""
    return f"\n>>> {name}\n{json.dumps(result)}"


# --------------------------------------------------
# REPORT
# --------------------------------------------------
def run_reports(settings: Settings, out: TextIO) -> None:
    """Load the input named in `settings` and print every report to `out`.

    Reports are printed as soon as each is computed, so an error in a later
    report leaves earlier output in place.

    Raises:
        SubscriptionStatsError: on unreadable input or a failing report.
    """
    batch = load_subscriptions(settings.input_path)

    for name, report in REPORTS:
        log.info("Running %s", name)
        print(render_report(name, report(batch.items)), file=out)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(
        prog="subscription-stats",
        description="Print subscription summary reports for a JSON data file.",
        epilog="Example: subscription-stats in_1000000.json",
    )
    p.add_argument("input_file", type=_data_file, help="JSON file with an 'items' array")
    p.add_argument(
        "--log-level",
        default=None,
        help="Override SUBSCRIPTION_STATS_LOG_LEVEL (default INFO)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and print reports."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(args.input_file, args.log_level)
    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2)

    configure_logging(settings.log_path, settings.log_level)

    try:
        run_reports(settings, sys.stdout)
    except SubscriptionStatsError as e:
        log.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
