"""Load and validate the subscription input file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from subscription_stats.errors import InputFormatError
from subscription_stats.models import SubscriptionBatch

log = logging.getLogger(__name__)


def load_subscriptions(path: Path) -> SubscriptionBatch:
    """Read `path` and validate it as a `SubscriptionBatch`.

    Args:
        path: JSON file with an ``items`` array of subscriptions.

    Returns:
        The validated, immutable batch.

    Raises:
        InputFormatError: if the file cannot be read, is not valid JSON, or
            does not match the subscription schema.
    """
    log.info("Reading %s", path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InputFormatError(f"cannot read {path}: {e}") from e

    try:
        batch = SubscriptionBatch.model_validate_json(raw)
    except ValidationError as e:
        raise InputFormatError(f"invalid input in {path}: {e}") from e

    log.info("Loaded %d subscriptions from %s", len(batch.items), path)
    return batch
