from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from subscription_stats.models import SubscriptionBatch


def entry(period: str, incomes: int, expenses: int) -> dict[str, Any]:
    return {"period": period, "documents": {"incomes": incomes, "expenses": expenses}}


def subscription(package: str, created: str, *entries: dict[str, Any]) -> dict[str, Any]:
    return {"package": package, "created": created, "summary": list(entries)}


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return {
        "items": [
            subscription(
                "FLEXIBLE",
                "2020-03-10T00:00:00",
                entry("2019-12", 63, 13),
                entry("2020-02", 45, 81),
            ),
            subscription(
                "ENTERPRISE",
                "2020-03-19T00:00:00",
                entry("2020-01", 15, 52),
                entry("2020-02", 76, 47),
            ),
        ]
    }


@pytest.fixture
def sample_batch(sample_payload: dict[str, Any]) -> SubscriptionBatch:
    return SubscriptionBatch.model_validate(sample_payload)


@pytest.fixture
def sample_file(tmp_path: Path, sample_payload: dict[str, Any]) -> Path:
    path = tmp_path / "in_sample.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path
