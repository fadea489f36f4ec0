from __future__ import annotations

from pathlib import Path

import pytest

from subscription_stats.errors import InputFormatError
from subscription_stats.ingest.load_input import load_subscriptions


def test_load_subscriptions_reads_file(sample_file: Path) -> None:
    batch = load_subscriptions(sample_file)
    assert [s.package for s in batch.items] == ["FLEXIBLE", "ENTERPRISE"]


def test_load_subscriptions_empty_items(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text('{"items": []}', encoding="utf-8")
    assert load_subscriptions(path).items == ()


def test_load_subscriptions_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"items": [', encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_subscriptions(path)


def test_load_subscriptions_rejects_missing_field(tmp_path: Path) -> None:
    path = tmp_path / "partial.json"
    path.write_text('{"items": [{"package": "FLEXIBLE", "summary": []}]}', encoding="utf-8")
    with pytest.raises(InputFormatError, match="created"):
        load_subscriptions(path)


def test_load_subscriptions_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputFormatError):
        load_subscriptions(tmp_path / "nope.json")
