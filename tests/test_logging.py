from __future__ import annotations

import io
import logging

from subscription_stats.logging_config import configure_logging


def test_configure_logging_formats_records(monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    stream = io.StringIO()

    configure_logging(None, logging.DEBUG, stream=stream)
    logging.getLogger("subscription_stats.check").debug("window %s", "2020-01")

    assert "| DEBUG | subscription_stats.check | window 2020-01" in stream.getvalue()
    assert [type(h) for h in root.handlers] == [logging.StreamHandler]
