"""Tests for timestamp and duration formatting."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from service_template import clock


def test_utc_timestamp_format():
    now = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=timezone.utc)

    assert clock.utc_timestamp(now) == "2024-03-05T07:08:09Z"


def test_utc_timestamp_converts_offsets():
    now = datetime(2024, 3, 5, 9, 8, 9, tzinfo=timezone(timedelta(hours=2)))

    assert clock.utc_timestamp(now) == "2024-03-05T07:08:09Z"


def test_utc_timestamp_defaults_to_now():
    before = datetime.now(timezone.utc).replace(microsecond=0)
    stamp = datetime.strptime(clock.utc_timestamp(), "%Y-%m-%dT%H:%M:%SZ")

    assert stamp.replace(tzinfo=timezone.utc) >= before


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (0.4, "0s"),
        (0.5, "1s"),
        (45, "45s"),
        (60, "1m0s"),
        (125.2, "2m5s"),
        (3600, "1h0m0s"),
        (93784, "26h3m4s"),
        (-5, "0s"),
    ],
)
def test_format_duration(seconds, expected):
    assert clock.format_duration(seconds) == expected


def test_uptime_counts_from_process_start(monkeypatch):
    readings = iter([100.0, 101.2, 161.0])
    monkeypatch.setattr(clock, "PROCESS_STARTED_AT", 100.0)
    monkeypatch.setattr(clock, "time", SimpleNamespace(monotonic=lambda: next(readings)))

    assert [clock.uptime() for _ in range(3)] == ["0s", "1s", "1m1s"]
