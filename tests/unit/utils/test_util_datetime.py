# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Tests for datetime normalization."""

import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest

from xrm_invoke.utils import ensure_timezone_aware, to_wire_datetime


class TestEnsureTimezoneAware:
    """Naive datetimes are treated as UTC."""

    def test_aware_returned_unchanged(self) -> None:
        dt = datetime(2025, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert ensure_timezone_aware(dt) is dt

    def test_naive_gets_utc(self) -> None:
        result = ensure_timezone_aware(datetime(2025, 1, 15, 12, 0))
        assert result.tzinfo is UTC
        assert result.hour == 12

    def test_naive_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            ensure_timezone_aware(datetime(2025, 1, 15), context="Due")
        assert "Converting naive datetime to UTC for 'Due'" in caplog.text

    def test_warning_can_be_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            ensure_timezone_aware(datetime(2025, 1, 15), warn_on_naive=False)
        assert caplog.records == []


class TestToWireDatetime:
    """ISO-8601 wire formatting."""

    def test_utc_uses_z_suffix(self) -> None:
        assert to_wire_datetime(datetime(2025, 1, 15, 12, 0, tzinfo=UTC)) == (
            "2025-01-15T12:00:00Z"
        )

    def test_offset_preserved(self) -> None:
        dt = datetime(2025, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert to_wire_datetime(dt) == "2025-01-15T12:00:00-05:00"
