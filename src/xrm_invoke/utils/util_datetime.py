# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Datetime normalization for DateTime parameters.

DateTime parameters travel as ``Edm.DateTimeOffset``, which always carries
an offset. Naive datetimes are ambiguous, so they are treated as UTC and a
warning is logged to help find their source.

Example:
    >>> from datetime import datetime, UTC
    >>> to_wire_datetime(datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC))
    '2025-01-15T12:00:00Z'
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

logger = logging.getLogger(__name__)


def ensure_timezone_aware(
    dt: datetime,
    *,
    warn_on_naive: bool = True,
    context: str | None = None,
) -> datetime:
    """Ensure a datetime is timezone-aware, treating naive values as UTC.

    Args:
        dt: The datetime to normalize.
        warn_on_naive: Log a warning when a naive datetime is converted.
        context: Optional context for the warning, usually the parameter name.

    Returns:
        ``dt`` unchanged if it is already aware, otherwise a copy with UTC
        tzinfo.
    """
    if dt.tzinfo is not None and dt.utcoffset() is not None:
        return dt

    if warn_on_naive:
        context_msg = f" for '{context}'" if context else ""
        logger.warning(
            "Converting naive datetime to UTC%s",
            context_msg,
            extra={
                "naive_datetime": dt.isoformat(),
                "context": context,
                "action": "converted_to_utc",
            },
        )

    # replace() rather than astimezone(): astimezone() reads naive values as local time
    return dt.replace(tzinfo=UTC)


def to_wire_datetime(dt: datetime, *, context: str | None = None) -> str:
    """Format a datetime as ISO-8601 with a ``Z`` suffix for UTC offsets."""
    aware = ensure_timezone_aware(dt, context=context)
    text = aware.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


__all__: list[str] = ["ensure_timezone_aware", "to_wire_datetime"]
