# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Type-safe environment variable parsing.

Invalid or out-of-range values are logged and replaced by the default
rather than raising, so a bad deployment setting never blocks start-up.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def parse_env_float(
    name: str,
    default: float,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """Read a float from the environment.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset, unparsable or out of range
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound

    Example:
        >>> os.environ["XRM_TIMEOUT_SECONDS"] = "12.5"
        >>> parse_env_float("XRM_TIMEOUT_SECONDS", 30.0, min_value=1.0)
        12.5
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "Invalid float in environment variable, using default",
            extra={"env_var": name, "provided_value": raw, "default_value": default},
        )
        return default

    if (min_value is not None and value < min_value) or (
        max_value is not None and value > max_value
    ):
        logger.warning(
            "Environment variable out of range, using default",
            extra={
                "env_var": name,
                "provided_value": value,
                "min_value": min_value,
                "max_value": max_value,
                "default_value": default,
            },
        )
        return default

    return value


def parse_env_str(name: str, default: str = "") -> str:
    """Read a string from the environment, stripped of surrounding whitespace."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or default


__all__: list[str] = ["parse_env_float", "parse_env_str"]
