# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Utility modules for the invocation layer.

This package provides:
    - util_guid: GUID normalization
    - util_datetime: Timezone handling for DateTime parameters
    - util_env_parsing: Type-safe environment variable parsing
    - util_error_sanitization: Error message sanitization for logs and errors
"""

from xrm_invoke.utils.util_datetime import ensure_timezone_aware, to_wire_datetime
from xrm_invoke.utils.util_env_parsing import parse_env_float, parse_env_str
from xrm_invoke.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
)
from xrm_invoke.utils.util_guid import normalize_guid

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "ensure_timezone_aware",
    "normalize_guid",
    "parse_env_float",
    "parse_env_str",
    "sanitize_error_message",
    "sanitize_error_string",
    "to_wire_datetime",
]
