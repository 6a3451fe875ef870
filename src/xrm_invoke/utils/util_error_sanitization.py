# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Error message sanitization utilities.

Server error text is echoed into HostInvocationError messages and logs.
Sanitization keeps bearer tokens and similar material out of both.

Example:
    >>> sanitize_error_string("Authorization: Bearer eyJ0eXAi...")
    '[REDACTED - potentially sensitive data]'
"""

from __future__ import annotations

# Checked case-insensitively against the message; any match redacts it.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "client_secret",
    "credential",
    "bearer",
    "authorization",
    "-----begin",
    "-----end",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs and errors.

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        The original string, a truncated copy, or a redaction marker.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


def sanitize_error_message(exception: Exception, max_length: int = 500) -> str:
    """Sanitize an exception message, prefixed with the exception type."""
    exception_type = type(exception).__name__
    sanitized = sanitize_error_string(str(exception), max_length=max_length)
    return f"{exception_type}: {sanitized}"


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
