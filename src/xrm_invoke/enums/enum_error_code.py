# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Error Code Enumeration.

Classification codes stored on every InvocationError's error record.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumErrorCode(str, Enum):
    """Error classification for invocation errors.

    Attributes:
        UNSUPPORTED_TYPE: Parameter tag absent from the type registry
        INVALID_VALUE_SHAPE: Value does not satisfy its declared tag's rule
        INVALID_ARGUMENT: A utility was called with an argument of the wrong type
        INVALID_CONFIGURATION: Client configuration is missing or invalid
        HOST_INVOCATION_FAILED: The host rejected or failed the operation
        HOST_CONNECTION_FAILED: The host could not be reached
        HOST_TIMEOUT: The host did not answer in time
    """

    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    INVALID_VALUE_SHAPE = "INVALID_VALUE_SHAPE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    HOST_INVOCATION_FAILED = "HOST_INVOCATION_FAILED"
    HOST_CONNECTION_FAILED = "HOST_CONNECTION_FAILED"
    HOST_TIMEOUT = "HOST_TIMEOUT"


__all__: list[str] = ["EnumErrorCode"]
