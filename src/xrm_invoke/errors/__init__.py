# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Invocation Errors Module.

Exports:
    ModelInvocationErrorContext: Configuration model for bundled error context
    ModelErrorRecord: Structured record available on every error as ``.model``
    InvocationError: Base error class
    UnsupportedTypeError: Parameter tag not in the type registry
    InvalidValueShapeError: Value does not satisfy its declared tag
    InvalidArgumentError: Utility called with a wrong argument type
    ProtocolConfigurationError: Client configuration errors
    HostInvocationError: Failures surfaced by the host RPC client
    HostConnectionError: Host unreachable
    HostTimeoutError: Host did not answer in time

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Access tokens or Authorization headers
        - Full request bodies (they may carry personal data)

    SAFE to include:
        - Operation names (e.g., "WinOpportunity")
        - Parameter names and type tags
        - HTTP status codes
        - Correlation IDs
"""

from xrm_invoke.errors.invocation_errors import (
    HostConnectionError,
    HostInvocationError,
    HostTimeoutError,
    InvalidArgumentError,
    InvalidValueShapeError,
    InvocationError,
    ProtocolConfigurationError,
    UnsupportedTypeError,
)
from xrm_invoke.errors.model_error_record import ModelErrorRecord
from xrm_invoke.errors.model_invocation_error_context import (
    ModelInvocationErrorContext,
)

__all__: list[str] = [
    "HostConnectionError",
    "HostInvocationError",
    "HostTimeoutError",
    "InvalidArgumentError",
    "InvalidValueShapeError",
    "InvocationError",
    "ModelErrorRecord",
    "ModelInvocationErrorContext",
    "ProtocolConfigurationError",
    "UnsupportedTypeError",
]
