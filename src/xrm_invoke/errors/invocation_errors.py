# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Invocation Error Classes.

This module defines the error classes raised by the typed invocation layer.
Every error carries a structured ModelErrorRecord on ``.model`` so callers
and tests can inspect the classification and context without parsing
messages.

Error Hierarchy:
    InvocationError (base)
    ├── UnsupportedTypeError
    ├── InvalidValueShapeError
    ├── InvalidArgumentError
    ├── ProtocolConfigurationError
    └── HostInvocationError
        ├── HostConnectionError
        └── HostTimeoutError

All errors:
    - Use EnumErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelInvocationErrorContext for bundled context parameters

Validation errors (UnsupportedTypeError, InvalidValueShapeError) are always
raised before any host call is attempted.
"""

from typing import Optional

from xrm_invoke.enums import EnumErrorCode, EnumParameterType
from xrm_invoke.errors.model_error_record import ModelErrorRecord
from xrm_invoke.errors.model_invocation_error_context import (
    ModelInvocationErrorContext,
)


class InvocationError(Exception):
    """Base error class for the invocation layer.

    Structured Fields (via ModelInvocationErrorContext):
        transport_type: Where the failure happened
        operation: Operation being performed
        correlation_id: Request correlation ID for tracking
        target_name: Target operation or endpoint name

    Example:
        >>> context = ModelInvocationErrorContext(
        ...     transport_type=EnumTransportType.HTTP,
        ...     operation="http.post",
        ...     target_name="WinOpportunity",
        ... )
        >>> raise InvocationError("Operation failed", context=context)
    """

    default_error_code: EnumErrorCode = EnumErrorCode.HOST_INVOCATION_FAILED

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumErrorCode] = None,
        context: Optional[ModelInvocationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize InvocationError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to the class default)
            context: Bundled context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.model = ModelErrorRecord(
            message=message,
            error_code=error_code or self.default_error_code,
            correlation_id=correlation_id,
            context=structured_context,
        )

    @property
    def message(self) -> str:
        return self.model.message

    @property
    def error_code(self) -> EnumErrorCode:
        return self.model.error_code

    @property
    def correlation_id(self):
        return self.model.correlation_id


def _tag_text(tag: object) -> str:
    if isinstance(tag, EnumParameterType):
        return tag.value
    return str(tag)


class UnsupportedTypeError(InvocationError):
    """Raised when a parameter's type tag is absent from the type registry.

    Example:
        >>> raise UnsupportedTypeError(parameter_type="Guid", parameter_name="id")
        Traceback (most recent call last):
        ...
        UnsupportedTypeError: The property type Guid of the property id is not supported.
    """

    default_error_code = EnumErrorCode.UNSUPPORTED_TYPE

    def __init__(
        self,
        message: Optional[str] = None,
        parameter_type: object = None,
        parameter_name: Optional[str] = None,
        context: Optional[ModelInvocationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        extra: dict[str, object] = dict(extra_context)
        if parameter_type is not None:
            extra["parameter_type"] = _tag_text(parameter_type)
        if parameter_name is not None:
            extra["parameter_name"] = parameter_name
        if message is None:
            message = (
                f"The property type {_tag_text(parameter_type)} "
                f"of the property {parameter_name} is not supported."
            )
        super().__init__(message=message, context=context, **extra)


class InvalidValueShapeError(InvocationError):
    """Raised when a value's runtime shape does not satisfy its declared tag.

    One multi-line template covers every rule (wrong primitive kind, missing
    ``id``/``entityType``, not a datetime, not a list, ...).

    Example:
        >>> raise InvalidValueShapeError(
        ...     value="2024-01-01", parameter_name="due", parameter_type="DateTime"
        ... )
        Traceback (most recent call last):
        ...
        InvalidValueShapeError: The value 2024-01-01
        of the property due
        is not of the expected type DateTime.
    """

    default_error_code = EnumErrorCode.INVALID_VALUE_SHAPE

    def __init__(
        self,
        message: Optional[str] = None,
        value: object = None,
        parameter_name: Optional[str] = None,
        parameter_type: object = None,
        context: Optional[ModelInvocationErrorContext] = None,
        **extra_context: object,
    ) -> None:
        extra: dict[str, object] = dict(extra_context)
        if parameter_name is not None:
            extra["parameter_name"] = parameter_name
        if parameter_type is not None:
            extra["parameter_type"] = _tag_text(parameter_type)
        if message is None:
            message = (
                f"The value {value}\n"
                f"of the property {parameter_name}\n"
                f"is not of the expected type {_tag_text(parameter_type)}."
            )
        super().__init__(message=message, context=context, **extra)


class InvalidArgumentError(InvocationError):
    """Raised when a utility receives an argument of the wrong type."""

    default_error_code = EnumErrorCode.INVALID_ARGUMENT


class ProtocolConfigurationError(InvocationError):
    """Raised when client configuration validation fails.

    Used for a missing base URL, invalid timeouts, or a client used before
    its configuration was applied.
    """

    default_error_code = EnumErrorCode.INVALID_CONFIGURATION


class HostInvocationError(InvocationError):
    """Raised for any failure surfaced by the host RPC client.

    The invocation layer propagates these unmodified; it does not prefix the
    message with the operation name.

    Example:
        >>> raise HostInvocationError(
        ...     "Account With Id = 00000000-0000-0000-0000-000000000000 Does Not Exist",
        ...     context=context,
        ...     status_code=404,
        ... )
    """

    default_error_code = EnumErrorCode.HOST_INVOCATION_FAILED


class HostConnectionError(HostInvocationError):
    """Raised when the host cannot be reached."""

    default_error_code = EnumErrorCode.HOST_CONNECTION_FAILED


class HostTimeoutError(HostInvocationError):
    """Raised when the host does not answer within the configured timeout."""

    default_error_code = EnumErrorCode.HOST_TIMEOUT


__all__ = [
    "HostConnectionError",
    "HostInvocationError",
    "HostTimeoutError",
    "InvalidArgumentError",
    "InvalidValueShapeError",
    "InvocationError",
    "ProtocolConfigurationError",
    "UnsupportedTypeError",
]
