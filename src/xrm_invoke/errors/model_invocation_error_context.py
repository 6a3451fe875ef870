# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Invocation Error Context Configuration Model.

This module defines the configuration model for invocation error context,
encapsulating common structured fields to reduce __init__ parameter count
while keeping strong typing.
"""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from xrm_invoke.enums import EnumTransportType


class ModelInvocationErrorContext(BaseModel):
    """Configuration model for invocation error context.

    Attributes:
        transport_type: Where the failure happened (HTTP, IN_PROCESS)
        operation: Operation being performed (validate, execute_action, http.post, ...)
        target_name: Target resource, usually the remote operation name or URL
        correlation_id: Request correlation ID for tracing

    Example:
        >>> context = ModelInvocationErrorContext(
        ...     transport_type=EnumTransportType.HTTP,
        ...     operation="http.post",
        ...     target_name="WinOpportunity",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise HostInvocationError("Operation failed", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumTransportType] = Field(
        default=None,
        description="Transport the failure originated from",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target remote operation or endpoint",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> "ModelInvocationErrorContext":
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInvocationErrorContext"]
