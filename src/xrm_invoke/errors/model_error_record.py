# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Structured error record attached to every InvocationError as ``.model``."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from xrm_invoke.enums import EnumErrorCode


class ModelErrorRecord(BaseModel):
    """Immutable snapshot of an invocation error.

    Attributes:
        message: Human-readable error message
        error_code: Error classification
        correlation_id: Request correlation ID, if one was supplied
        context: Structured fields (transport_type, operation, parameter_name, ...)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    message: str
    error_code: EnumErrorCode
    correlation_id: UUID | None = None
    context: dict[str, object] = Field(default_factory=dict)


__all__: list[str] = ["ModelErrorRecord"]
