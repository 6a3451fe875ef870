# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Protocols for the host RPC execution entry point.

The invocation layer never talks to a transport directly. It hands a built
ModelOperationRequest to an object satisfying ProtocolHostRpcClient and
unwraps whatever ProtocolHostResponse comes back.

Example:
    >>> class RecordingClient:
    ...     def __init__(self) -> None:
    ...         self.requests: list[ModelOperationRequest] = []
    ...
    ...     async def execute(self, request: ModelOperationRequest) -> ModelHostResponse:
    ...         self.requests.append(request)
    ...         return ModelHostResponse(status_code=204)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from xrm_invoke.models import ModelOperationRequest


@runtime_checkable
class ProtocolHostResponse(Protocol):
    """Result of a host execution.

    Attributes:
        ok: True when the host reports success
    """

    @property
    def ok(self) -> bool: ...

    def json(self) -> object:
        """Return the structured body.

        Raises:
            ValueError: If the body is empty or cannot be parsed.
        """
        ...


@runtime_checkable
class ProtocolHostRpcClient(Protocol):
    """The platform's Action/Function execution endpoint."""

    async def execute(self, request: ModelOperationRequest) -> ProtocolHostResponse:
        """Execute a built operation request.

        Failures are raised as HostInvocationError (or a subclass); the
        invocation layer propagates them to the caller unmodified.
        """
        ...


__all__: list[str] = ["ProtocolHostResponse", "ProtocolHostRpcClient"]
