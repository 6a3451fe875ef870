# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Dataverse Web API client - host RPC client using httpx async client.

Executes built operation requests against ``<org>/api/data/v<version>/``:

    unbound action:    POST <operation>                      (JSON body)
    bound action:      POST <set>(<id>)/Microsoft.Dynamics.CRM.<operation>
    unbound function:  GET  <operation>(p=@p,...)?@p=<literal>
    bound function:    GET  <set>(<id>)/Microsoft.Dynamics.CRM.<operation>(...)

Retry logic, caching and offline operation are not provided.
"""

from __future__ import annotations

import json
import logging
from typing import Optional
from uuid import UUID, uuid4

import httpx

from xrm_invoke.enums import EnumOperationType, EnumTransportType
from xrm_invoke.errors import (
    HostConnectionError,
    HostInvocationError,
    HostTimeoutError,
    ModelInvocationErrorContext,
    ProtocolConfigurationError,
)
from xrm_invoke.handlers.model_webapi_client_config import ModelWebApiClientConfig
from xrm_invoke.handlers.webapi_value_encoder import CRM_NAMESPACE, WebApiValueEncoder
from xrm_invoke.models import ModelHostResponse, ModelOperationRequest
from xrm_invoke.utils.util_error_sanitization import (
    sanitize_error_message,
    sanitize_error_string,
)

logger = logging.getLogger(__name__)

_ODATA_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "OData-MaxVersion": "4.0",
    "OData-Version": "4.0",
}


class HttpWebApiClient:
    """Host RPC client for the Dataverse Web API (ProtocolHostRpcClient).

    Example:
        >>> async with HttpWebApiClient(ModelWebApiClientConfig.from_env()) as client:
        ...     response = await client.execute(request)
    """

    def __init__(
        self,
        config: ModelWebApiClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create the client in uninitialized state.

        Args:
            config: Connection configuration
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._config = config
        self._transport = transport
        self._encoder = WebApiValueEncoder(config.entity_set_names)
        self._client: Optional[httpx.AsyncClient] = None
        self._initialized: bool = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized and self._client is not None

    async def initialize(self) -> None:
        """Create the underlying httpx client.

        Raises:
            ProtocolConfigurationError: If client initialization fails.
        """
        headers = dict(_ODATA_HEADERS)
        headers.update(self._config.extra_headers)
        if self._config.access_token is not None:
            headers["Authorization"] = (
                f"Bearer {self._config.access_token.get_secret_value()}"
            )

        try:
            self._client = httpx.AsyncClient(
                base_url=self._config.api_root,
                headers=headers,
                timeout=httpx.Timeout(self._config.timeout_seconds),
                transport=self._transport,
            )
        except Exception as e:
            ctx = ModelInvocationErrorContext(
                transport_type=EnumTransportType.HTTP,
                operation="initialize",
                target_name="http_webapi_client",
                correlation_id=uuid4(),
            )
            raise ProtocolConfigurationError(
                "Failed to initialize Web API client", context=ctx
            ) from e

        self._initialized = True
        logger.info(
            "HttpWebApiClient initialized",
            extra={
                "api_root": self._config.api_root,
                "timeout_seconds": self._config.timeout_seconds,
            },
        )

    async def shutdown(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._initialized = False
        logger.info("HttpWebApiClient shutdown complete")

    async def __aenter__(self) -> HttpWebApiClient:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    async def execute(self, request: ModelOperationRequest) -> ModelHostResponse:
        """Execute a built Action or Function request.

        Raises:
            HostInvocationError: Client not initialized, or non-2xx response.
            HostTimeoutError: The request timed out.
            HostConnectionError: The host could not be reached.
        """
        correlation_id = uuid4()
        metadata = request.metadata

        if not self.is_initialized or self._client is None:
            ctx = ModelInvocationErrorContext(
                transport_type=EnumTransportType.HTTP,
                operation="execute",
                target_name=metadata.operation_name,
                correlation_id=correlation_id,
            )
            raise HostInvocationError(
                "HttpWebApiClient not initialized. Call initialize() first.",
                context=ctx,
            )

        if metadata.operation_type is EnumOperationType.ACTION:
            method = "POST"
            url = self._operation_path(request)
            content = self._encoder.dump_body(self._action_body(request))
            headers = {"Content-Type": "application/json; charset=utf-8"}
            params = None
        else:
            method = "GET"
            path, params = self._function_path_and_params(request)
            url = path
            content = None
            headers = None

        ctx = ModelInvocationErrorContext(
            transport_type=EnumTransportType.HTTP,
            operation=f"http.{method.lower()}",
            target_name=metadata.operation_name,
            correlation_id=correlation_id,
        )

        try:
            response = await self._client.request(
                method,
                url,
                content=content,
                params=params,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise HostTimeoutError(
                f"{method} {metadata.operation_name} timed out after "
                f"{self._config.timeout_seconds}s",
                context=ctx,
                timeout_seconds=self._config.timeout_seconds,
            ) from e
        except httpx.ConnectError as e:
            raise HostConnectionError(
                f"Failed to connect to {self._config.base_url}", context=ctx
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Web API transport error",
                extra={
                    "error": sanitize_error_message(e),
                    "target_name": metadata.operation_name,
                    "correlation_id": str(correlation_id),
                },
            )
            raise HostConnectionError(
                f"HTTP error during {method} request: {type(e).__name__}",
                context=ctx,
            ) from e

        return self._build_response(response, ctx, correlation_id)

    def _operation_path(self, request: ModelOperationRequest) -> str:
        name = request.metadata.operation_name
        if request.is_bound:
            record = self._encoder.record_path(request.bound_entity)
            return f"{record}/{CRM_NAMESPACE}.{name}"
        return name

    def _unbound_values(self, request: ModelOperationRequest):
        bound_name = request.metadata.bound_parameter
        for name, value in request.values.items():
            if name == bound_name:
                continue
            yield name, request.metadata.parameter_types[name], value

    def _action_body(self, request: ModelOperationRequest) -> dict[str, object]:
        return {
            name: self._encoder.encode_body_value(name, entry, value)
            for name, entry, value in self._unbound_values(request)
        }

    def _function_path_and_params(
        self, request: ModelOperationRequest
    ) -> tuple[str, dict[str, str]]:
        aliases: list[str] = []
        params: dict[str, str] = {}
        for name, entry, value in self._unbound_values(request):
            aliases.append(f"{name}=@{name}")
            params[f"@{name}"] = self._encoder.encode_function_literal(
                name, entry, value
            )
        path = f"{self._operation_path(request)}({','.join(aliases)})"
        return path, params

    def _build_response(
        self,
        response: httpx.Response,
        ctx: ModelInvocationErrorContext,
        correlation_id: UUID,
    ) -> ModelHostResponse:
        logger.debug(
            "Response received",
            extra={
                "status_code": response.status_code,
                "body_size": len(response.content),
                "content_type": response.headers.get("content-type", ""),
                "correlation_id": str(correlation_id),
            },
        )

        if response.is_success:
            return ModelHostResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                content=response.content,
            )

        message = sanitize_error_string(self._error_message(response))
        logger.warning(
            "Web API operation failed",
            extra={
                "status_code": response.status_code,
                "target_name": ctx.target_name,
                "correlation_id": str(correlation_id),
            },
        )
        raise HostInvocationError(
            message,
            context=ctx,
            status_code=response.status_code,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Return the server's ``error.message``, or the reason phrase."""
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                return error["message"]
        return f"HTTP {response.status_code} {response.reason_phrase}".strip()

    def describe(self) -> dict[str, object]:
        """Return client metadata and capabilities."""
        return {
            "client_type": EnumTransportType.HTTP.value,
            "api_root": self._config.api_root,
            "supported_operations": [t.name.lower() for t in EnumOperationType],
            "timeout_seconds": self._config.timeout_seconds,
            "initialized": self._initialized,
        }


__all__: list[str] = ["HttpWebApiClient"]
