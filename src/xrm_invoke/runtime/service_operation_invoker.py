# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Operation Invoker Service - typed entry point for Actions and Functions.

This module provides ServiceOperationInvoker, which validates parameters,
builds the request, hands it to a host RPC client and unwraps the response.

Flow:
    caller -> BuilderOperationRequest (ValidatorRequestParameter,
    RegistryParameterType) -> ProtocolHostRpcClient.execute -> unwrap_response
    -> caller

Error Handling:
    - Validation errors are raised before the host client is called
    - Errors raised by the host client propagate unmodified; the message is
      not prefixed with the operation name
    - An unparsable body on a successful response is not an error; the raw
      response is returned

Concurrency:
    Each call builds its own type map and values, and the type registry is
    read-only, so any number of calls may be awaited concurrently. Once the
    host call starts it cannot be cancelled from this layer except by
    cancelling the awaiting task.

Example:
    ```python
    async with HttpWebApiClient(ModelWebApiClientConfig.from_env()) as client:
        invoker = ServiceOperationInvoker(client)
        result = await invoker.execute_action(
            "new_Escalate",
            [{"name": "Reason", "type": "String", "value": "SLA breach"}],
            bound_entity={"id": case_id, "entityType": "incident"},
        )
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from xrm_invoke.enums import EnumOperationType, EnumParameterType
from xrm_invoke.models import ModelRequestParameter
from xrm_invoke.protocols import ProtocolHostRpcClient
from xrm_invoke.runtime.builder_operation_request import BuilderOperationRequest
from xrm_invoke.runtime.registry_parameter_type import RegistryParameterType
from xrm_invoke.runtime.response_unwrapper import unwrap_response
from xrm_invoke.runtime.validator_request_parameter import (
    RequestParameterInput,
    ValidatorRequestParameter,
)

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLE_FUNCTION = "RetrieveEnvironmentVariableValue"


class ServiceOperationInvoker:
    """Executes server-defined Actions and Functions through a host client."""

    def __init__(
        self,
        client: ProtocolHostRpcClient,
        registry: RegistryParameterType | None = None,
    ) -> None:
        self._client = client
        self._builder = BuilderOperationRequest(ValidatorRequestParameter(registry))

    async def execute_action(
        self,
        action_name: str,
        parameters: Sequence[RequestParameterInput] = (),
        bound_entity: object = None,
    ) -> object:
        """Execute an Action.

        Args:
            action_name: Unique name of the action
            parameters: Parameters as models or ``{name, type, value}`` mappings
            bound_entity: Optional entity reference the action is bound to

        Returns:
            The parsed response body, the raw response when the body cannot
            be parsed, or None for a response that is not ok.
        """
        return await self._invoke(
            action_name, EnumOperationType.ACTION, parameters, bound_entity
        )

    async def execute_function(
        self,
        function_name: str,
        parameters: Sequence[RequestParameterInput] = (),
        bound_entity: object = None,
    ) -> object:
        """Execute a Function. Same contract as execute_action."""
        return await self._invoke(
            function_name, EnumOperationType.FUNCTION, parameters, bound_entity
        )

    async def get_environment_variable_value(self, schema_name: str) -> object:
        """Retrieve an environment variable value by its schema name.

        Returns the function's response body, normally
        ``{"Value": "<value>", ...}``.
        """
        return await self.execute_function(
            ENVIRONMENT_VARIABLE_FUNCTION,
            [
                ModelRequestParameter(
                    name="DefinitionSchemaName",
                    type=EnumParameterType.STRING,
                    value=schema_name,
                )
            ],
        )

    async def _invoke(
        self,
        operation_name: str,
        operation_type: EnumOperationType,
        parameters: Sequence[RequestParameterInput],
        bound_entity: object,
    ) -> object:
        request = self._builder.build(
            operation_name, operation_type, parameters, bound_entity
        )
        response = await self._client.execute(request)
        logger.debug(
            "Operation executed",
            extra={
                "operation_name": operation_name,
                "operation_type": operation_type.name,
                "ok": response.ok,
            },
        )
        return unwrap_response(response)


async def execute_action(
    action_name: str,
    parameters: Sequence[RequestParameterInput] = (),
    bound_entity: object = None,
    *,
    client: ProtocolHostRpcClient,
) -> object:
    """Execute an Action through ``client``. See ServiceOperationInvoker."""
    return await ServiceOperationInvoker(client).execute_action(
        action_name, parameters, bound_entity
    )


async def execute_function(
    function_name: str,
    parameters: Sequence[RequestParameterInput] = (),
    bound_entity: object = None,
    *,
    client: ProtocolHostRpcClient,
) -> object:
    """Execute a Function through ``client``. See ServiceOperationInvoker."""
    return await ServiceOperationInvoker(client).execute_function(
        function_name, parameters, bound_entity
    )


async def get_environment_variable_value(
    schema_name: str, *, client: ProtocolHostRpcClient
) -> object:
    """Retrieve an environment variable value through ``client``."""
    return await ServiceOperationInvoker(client).get_environment_variable_value(
        schema_name
    )


__all__: list[str] = [
    "ENVIRONMENT_VARIABLE_FUNCTION",
    "ServiceOperationInvoker",
    "execute_action",
    "execute_function",
    "get_environment_variable_value",
]
