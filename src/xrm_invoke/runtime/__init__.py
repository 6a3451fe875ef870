# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Runtime components: type registry, validator, request builder,
response unwrapper and the operation invoker service."""

from xrm_invoke.runtime.builder_operation_request import (
    BOUND_PARAMETER_NAME,
    BuilderOperationRequest,
)
from xrm_invoke.runtime.registry_parameter_type import (
    ENTITY_WIRE_PREFIX,
    RegistryParameterType,
    default_registry,
)
from xrm_invoke.runtime.response_unwrapper import unwrap_response
from xrm_invoke.runtime.service_operation_invoker import (
    ServiceOperationInvoker,
    execute_action,
    execute_function,
    get_environment_variable_value,
)
from xrm_invoke.runtime.validator_request_parameter import (
    ValidatorRequestParameter,
    check_request_parameter_type,
    read_entity_fields,
)

__all__: list[str] = [
    "BOUND_PARAMETER_NAME",
    "BuilderOperationRequest",
    "ENTITY_WIRE_PREFIX",
    "RegistryParameterType",
    "ServiceOperationInvoker",
    "ValidatorRequestParameter",
    "check_request_parameter_type",
    "default_registry",
    "execute_action",
    "execute_function",
    "get_environment_variable_value",
    "read_entity_fields",
    "unwrap_response",
]
