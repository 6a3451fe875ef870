# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Typed invocation layer for server-defined Actions and Functions.

This package validates caller-declared parameters against a closed type
taxonomy, builds the metadata and value payload a Dataverse-style Web API
expects, executes the request through a host RPC client and unwraps the
response.

Key Components:
    - RegistryParameterType: Closed tag to wire descriptor table
    - ValidatorRequestParameter: Per-tag value shape rules
    - BuilderOperationRequest: Metadata and payload construction
    - ServiceOperationInvoker: Action / Function execution entry point
    - HttpWebApiClient: httpx-based host client

Public API:
    execute_action, execute_function, get_environment_variable_value,
    check_request_parameter_type, normalize_guid
"""

from xrm_invoke.enums import EnumOperationType, EnumParameterType
from xrm_invoke.errors import (
    HostInvocationError,
    InvalidArgumentError,
    InvalidValueShapeError,
    InvocationError,
    UnsupportedTypeError,
)
from xrm_invoke.handlers import HttpWebApiClient, ModelWebApiClientConfig
from xrm_invoke.models import (
    ModelEntityReference,
    ModelOperationRequest,
    ModelRequestParameter,
)
from xrm_invoke.runtime import (
    ServiceOperationInvoker,
    check_request_parameter_type,
    execute_action,
    execute_function,
    get_environment_variable_value,
)
from xrm_invoke.utils import normalize_guid

__all__: list[str] = [
    "EnumOperationType",
    "EnumParameterType",
    "HostInvocationError",
    "HttpWebApiClient",
    "InvalidArgumentError",
    "InvalidValueShapeError",
    "InvocationError",
    "ModelEntityReference",
    "ModelOperationRequest",
    "ModelRequestParameter",
    "ModelWebApiClientConfig",
    "ServiceOperationInvoker",
    "UnsupportedTypeError",
    "check_request_parameter_type",
    "execute_action",
    "execute_function",
    "get_environment_variable_value",
    "normalize_guid",
]
