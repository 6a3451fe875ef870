# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Pydantic models for the typed invocation layer."""

from xrm_invoke.models.model_entity_reference import ModelEntityReference
from xrm_invoke.models.model_host_response import ModelHostResponse
from xrm_invoke.models.model_operation_request import (
    ModelOperationMetadata,
    ModelOperationRequest,
    ModelParameterTypeEntry,
)
from xrm_invoke.models.model_request_parameter import ModelRequestParameter
from xrm_invoke.models.model_type_descriptor import ModelTypeDescriptor

__all__: list[str] = [
    "ModelEntityReference",
    "ModelHostResponse",
    "ModelOperationMetadata",
    "ModelOperationRequest",
    "ModelParameterTypeEntry",
    "ModelRequestParameter",
    "ModelTypeDescriptor",
]
