# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Enumerations for the typed invocation layer.

Exports:
    EnumParameterType: Closed set of caller-declared parameter tags
    EnumOperationType: Action / Function discriminator
    EnumStructuralProperty: Primitive / collection / entity codes
    EnumHostValueKind: Runtime value kinds used by primitive validation
    EnumTransportType: Error context transport identification
    EnumErrorCode: Error classification codes
"""

from xrm_invoke.enums.enum_error_code import EnumErrorCode
from xrm_invoke.enums.enum_host_value_kind import (
    EnumHostValueKind,
    host_value_kind_of,
)
from xrm_invoke.enums.enum_operation_type import EnumOperationType
from xrm_invoke.enums.enum_parameter_type import EnumParameterType
from xrm_invoke.enums.enum_structural_property import EnumStructuralProperty
from xrm_invoke.enums.enum_transport_type import EnumTransportType

__all__: list[str] = [
    "EnumErrorCode",
    "EnumHostValueKind",
    "EnumOperationType",
    "EnumParameterType",
    "EnumStructuralProperty",
    "EnumTransportType",
    "host_value_kind_of",
]
