# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Operation request models.

An operation request is an explicit two-field struct: the call metadata and
the flattened parameter values. Host clients adapt it to whatever literal
shape they need at the call boundary; ``to_wire`` gives the metadata in the
platform's own key spelling.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from xrm_invoke.enums import (
    EnumOperationType,
    EnumParameterType,
    EnumStructuralProperty,
)


class ModelParameterTypeEntry(BaseModel):
    """Per-parameter entry of the metadata type map.

    ``parameter_type`` keeps the declared tag for host clients that encode
    Entity and EntityReference values differently. It is not part of the
    wire metadata.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wire_type_name: str
    structural_property: EnumStructuralProperty
    parameter_type: EnumParameterType | None = None

    def to_wire(self) -> dict[str, object]:
        return {
            "typeName": self.wire_type_name,
            "structuralProperty": int(self.structural_property),
        }


class ModelOperationMetadata(BaseModel):
    """Call metadata for one Action or Function invocation.

    Attributes:
        bound_parameter: ``"entity"`` for bound operations, otherwise None
        operation_type: ACTION (0) or FUNCTION (1)
        operation_name: Unique name of the remote operation
        parameter_types: Parameter name to wire type entry, in parameter order
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bound_parameter: str | None = None
    operation_type: EnumOperationType
    operation_name: str
    parameter_types: dict[str, ModelParameterTypeEntry] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, object]:
        """Return the metadata in the host's key spelling.

        Example:
            >>> metadata.to_wire()
            {'boundParameter': None, 'operationType': 0, 'operationName': 'Foo',
             'parameterTypes': {'x': {'typeName': 'Edm.String', 'structuralProperty': 1}}}
        """
        return {
            "boundParameter": self.bound_parameter,
            "operationType": int(self.operation_type),
            "operationName": self.operation_name,
            "parameterTypes": {
                name: entry.to_wire() for name, entry in self.parameter_types.items()
            },
        }


class ModelOperationRequest(BaseModel):
    """Built request handed to a host RPC client. Ephemeral, one per call."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    metadata: ModelOperationMetadata
    values: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_bound(self) -> bool:
        return self.metadata.bound_parameter is not None

    @property
    def bound_entity(self) -> Any:
        """Value of the bound parameter, or None for unbound operations."""
        if self.metadata.bound_parameter is None:
            return None
        return self.values.get(self.metadata.bound_parameter)


__all__: list[str] = [
    "ModelOperationMetadata",
    "ModelOperationRequest",
    "ModelParameterTypeEntry",
]
