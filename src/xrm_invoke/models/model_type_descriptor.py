# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Wire descriptor for one parameter type tag."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from xrm_invoke.enums import EnumHostValueKind, EnumStructuralProperty


class ModelTypeDescriptor(BaseModel):
    """Wire type name, structural property code and expected host value kind.

    Descriptors are immutable. Entity-shaped parameters receive a per-call
    copy (see RegistryParameterType.resolve) instead of a rewritten shared
    entry.

    Example:
        >>> descriptor = ModelTypeDescriptor(
        ...     wire_type_name="Edm.String",
        ...     structural_property=EnumStructuralProperty.PRIMITIVE,
        ...     host_value_kind=EnumHostValueKind.STRING,
        ... )
        >>> descriptor.with_wire_type_name("Edm.Int32").wire_type_name
        'Edm.Int32'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wire_type_name: str = Field(
        description="Platform type identifier, e.g. 'Edm.String' or 'mscrm.account'",
    )
    structural_property: EnumStructuralProperty = Field(
        description="Primitive (1), collection (4) or entity-shaped (5)",
    )
    host_value_kind: EnumHostValueKind = Field(
        description="Runtime kind a primitive value must have",
    )

    def with_wire_type_name(self, wire_type_name: str) -> ModelTypeDescriptor:
        """Return a copy carrying a different wire type name."""
        return self.model_copy(update={"wire_type_name": wire_type_name})


__all__: list[str] = ["ModelTypeDescriptor"]
