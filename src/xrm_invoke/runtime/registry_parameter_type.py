# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Parameter Type Registry - closed table of wire descriptors.

This module provides RegistryParameterType, the lookup table that maps each
caller-declared parameter tag to its wire descriptor (wire type name,
structural property code, expected host value kind).

Design Principles:
- Closed: the table is fixed; there is no registration API and no schema
  discovery
- Read-only: the shared table is never rewritten. Entity-shaped parameters
  get a per-parameter descriptor copy whose wire type name carries the
  concrete entity logical name, so concurrent calls cannot observe each
  other's entity types
- Thread-safe by construction: lookups read an immutable mapping

Example Usage:
    ```python
    from xrm_invoke.runtime.registry_parameter_type import default_registry

    registry = default_registry()
    registry.lookup("Money").wire_type_name          # "Edm.Decimal"
    registry.resolve("EntityReference", entity_type="account").wire_type_name
    # "mscrm.account"; registry.lookup("EntityReference") still reads
    # "mscrm.crmbaseentity"
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from xrm_invoke.enums import (
    EnumHostValueKind,
    EnumParameterType,
    EnumStructuralProperty,
)
from xrm_invoke.errors import UnsupportedTypeError
from xrm_invoke.models import ModelTypeDescriptor

# Namespace prefix for entity-shaped wire type names ("mscrm.account").
ENTITY_WIRE_PREFIX = "mscrm"

_PRIMITIVE = EnumStructuralProperty.PRIMITIVE
_NUMBER = EnumHostValueKind.NUMBER


def _descriptor(
    wire_type_name: str,
    structural_property: EnumStructuralProperty,
    host_value_kind: EnumHostValueKind,
) -> ModelTypeDescriptor:
    return ModelTypeDescriptor(
        wire_type_name=wire_type_name,
        structural_property=structural_property,
        host_value_kind=host_value_kind,
    )


_DEFAULT_TABLE: dict[EnumParameterType, ModelTypeDescriptor] = {
    EnumParameterType.STRING: _descriptor(
        "Edm.String", _PRIMITIVE, EnumHostValueKind.STRING
    ),
    EnumParameterType.INTEGER: _descriptor("Edm.Int32", _PRIMITIVE, _NUMBER),
    EnumParameterType.BOOLEAN: _descriptor(
        "Edm.Boolean", _PRIMITIVE, EnumHostValueKind.BOOLEAN
    ),
    EnumParameterType.DATE_TIME: _descriptor(
        "Edm.DateTimeOffset", _PRIMITIVE, EnumHostValueKind.OBJECT
    ),
    EnumParameterType.ENTITY_REFERENCE: _descriptor(
        f"{ENTITY_WIRE_PREFIX}.crmbaseentity",
        EnumStructuralProperty.ENTITY,
        EnumHostValueKind.OBJECT,
    ),
    EnumParameterType.DECIMAL: _descriptor("Edm.Decimal", _PRIMITIVE, _NUMBER),
    EnumParameterType.ENTITY: _descriptor(
        f"{ENTITY_WIRE_PREFIX}.crmbaseentity",
        EnumStructuralProperty.ENTITY,
        EnumHostValueKind.OBJECT,
    ),
    EnumParameterType.ENTITY_COLLECTION: _descriptor(
        f"Collection({ENTITY_WIRE_PREFIX}.crmbaseentity)",
        EnumStructuralProperty.COLLECTION,
        EnumHostValueKind.OBJECT,
    ),
    EnumParameterType.FLOAT: _descriptor("Edm.Double", _PRIMITIVE, _NUMBER),
    EnumParameterType.MONEY: _descriptor("Edm.Decimal", _PRIMITIVE, _NUMBER),
    EnumParameterType.PICKLIST: _descriptor("Edm.Int32", _PRIMITIVE, _NUMBER),
}


class RegistryParameterType:
    """Closed lookup table, parameter tag to ModelTypeDescriptor.

    The table defaults to the platform's fixed taxonomy. A custom table may
    be passed for tests; it is copied into an immutable mapping.
    """

    def __init__(
        self,
        table: Mapping[EnumParameterType, ModelTypeDescriptor] | None = None,
    ) -> None:
        self._table: Mapping[EnumParameterType, ModelTypeDescriptor] = (
            MappingProxyType(dict(table if table is not None else _DEFAULT_TABLE))
        )

    def __contains__(self, tag: object) -> bool:
        member = EnumParameterType.from_tag(tag)
        return member is not None and member in self._table

    def __iter__(self) -> Iterator[EnumParameterType]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def lookup(
        self, tag: object, parameter_name: str | None = None
    ) -> ModelTypeDescriptor:
        """Return the shared descriptor for ``tag``.

        Args:
            tag: EnumParameterType member or raw tag string
            parameter_name: Owning parameter, used in the error message

        Raises:
            UnsupportedTypeError: If the tag is not in the table.
        """
        member = EnumParameterType.from_tag(tag)
        if member is None or member not in self._table:
            raise UnsupportedTypeError(
                parameter_type=tag,
                parameter_name=parameter_name,
            )
        return self._table[member]

    def resolve(
        self,
        tag: object,
        parameter_name: str | None = None,
        entity_type: str | None = None,
    ) -> ModelTypeDescriptor:
        """Return the descriptor for one concrete parameter.

        For Entity and EntityReference tags with a known ``entity_type`` the
        result is a copy whose wire type name is ``mscrm.<entity_type>``.
        Every other tag returns the shared descriptor.
        """
        descriptor = self.lookup(tag, parameter_name)
        member = EnumParameterType.from_tag(tag)
        if member is not None and member.is_entity_shaped and entity_type:
            return descriptor.with_wire_type_name(
                f"{ENTITY_WIRE_PREFIX}.{entity_type}"
            )
        return descriptor


_default_registry = RegistryParameterType()


def default_registry() -> RegistryParameterType:
    """Return the process-wide read-only registry."""
    return _default_registry


__all__: list[str] = [
    "ENTITY_WIRE_PREFIX",
    "RegistryParameterType",
    "default_registry",
]
