# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""
Request Parameter Type Enumeration.

Defines the closed set of parameter type tags that callers declare for each
Action or Function parameter. The tag selects the wire descriptor held by
RegistryParameterType and the validation rule applied to the value.

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumParameterType(str, Enum):
    """Caller-declared parameter type tags.

    The values are the exact tag strings accepted in request parameters,
    so ``EnumParameterType("Money")`` and ``EnumParameterType.MONEY`` are
    interchangeable.

    Example:
        >>> EnumParameterType("EntityReference").is_entity_shaped
        True
        >>> EnumParameterType.MONEY.value
        'Money'
    """

    BOOLEAN = "Boolean"
    DATE_TIME = "DateTime"
    DECIMAL = "Decimal"
    ENTITY = "Entity"
    ENTITY_COLLECTION = "EntityCollection"
    ENTITY_REFERENCE = "EntityReference"
    FLOAT = "Float"
    INTEGER = "Integer"
    MONEY = "Money"
    PICKLIST = "Picklist"
    STRING = "String"

    @property
    def is_entity_shaped(self) -> bool:
        """True for tags whose wire type name carries the entity logical name."""
        return self in (EnumParameterType.ENTITY, EnumParameterType.ENTITY_REFERENCE)

    @classmethod
    def from_tag(cls, tag: object) -> EnumParameterType | None:
        """Return the member for ``tag``, or None if it is not a known tag."""
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            return None
        try:
            return cls(tag)
        except ValueError:
            return None


__all__: list[str] = ["EnumParameterType"]
