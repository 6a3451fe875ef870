# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Host Value Kind Enumeration.

Coarse runtime kinds used to check primitive parameter values. Every
numeric tag (Integer, Decimal, Float, Money, Picklist) maps to NUMBER even
though their wire type names differ.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, unique


@unique
class EnumHostValueKind(str, Enum):
    """Runtime kind expected for a parameter value.

    Attributes:
        STRING: ``str`` values
        NUMBER: ``int``, ``float`` and ``Decimal`` values (never ``bool``)
        BOOLEAN: ``bool`` values
        OBJECT: anything else, including ``None``
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"


def host_value_kind_of(value: object) -> EnumHostValueKind:
    """Classify ``value`` into its host value kind.

    ``bool`` is checked before the numeric types because it subclasses
    ``int``.

    Example:
        >>> host_value_kind_of(True)
        <EnumHostValueKind.BOOLEAN: 'boolean'>
        >>> host_value_kind_of(Decimal("1.50"))
        <EnumHostValueKind.NUMBER: 'number'>
        >>> host_value_kind_of(None)
        <EnumHostValueKind.OBJECT: 'object'>
    """
    if isinstance(value, bool):
        return EnumHostValueKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return EnumHostValueKind.NUMBER
    if isinstance(value, str):
        return EnumHostValueKind.STRING
    return EnumHostValueKind.OBJECT


__all__: list[str] = ["EnumHostValueKind", "host_value_kind_of"]
