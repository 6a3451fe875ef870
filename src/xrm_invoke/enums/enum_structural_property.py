# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Structural Property Enumeration.

Small integer codes the host protocol uses to tell primitive, collection
and entity-shaped parameters apart.
"""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class EnumStructuralProperty(IntEnum):
    """Structural property codes carried in the parameter type map."""

    PRIMITIVE = 1
    COLLECTION = 4
    ENTITY = 5


__all__: list[str] = ["EnumStructuralProperty"]
