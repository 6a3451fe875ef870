# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Operation Type Enumeration.

Actions may have side effects; Functions are read-only. The integer value is
the discriminator the host expects in call metadata.
"""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class EnumOperationType(IntEnum):
    """Kind of server-defined remote operation.

    Attributes:
        ACTION: Operation that may change server state (wire value 0)
        FUNCTION: Read-only operation (wire value 1)
    """

    ACTION = 0
    FUNCTION = 1


__all__: list[str] = ["EnumOperationType"]
