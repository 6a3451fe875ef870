# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Transport Type Enumeration.

Identifies where an invocation error originated. Used in error context.
"""

from enum import Enum


class EnumTransportType(str, Enum):
    """Transport types for invocation error context.

    Attributes:
        HTTP: Dataverse Web API over HTTP (HttpWebApiClient)
        IN_PROCESS: Validation and request building, before any transport
    """

    HTTP = "http"
    IN_PROCESS = "in_process"


__all__ = ["EnumTransportType"]
