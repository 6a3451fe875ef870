# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""GUID normalization.

Record identifiers arrive in several spellings: upper case from form
controls, braced from the SDK, plain lower case from the Web API. Callers
canonicalize with normalize_guid before comparing or transmitting them.
The invocation layer never applies it implicitly; bound entity ids are
sent verbatim.
"""

from __future__ import annotations

from xrm_invoke.enums import EnumTransportType
from xrm_invoke.errors import InvalidArgumentError, ModelInvocationErrorContext


def normalize_guid(guid: object) -> str:
    """Lower-case a GUID and strip any curly braces.

    Args:
        guid: The identifier to normalize.

    Returns:
        The normalized identifier.

    Raises:
        InvalidArgumentError: If ``guid`` is not a string.

    Example:
        >>> normalize_guid("{AAAAAAAA-BBBB-CCCC-DDDD-EEEEEEEEEEEE}")
        'aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee'
    """
    if not isinstance(guid, str):
        ctx = ModelInvocationErrorContext(
            transport_type=EnumTransportType.IN_PROCESS,
            operation="normalize_guid",
        )
        raise InvalidArgumentError(
            f"normalize_guid:\n'{guid}' is not a string",
            context=ctx,
            argument_type=type(guid).__name__,
        )
    return guid.lower().replace("{", "").replace("}", "")


__all__: list[str] = ["normalize_guid"]
