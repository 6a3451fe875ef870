# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Response unwrapping with a soft fallback to the raw result."""

from __future__ import annotations

import logging

from xrm_invoke.protocols import ProtocolHostResponse

logger = logging.getLogger(__name__)


def unwrap_response(response: ProtocolHostResponse) -> object:
    """Extract the structured body of a host response.

    Returns None when the response is not ok. When the body cannot be
    parsed (empty 204 bodies from Actions without a return value, non-JSON
    content) the raw response is returned instead of raising.
    """
    if not response.ok:
        return None
    try:
        return response.json()
    except (ValueError, TypeError) as e:
        logger.debug(
            "Response body not parsable, returning raw response",
            extra={"error_type": type(e).__name__},
        )
        return response


__all__: list[str] = ["unwrap_response"]
