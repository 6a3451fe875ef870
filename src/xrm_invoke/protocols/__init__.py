# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Protocol definitions for host collaborators."""

from xrm_invoke.protocols.protocol_host_rpc_client import (
    ProtocolHostResponse,
    ProtocolHostRpcClient,
)

__all__: list[str] = ["ProtocolHostResponse", "ProtocolHostRpcClient"]
