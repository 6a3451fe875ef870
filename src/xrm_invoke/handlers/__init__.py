# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Host client handlers.

Exports:
    HttpWebApiClient: Dataverse Web API client over httpx
    ModelWebApiClientConfig: Client configuration model
    WebApiValueEncoder: Action body / function alias value encoding
"""

from xrm_invoke.handlers.handler_webapi_http import HttpWebApiClient
from xrm_invoke.handlers.model_webapi_client_config import ModelWebApiClientConfig
from xrm_invoke.handlers.webapi_value_encoder import WebApiValueEncoder

__all__: list[str] = [
    "HttpWebApiClient",
    "ModelWebApiClientConfig",
    "WebApiValueEncoder",
]
