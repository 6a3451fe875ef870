# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Web API Client Configuration Model.

This module provides the Pydantic configuration model for HttpWebApiClient.

Security Note:
    The access token uses SecretStr to prevent accidental logging. Tokens
    should come from the environment (XRM_ACCESS_TOKEN) or a token provider,
    never from committed configuration files.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from xrm_invoke.utils.util_env_parsing import parse_env_float, parse_env_str

_DEFAULT_API_VERSION = "9.2"
_DEFAULT_TIMEOUT_SECONDS = 30.0
_MIN_TIMEOUT_SECONDS = 1.0
_MAX_TIMEOUT_SECONDS = 300.0


class ModelWebApiClientConfig(BaseModel):
    """Configuration for the Dataverse Web API client.

    Attributes:
        base_url: Organization URL, e.g. "https://contoso.crm.dynamics.com"
        api_version: Web API version (default "9.2")
        access_token: Bearer token (SecretStr, optional)
        timeout_seconds: Request timeout in seconds (1.0-300.0, default 30.0)
        entity_set_names: Logical name to entity set name overrides
        extra_headers: Additional headers sent with every request

    Example:
        >>> config = ModelWebApiClientConfig(
        ...     base_url="https://contoso.crm.dynamics.com",
        ...     access_token=SecretStr("eyJ0eXAi..."),
        ...     entity_set_names={"opportunity": "opportunities"},
        ... )
        >>> config.api_root
        'https://contoso.crm.dynamics.com/api/data/v9.2/'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    base_url: str = Field(
        min_length=1,
        description="Organization URL (e.g., 'https://contoso.crm.dynamics.com')",
    )
    api_version: str = Field(
        default=_DEFAULT_API_VERSION,
        min_length=1,
        description="Web API version",
    )
    access_token: SecretStr | None = Field(
        default=None,
        description="Bearer token (use SecretStr for security)",
    )
    timeout_seconds: float = Field(
        default=_DEFAULT_TIMEOUT_SECONDS,
        ge=_MIN_TIMEOUT_SECONDS,
        le=_MAX_TIMEOUT_SECONDS,
        description="Request timeout in seconds",
    )
    entity_set_names: dict[str, str] = Field(
        default_factory=dict,
        description="Entity logical name to entity set name overrides",
    )
    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Additional headers sent with every request",
    )

    @property
    def api_root(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/data/v{self.api_version}/"

    @classmethod
    def from_env(cls, **overrides: object) -> ModelWebApiClientConfig:
        """Build a configuration from XRM_* environment variables.

        Reads XRM_BASE_URL, XRM_ACCESS_TOKEN, XRM_API_VERSION and
        XRM_TIMEOUT_SECONDS. Keyword overrides take precedence.

        Raises:
            pydantic.ValidationError: If XRM_BASE_URL is missing and no
                ``base_url`` override is given.
        """
        values: dict[str, object] = {
            "base_url": parse_env_str("XRM_BASE_URL"),
            "api_version": parse_env_str("XRM_API_VERSION", _DEFAULT_API_VERSION),
            "timeout_seconds": parse_env_float(
                "XRM_TIMEOUT_SECONDS",
                _DEFAULT_TIMEOUT_SECONDS,
                min_value=_MIN_TIMEOUT_SECONDS,
                max_value=_MAX_TIMEOUT_SECONDS,
            ),
        }
        token = parse_env_str("XRM_ACCESS_TOKEN")
        if token:
            values["access_token"] = SecretStr(token)
        values.update(overrides)
        return cls.model_validate(values)


__all__: list[str] = ["ModelWebApiClientConfig"]
