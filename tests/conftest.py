"""Pytest configuration and shared fixtures for xrm_invoke tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from xrm_invoke.models import ModelHostResponse
from xrm_invoke.runtime.registry_parameter_type import RegistryParameterType

ACCOUNT_ID = "AAAAAAAA-BBBB-CCCC-DDDD-EEEEEEEEEEEE"


@pytest.fixture
def registry() -> RegistryParameterType:
    """Fresh registry with the default table."""
    return RegistryParameterType()


@pytest.fixture
def account_reference() -> dict[str, object]:
    return {"id": ACCOUNT_ID, "entityType": "account"}


@pytest.fixture
def mock_host_client() -> AsyncMock:
    """Host RPC client whose execute() returns a 200 JSON response."""
    client = AsyncMock()
    client.execute.return_value = ModelHostResponse(
        status_code=200,
        headers={"content-type": "application/json"},
        content=b'{"result": "ok"}',
    )
    return client
