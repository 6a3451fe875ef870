# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Tests for unwrap_response."""

from xrm_invoke.models import ModelHostResponse
from xrm_invoke.runtime import unwrap_response


class _BrokenBody:
    ok = True

    def json(self) -> object:
        raise TypeError("body already consumed")


class TestUnwrapResponse:
    """Body extraction with soft fallback."""

    def test_returns_parsed_body(self) -> None:
        response = ModelHostResponse(status_code=200, content=b'{"Value": "https://x"}')
        assert unwrap_response(response) == {"Value": "https://x"}

    def test_empty_body_returns_raw_response(self) -> None:
        response = ModelHostResponse(status_code=204)
        assert unwrap_response(response) is response

    def test_non_json_body_returns_raw_response(self) -> None:
        response = ModelHostResponse(status_code=200, content=b"<html/>")
        assert unwrap_response(response) is response

    def test_type_error_returns_raw_response(self) -> None:
        response = _BrokenBody()
        assert unwrap_response(response) is response

    def test_not_ok_returns_none(self) -> None:
        response = ModelHostResponse(status_code=500, content=b'{"error": {}}')
        assert unwrap_response(response) is None
