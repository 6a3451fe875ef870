# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Raw result returned by HttpWebApiClient."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field


class ModelHostResponse(BaseModel):
    """Status, headers and undecoded body of a host response.

    ``ok`` is true for 2xx status codes. ``json()`` raises ValueError for an
    empty or unparsable body, which ResponseUnwrapper turns into a fallback
    to this raw object.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> object:  # type: ignore[override]
        return json.loads(self.content.decode("utf-8"))


__all__: list[str] = ["ModelHostResponse"]
