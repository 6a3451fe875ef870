# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Entity reference value: the record an operation is bound to or receives."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelEntityReference(BaseModel):
    """Reference to one record by id and entity logical name.

    Plain mappings with ``id`` and ``entityType`` keys are accepted anywhere
    this model is, so callers are free to pass either.

    Example:
        >>> ref = ModelEntityReference(id="{AAAA-...}", entityType="account")
        >>> ref.entity_type
        'account'
        >>> ref.to_wire()
        {'id': '{AAAA-...}', 'entityType': 'account'}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Record identifier, passed through verbatim")
    entity_type: str = Field(
        alias="entityType",
        description="Entity logical name, e.g. 'account'",
    )
    name: str | None = Field(default=None, description="Optional display label")

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


__all__: list[str] = ["ModelEntityReference"]
