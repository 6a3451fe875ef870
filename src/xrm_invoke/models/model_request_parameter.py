# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Request parameter model: one {name, type, value} triple."""

from __future__ import annotations

from typing import Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from xrm_invoke.enums import EnumParameterType


class ModelRequestParameter(BaseModel):
    """One caller-supplied operation parameter.

    ``type`` is kept as given, either an EnumParameterType member or the raw
    tag string, so an unknown tag reaches the type registry and is reported
    as UnsupportedTypeError rather than failing model validation. ``value``
    is stored as-is; its shape is checked by ValidatorRequestParameter.

    Both the lowercase keys and the capitalised ``Name``/``Type``/``Value``
    spelling are accepted when validating a mapping.

    Example:
        >>> ModelRequestParameter.model_validate(
        ...     {"Name": "DefinitionSchemaName", "Type": "String", "Value": "new_url"}
        ... ).name
        'DefinitionSchemaName'
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    name: str = Field(validation_alias=AliasChoices("name", "Name"))
    type: Union[EnumParameterType, str] = Field(
        validation_alias=AliasChoices("type", "Type"),
    )
    value: Any = Field(default=None, validation_alias=AliasChoices("value", "Value"))

    @property
    def tag(self) -> str:
        """The declared tag as a plain string."""
        if isinstance(self.type, EnumParameterType):
            return self.type.value
        return str(self.type)


__all__: list[str] = ["ModelRequestParameter"]
