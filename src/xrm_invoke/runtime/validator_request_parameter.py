# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Request parameter validation.

Confirms that a parameter's value has the runtime shape its declared tag
requires, and returns the wire descriptor to record for it.

Rules by tag:
    EntityReference / Entity:
        Non-null value exposing both ``id`` and ``entityType`` (a mapping
        with those keys, or an object with ``id`` and ``entity_type``
        attributes such as ModelEntityReference). ``entityType`` must be a
        non-empty string. The returned descriptor carries
        ``mscrm.<entityType>``.
    EntityCollection:
        A list or tuple in which EVERY element exposes ``id`` and
        ``entityType``. One malformed element rejects the whole collection;
        an empty collection is accepted.
    DateTime:
        A ``datetime.datetime`` instance. ISO strings are rejected.
    String / Integer / Boolean / Decimal / Float / Money / Picklist:
        The value's host kind (see host_value_kind_of) equals the
        descriptor's host_value_kind.

Only two failures exist: UnsupportedTypeError for an unknown tag and
InvalidValueShapeError for everything else.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from pydantic import ValidationError

from xrm_invoke.enums import EnumParameterType, EnumTransportType, host_value_kind_of
from xrm_invoke.errors import (
    InvalidArgumentError,
    InvalidValueShapeError,
    ModelInvocationErrorContext,
)
from xrm_invoke.models import ModelRequestParameter, ModelTypeDescriptor
from xrm_invoke.runtime.registry_parameter_type import (
    RegistryParameterType,
    default_registry,
)

RequestParameterInput = ModelRequestParameter | Mapping[str, object]


def read_entity_fields(value: object) -> tuple[object, str] | None:
    """Return ``(id, entityType)`` if ``value`` exposes both, else None.

    For the id presence is what counts, not truthiness, so an empty id still
    passes. The entity type must be a non-empty string since it becomes part
    of the ``mscrm.<entityType>`` wire type name.
    """
    fields = _entity_fields(value)
    if fields is None:
        return None
    record_id, entity_type = fields
    if not isinstance(entity_type, str) or not entity_type:
        return None
    return record_id, entity_type


def _entity_fields(value: object) -> tuple[object, object] | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        if "id" in value and "entityType" in value:
            return value["id"], value["entityType"]
        return None
    if isinstance(value, (str, bytes)):
        return None
    if hasattr(value, "id"):
        if hasattr(value, "entity_type"):
            return value.id, value.entity_type  # type: ignore[attr-defined]
        if hasattr(value, "entityType"):
            return value.id, value.entityType  # type: ignore[attr-defined]
    return None


def coerce_parameter(parameter: RequestParameterInput) -> ModelRequestParameter:
    """Accept a ModelRequestParameter or a ``{name, type, value}`` mapping."""
    if isinstance(parameter, ModelRequestParameter):
        return parameter
    try:
        return ModelRequestParameter.model_validate(parameter)
    except ValidationError as e:
        ctx = ModelInvocationErrorContext(
            transport_type=EnumTransportType.IN_PROCESS,
            operation="coerce_parameter",
        )
        raise InvalidArgumentError(
            "Request parameters must provide 'name', 'type' and 'value'",
            context=ctx,
        ) from e


class ValidatorRequestParameter:
    """Validates one parameter against the type registry.

    ``validate`` never mutates the registry; it returns the descriptor the
    request builder should record for this parameter.
    """

    def __init__(self, registry: RegistryParameterType | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> RegistryParameterType:
        return self._registry

    def validate(self, parameter: RequestParameterInput) -> ModelTypeDescriptor:
        """Validate ``parameter`` and return its per-parameter descriptor.

        Raises:
            UnsupportedTypeError: The tag is not in the registry.
            InvalidValueShapeError: The value does not satisfy the tag's rule.
        """
        parameter = coerce_parameter(parameter)
        name = parameter.name
        tag = parameter.type
        value = parameter.value

        descriptor = self._registry.lookup(tag, name)
        member = EnumParameterType(parameter.tag)

        def invalid() -> InvalidValueShapeError:
            return InvalidValueShapeError(
                value=value,
                parameter_name=name,
                parameter_type=member,
                context=ModelInvocationErrorContext(
                    transport_type=EnumTransportType.IN_PROCESS,
                    operation="validate",
                ),
            )

        if member.is_entity_shaped:
            fields = read_entity_fields(value)
            if fields is None:
                raise invalid()
            _, entity_type = fields
            return self._registry.resolve(member, name, entity_type=entity_type)

        if member is EnumParameterType.ENTITY_COLLECTION:
            if not isinstance(value, (list, tuple)) or any(
                read_entity_fields(element) is None for element in value
            ):
                raise invalid()
            return descriptor

        if member is EnumParameterType.DATE_TIME:
            if not isinstance(value, datetime):
                raise invalid()
            return descriptor

        if host_value_kind_of(value) is not descriptor.host_value_kind:
            raise invalid()
        return descriptor


def check_request_parameter_type(
    parameter: RequestParameterInput,
    registry: RegistryParameterType | None = None,
) -> None:
    """Standalone pre-flight check for one parameter.

    Raises:
        UnsupportedTypeError: The tag is not supported.
        InvalidValueShapeError: The value does not match the tag.

    Example:
        >>> check_request_parameter_type({"name": "x", "type": "String", "value": "bar"})
        >>> check_request_parameter_type({"name": "n", "type": "Integer", "value": "1"})
        Traceback (most recent call last):
        ...
        InvalidValueShapeError: The value 1
        of the property n
        is not of the expected type Integer.
    """
    ValidatorRequestParameter(registry).validate(parameter)


__all__: list[str] = [
    "RequestParameterInput",
    "ValidatorRequestParameter",
    "check_request_parameter_type",
    "coerce_parameter",
    "read_entity_fields",
]
