# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Operation request builder.

Assembles call metadata and the flattened value payload for one Action or
Function invocation, validating every parameter first.

Build steps:
    1. Copy the caller's parameter list; the caller's sequence is never
       mutated.
    2. Append a synthetic ``entity`` EntityReference parameter when a bound
       entity is supplied.
    3. Validate each parameter in order and record its wire type entry. The
       first validation error aborts the build, so no partial request ever
       exists.
    4. Flatten values by name. Duplicate names are not rejected; the later
       parameter wins in both the type map and the values.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from xrm_invoke.enums import EnumOperationType, EnumParameterType
from xrm_invoke.models import (
    ModelOperationMetadata,
    ModelOperationRequest,
    ModelParameterTypeEntry,
    ModelRequestParameter,
)
from xrm_invoke.runtime.validator_request_parameter import (
    RequestParameterInput,
    ValidatorRequestParameter,
    coerce_parameter,
)

logger = logging.getLogger(__name__)

BOUND_PARAMETER_NAME = "entity"


class BuilderOperationRequest:
    """Builds ModelOperationRequest instances. Stateless apart from its validator."""

    def __init__(self, validator: ValidatorRequestParameter | None = None) -> None:
        self._validator = validator if validator is not None else ValidatorRequestParameter()

    def build(
        self,
        operation_name: str,
        operation_type: EnumOperationType,
        parameters: Sequence[RequestParameterInput],
        bound_entity: object = None,
    ) -> ModelOperationRequest:
        """Validate ``parameters`` and build the request.

        Args:
            operation_name: Unique name of the Action or Function
            operation_type: ACTION or FUNCTION
            parameters: Parameters as models or ``{name, type, value}`` mappings
            bound_entity: Optional record the operation is bound to

        Raises:
            UnsupportedTypeError: A parameter tag is not supported.
            InvalidValueShapeError: A parameter value does not match its tag.
        """
        request_parameters = [coerce_parameter(p) for p in parameters]
        if bound_entity is not None:
            request_parameters.append(
                ModelRequestParameter(
                    name=BOUND_PARAMETER_NAME,
                    type=EnumParameterType.ENTITY_REFERENCE,
                    value=bound_entity,
                )
            )

        parameter_types: dict[str, ModelParameterTypeEntry] = {}
        values: dict[str, object] = {}
        for parameter in request_parameters:
            descriptor = self._validator.validate(parameter)
            parameter_types[parameter.name] = ModelParameterTypeEntry(
                wire_type_name=descriptor.wire_type_name,
                structural_property=descriptor.structural_property,
                parameter_type=EnumParameterType(parameter.tag),
            )
            values[parameter.name] = parameter.value

        metadata = ModelOperationMetadata(
            bound_parameter=BOUND_PARAMETER_NAME if bound_entity is not None else None,
            operation_type=operation_type,
            operation_name=operation_name,
            parameter_types=parameter_types,
        )

        logger.debug(
            "Operation request built",
            extra={
                "operation_name": operation_name,
                "operation_type": operation_type.name,
                "parameter_count": len(parameter_types),
                "bound": bound_entity is not None,
            },
        )

        return ModelOperationRequest(metadata=metadata, values=values)


__all__: list[str] = ["BOUND_PARAMETER_NAME", "BuilderOperationRequest"]
