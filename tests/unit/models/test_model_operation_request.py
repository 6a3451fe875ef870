# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Tests for request and response models."""

import pytest
from pydantic import ValidationError

from xrm_invoke.enums import EnumOperationType, EnumParameterType, EnumStructuralProperty
from xrm_invoke.models import (
    ModelEntityReference,
    ModelHostResponse,
    ModelOperationMetadata,
    ModelOperationRequest,
    ModelParameterTypeEntry,
    ModelRequestParameter,
)


class TestModelOperationMetadata:
    """Wire shape of call metadata."""

    def test_bound_to_wire(self) -> None:
        metadata = ModelOperationMetadata(
            bound_parameter="entity",
            operation_type=EnumOperationType.FUNCTION,
            operation_name="new_Score",
            parameter_types={
                "entity": ModelParameterTypeEntry(
                    wire_type_name="mscrm.account",
                    structural_property=EnumStructuralProperty.ENTITY,
                ),
            },
        )
        assert metadata.to_wire() == {
            "boundParameter": "entity",
            "operationType": 1,
            "operationName": "new_Score",
            "parameterTypes": {
                "entity": {"typeName": "mscrm.account", "structuralProperty": 5},
            },
        }

    def test_frozen(self) -> None:
        metadata = ModelOperationMetadata(
            operation_type=EnumOperationType.ACTION, operation_name="Foo"
        )
        with pytest.raises(ValidationError):
            metadata.operation_name = "Bar"  # type: ignore[misc]


class TestModelOperationRequest:
    """Bound entity accessors."""

    def test_bound_entity(self) -> None:
        reference = {"id": "1", "entityType": "account"}
        request = ModelOperationRequest(
            metadata=ModelOperationMetadata(
                bound_parameter="entity",
                operation_type=EnumOperationType.ACTION,
                operation_name="Foo",
            ),
            values={"entity": reference},
        )
        assert request.is_bound
        assert request.bound_entity == reference


class TestModelRequestParameter:
    """Parameter records accept both key spellings."""

    def test_lowercase_keys(self) -> None:
        parameter = ModelRequestParameter.model_validate(
            {"name": "x", "type": "String", "value": "bar"}
        )
        assert parameter.name == "x"
        assert parameter.tag == "String"
        assert parameter.value == "bar"

    def test_capitalised_keys(self) -> None:
        parameter = ModelRequestParameter.model_validate(
            {"Name": "x", "Type": "Integer", "Value": 1}
        )
        assert parameter.tag == "Integer"
        assert parameter.value == 1

    def test_enum_tag(self) -> None:
        parameter = ModelRequestParameter(name="x", type=EnumParameterType.MONEY, value=1)
        assert parameter.tag == "Money"

    def test_unknown_tag_kept(self) -> None:
        """Unknown tags survive model validation and are rejected by the registry."""
        parameter = ModelRequestParameter(name="x", type="Guid", value="1")
        assert parameter.tag == "Guid"


class TestModelEntityReference:
    """Entity reference wire form."""

    def test_alias_and_to_wire(self) -> None:
        reference = ModelEntityReference(id="1", entityType="account")
        assert reference.entity_type == "account"
        assert reference.to_wire() == {"id": "1", "entityType": "account"}


class TestModelHostResponse:
    """ok and json()."""

    @pytest.mark.parametrize(("status", "ok"), [(200, True), (204, True), (304, False), (404, False)])
    def test_ok(self, status: int, ok: bool) -> None:
        assert ModelHostResponse(status_code=status).ok is ok

    def test_json(self) -> None:
        response = ModelHostResponse(status_code=200, content=b'{"Value": 1}')
        assert response.json() == {"Value": 1}

    def test_json_empty_body_raises(self) -> None:
        with pytest.raises(ValueError):
            ModelHostResponse(status_code=204).json()
