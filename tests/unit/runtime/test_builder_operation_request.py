# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Tests for BuilderOperationRequest."""

import pytest

from xrm_invoke.enums import EnumOperationType, EnumParameterType
from xrm_invoke.errors import InvalidValueShapeError, UnsupportedTypeError
from xrm_invoke.runtime import (
    BOUND_PARAMETER_NAME,
    BuilderOperationRequest,
    RegistryParameterType,
    ValidatorRequestParameter,
)


@pytest.fixture
def builder(registry: RegistryParameterType) -> BuilderOperationRequest:
    return BuilderOperationRequest(ValidatorRequestParameter(registry))


class TestUnboundRequests:
    """Requests without a bound entity."""

    def test_action_metadata_and_values(self, builder: BuilderOperationRequest) -> None:
        request = builder.build(
            "Foo",
            EnumOperationType.ACTION,
            [{"name": "x", "type": "String", "value": "bar"}],
        )
        assert request.metadata.to_wire() == {
            "boundParameter": None,
            "operationType": 0,
            "operationName": "Foo",
            "parameterTypes": {
                "x": {"typeName": "Edm.String", "structuralProperty": 1},
            },
        }
        assert request.values == {"x": "bar"}
        assert request.is_bound is False
        assert request.bound_entity is None

    def test_empty_parameter_list(self, builder: BuilderOperationRequest) -> None:
        request = builder.build("WhoAmI", EnumOperationType.FUNCTION, [])
        assert request.metadata.parameter_types == {}
        assert request.values == {}
        assert request.metadata.to_wire()["operationType"] == 1

    def test_parameter_order_preserved(self, builder: BuilderOperationRequest) -> None:
        request = builder.build(
            "Foo",
            EnumOperationType.ACTION,
            [
                {"name": "b", "type": "Integer", "value": 1},
                {"name": "a", "type": "Boolean", "value": True},
            ],
        )
        assert list(request.metadata.parameter_types) == ["b", "a"]

    def test_last_write_wins_on_duplicate_names(
        self, builder: BuilderOperationRequest
    ) -> None:
        request = builder.build(
            "Foo",
            EnumOperationType.ACTION,
            [
                {"name": "x", "type": "String", "value": "first"},
                {"name": "x", "type": "Integer", "value": 2},
            ],
        )
        assert request.values == {"x": 2}
        assert request.metadata.parameter_types["x"].wire_type_name == "Edm.Int32"

    def test_declared_tag_recorded(self, builder: BuilderOperationRequest) -> None:
        request = builder.build(
            "Foo",
            EnumOperationType.ACTION,
            [{"name": "t", "type": "EntityReference", "value": {"id": "1", "entityType": "account"}}],
        )
        entry = request.metadata.parameter_types["t"]
        assert entry.parameter_type is EnumParameterType.ENTITY_REFERENCE
        assert set(request.metadata.to_wire()["parameterTypes"]["t"]) == {
            "typeName",
            "structuralProperty",
        }


class TestBoundRequests:
    """Requests bound to an entity record."""

    def test_bound_function(
        self, builder: BuilderOperationRequest, account_reference: dict[str, str]
    ) -> None:
        request = builder.build(
            "CalculateRollupField",
            EnumOperationType.FUNCTION,
            [],
            bound_entity=account_reference,
        )
        wire = request.metadata.to_wire()
        assert wire["operationType"] == 1
        assert wire["boundParameter"] == BOUND_PARAMETER_NAME == "entity"
        assert wire["parameterTypes"] == {
            "entity": {"typeName": "mscrm.account", "structuralProperty": 5},
        }
        assert request.values["entity"] == account_reference
        assert request.bound_entity == account_reference

    def test_bound_entity_id_passed_verbatim(
        self, builder: BuilderOperationRequest
    ) -> None:
        bound = {"id": "{AAAA-BBBB}", "entityType": "account"}
        request = builder.build("Foo", EnumOperationType.ACTION, [], bound_entity=bound)
        assert request.values["entity"]["id"] == "{AAAA-BBBB}"

    def test_caller_list_not_mutated(
        self, builder: BuilderOperationRequest, account_reference: dict[str, str]
    ) -> None:
        parameters = [{"name": "x", "type": "String", "value": "bar"}]
        builder.build(
            "Foo", EnumOperationType.ACTION, parameters, bound_entity=account_reference
        )
        assert len(parameters) == 1

    def test_malformed_bound_entity_rejected(
        self, builder: BuilderOperationRequest
    ) -> None:
        with pytest.raises(InvalidValueShapeError):
            builder.build(
                "Foo", EnumOperationType.ACTION, [], bound_entity={"id": "1"}
            )


class TestEntityTypeIsolation:
    """Entity wire type names never leak between builds."""

    def test_sequential_builds_do_not_leak(
        self, builder: BuilderOperationRequest
    ) -> None:
        first = builder.build(
            "A",
            EnumOperationType.ACTION,
            [{"name": "t", "type": "EntityReference", "value": {"id": "1", "entityType": "account"}}],
        )
        second = builder.build(
            "B",
            EnumOperationType.ACTION,
            [{"name": "t", "type": "EntityReference", "value": {"id": "2", "entityType": "contact"}}],
        )
        assert first.metadata.parameter_types["t"].wire_type_name == "mscrm.account"
        assert second.metadata.parameter_types["t"].wire_type_name == "mscrm.contact"

    def test_two_entities_in_one_build(self, builder: BuilderOperationRequest) -> None:
        request = builder.build(
            "Merge",
            EnumOperationType.ACTION,
            [
                {"name": "Target", "type": "EntityReference", "value": {"id": "1", "entityType": "account"}},
                {"name": "Subordinate", "type": "EntityReference", "value": {"id": "2", "entityType": "contact"}},
            ],
        )
        types = request.metadata.parameter_types
        assert types["Target"].wire_type_name == "mscrm.account"
        assert types["Subordinate"].wire_type_name == "mscrm.contact"


class TestBuildFailures:
    """A validation error aborts the build."""

    def test_invalid_value_aborts(self, builder: BuilderOperationRequest) -> None:
        with pytest.raises(InvalidValueShapeError):
            builder.build(
                "Foo",
                EnumOperationType.ACTION,
                [
                    {"name": "ok", "type": "String", "value": "fine"},
                    {"name": "bad", "type": "Integer", "value": "1"},
                ],
            )

    def test_unsupported_tag_aborts(self, builder: BuilderOperationRequest) -> None:
        with pytest.raises(UnsupportedTypeError):
            builder.build(
                "Foo",
                EnumOperationType.FUNCTION,
                [{"name": "id", "type": "Guid", "value": "x"}],
            )
