# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Tests for invocation error classes.

All tests validate:
- Error class instantiation
- Inheritance chain
- Error chaining (raise ... from e)
- Structured context fields via ModelInvocationErrorContext
- Error code mapping
"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from xrm_invoke.enums import EnumErrorCode, EnumParameterType, EnumTransportType
from xrm_invoke.errors import (
    HostConnectionError,
    HostInvocationError,
    HostTimeoutError,
    InvalidArgumentError,
    InvalidValueShapeError,
    InvocationError,
    ModelInvocationErrorContext,
    ProtocolConfigurationError,
    UnsupportedTypeError,
)


class TestModelInvocationErrorContext:
    """Tests for ModelInvocationErrorContext configuration model."""

    def test_basic_instantiation(self) -> None:
        context = ModelInvocationErrorContext()
        assert context.transport_type is None
        assert context.operation is None
        assert context.target_name is None
        assert context.correlation_id is None

    def test_with_correlation_generates_uuid_when_none(self) -> None:
        context = ModelInvocationErrorContext.with_correlation()
        assert isinstance(context.correlation_id, UUID)
        assert context.correlation_id.version == 4

    def test_with_correlation_uses_provided_uuid(self) -> None:
        provided_id = uuid4()
        context = ModelInvocationErrorContext.with_correlation(
            correlation_id=provided_id, operation="validate"
        )
        assert context.correlation_id == provided_id
        assert context.operation == "validate"

    def test_immutability(self) -> None:
        context = ModelInvocationErrorContext(transport_type=EnumTransportType.HTTP)
        with pytest.raises(ValidationError):
            context.transport_type = EnumTransportType.IN_PROCESS  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelInvocationErrorContext(unknown="x")  # type: ignore[call-arg]


class TestInvocationError:
    """Tests for the InvocationError base class."""

    def test_basic_instantiation(self) -> None:
        error = InvocationError("Test error message")
        assert "Test error message" in str(error)
        assert error.message == "Test error message"
        assert isinstance(error, Exception)

    def test_with_context_model(self) -> None:
        correlation_id = uuid4()
        context = ModelInvocationErrorContext(
            transport_type=EnumTransportType.HTTP,
            operation="http.post",
            target_name="WinOpportunity",
            correlation_id=correlation_id,
        )
        error = InvocationError("Test error", context=context)
        assert error.model.correlation_id == correlation_id
        assert error.correlation_id == correlation_id
        assert error.model.context["transport_type"] == EnumTransportType.HTTP
        assert error.model.context["operation"] == "http.post"
        assert error.model.context["target_name"] == "WinOpportunity"

    def test_with_extra_context(self) -> None:
        error = InvocationError("Test error", status_code=404)
        assert error.model.context["status_code"] == 404

    def test_explicit_error_code(self) -> None:
        error = InvocationError("Test error", error_code=EnumErrorCode.HOST_TIMEOUT)
        assert error.error_code == EnumErrorCode.HOST_TIMEOUT

    def test_error_chaining(self) -> None:
        original_error = ValueError("Original error")
        try:
            raise InvocationError("Wrapped error") from original_error
        except InvocationError as e:
            assert e.__cause__ is original_error


class TestUnsupportedTypeError:
    """Tests for UnsupportedTypeError."""

    def test_default_message_names_tag_and_parameter(self) -> None:
        error = UnsupportedTypeError(parameter_type="Guid", parameter_name="recordId")
        assert str(error) == (
            "The property type Guid of the property recordId is not supported."
        )

    def test_error_code_mapping(self) -> None:
        error = UnsupportedTypeError(parameter_type="Guid", parameter_name="x")
        assert error.model.error_code == EnumErrorCode.UNSUPPORTED_TYPE
        assert error.model.context["parameter_type"] == "Guid"
        assert error.model.context["parameter_name"] == "x"

    def test_inheritance(self) -> None:
        assert isinstance(UnsupportedTypeError(parameter_type="Guid"), InvocationError)


class TestInvalidValueShapeError:
    """Tests for InvalidValueShapeError."""

    def test_multi_line_message(self) -> None:
        error = InvalidValueShapeError(
            value="2024-01-01",
            parameter_name="due",
            parameter_type=EnumParameterType.DATE_TIME,
        )
        assert str(error) == (
            "The value 2024-01-01\nof the property due\nis not of the expected type DateTime."
        )

    def test_error_code_mapping(self) -> None:
        error = InvalidValueShapeError(
            value=1, parameter_name="x", parameter_type="String"
        )
        assert error.model.error_code == EnumErrorCode.INVALID_VALUE_SHAPE
        assert error.model.context["parameter_type"] == "String"


class TestRemainingErrors:
    """Error code mapping and hierarchy for the remaining classes."""

    @pytest.mark.parametrize(
        ("error_class", "error_code"),
        [
            (InvalidArgumentError, EnumErrorCode.INVALID_ARGUMENT),
            (ProtocolConfigurationError, EnumErrorCode.INVALID_CONFIGURATION),
            (HostInvocationError, EnumErrorCode.HOST_INVOCATION_FAILED),
            (HostConnectionError, EnumErrorCode.HOST_CONNECTION_FAILED),
            (HostTimeoutError, EnumErrorCode.HOST_TIMEOUT),
        ],
    )
    def test_error_code_mapping(
        self, error_class: type[InvocationError], error_code: EnumErrorCode
    ) -> None:
        assert error_class("failure").error_code == error_code

    def test_host_errors_share_base(self) -> None:
        assert isinstance(HostConnectionError("x"), HostInvocationError)
        assert isinstance(HostTimeoutError("x"), HostInvocationError)
