"""Tests for i18nscan_common.errors and problem details."""

from __future__ import annotations

import logging

import pytest

from i18nscan_common.errors import (
    BASE_TYPE_URI,
    ConfigurationError,
    ErrorCode,
    I18nScanError,
    SerializationError,
    SettingsError,
    SourceParseError,
    SourceReadError,
    get_type_uri,
)
from i18nscan_common.problem_details import ProblemDetailsParams, build_problem_details


class TestErrorCodes:
    """Tests for ErrorCode and type URIs."""

    def test_values_are_kebab_case(self) -> None:
        """Every code value is lowercase kebab-case."""
        for code in ErrorCode:
            assert code.value == code.value.lower()
            assert "_" not in code.value

    def test_type_uri(self) -> None:
        """Type URIs are built from the base URI and the code value."""
        assert get_type_uri(ErrorCode.SOURCE_PARSE_ERROR) == f"{BASE_TYPE_URI}/source-parse-error"

    def test_str_is_value(self) -> None:
        """str() of a code is its value."""
        assert str(ErrorCode.SERIALIZATION_ERROR) == "serialization-error"


class TestI18nScanError:
    """Tests for the base exception."""

    def test_defaults(self) -> None:
        """Base error defaults to a runtime error."""
        error = I18nScanError("boom")
        assert error.code is ErrorCode.RUNTIME_ERROR
        assert error.http_status == 500
        assert error.log_level == logging.ERROR
        assert error.context == {}

    def test_str_includes_cause(self) -> None:
        """__str__ names the class, code and cause type."""
        error = SerializationError("cannot write", cause=OSError("disk full"))
        assert str(error) == (
            "SerializationError[serialization-error]: cannot write (caused by: OSError)"
        )

    def test_problem_details(self) -> None:
        """Problem details carry type, status, code and context extensions."""
        error = SourceParseError("syntax error in a.go at 3:1", path="a.go", line=3, column=1)
        problem = error.to_problem_details(instance="urn:test")
        assert problem["type"] == get_type_uri(ErrorCode.SOURCE_PARSE_ERROR)
        assert problem["title"] == "SourceParseError"
        assert problem["status"] == 422
        assert problem["detail"] == "syntax error in a.go at 3:1"
        assert problem["instance"] == "urn:test"
        assert problem["code"] == "source-parse-error"
        assert problem["extensions"] == {"path": "a.go", "line": 3, "column": 1}

    def test_problem_details_without_context(self) -> None:
        """Errors without context produce no extensions."""
        problem = I18nScanError("boom").to_problem_details()
        assert "extensions" not in problem
        assert problem["instance"] == "urn:i18nscan:error"


class TestSubclasses:
    """Tests for specialised error types."""

    def test_source_parse_error_location(self) -> None:
        """SourceParseError exposes path and location."""
        error = SourceParseError("bad", path="main.go")
        assert error.path == "main.go"
        assert error.line is None
        assert error.context == {"path": "main.go"}

    @pytest.mark.parametrize(("missing", "status"), [(True, 404), (False, 400)])
    def test_source_read_error_status(self, missing: bool, status: int) -> None:
        """SourceReadError maps missing paths to 404."""
        error = SourceReadError("unreadable", path="x.go", missing=missing)
        assert error.http_status == status
        assert error.code is ErrorCode.SOURCE_READ_ERROR

    def test_configuration_error_is_critical(self) -> None:
        """ConfigurationError is logged at CRITICAL level."""
        error = ConfigurationError("grammar missing", cause=ModuleNotFoundError("tree_sitter_go"))
        assert error.code is ErrorCode.CONFIGURATION_ERROR
        assert error.log_level == logging.CRITICAL
        assert isinstance(error.__cause__, ModuleNotFoundError)

    def test_settings_error_validation_errors(self) -> None:
        """SettingsError stores validation errors in context."""
        error = SettingsError("invalid", errors=[{"field": "func_name", "issue": "bad"}])
        assert error.code is ErrorCode.CONFIGURATION_ERROR
        assert error.context["validation_errors"] == [{"field": "func_name", "issue": "bad"}]

    def test_cause_is_chained(self) -> None:
        """The cause becomes __cause__."""
        cause = ValueError("inner")
        error = SerializationError("outer", cause=cause)
        assert error.__cause__ is cause


class TestBuildProblemDetails:
    """Tests for build_problem_details."""

    def test_rejects_success_status(self) -> None:
        """Non-error statuses are rejected."""
        params = ProblemDetailsParams(
            problem_type="about:blank", title="OK", status=200, detail="fine", instance="urn:x"
        )
        with pytest.raises(ValueError, match="HTTP error code"):
            build_problem_details(params)

    def test_optional_fields_omitted(self) -> None:
        """code and extensions are emitted only when set."""
        params = ProblemDetailsParams(
            problem_type="about:blank", title="Bad", status=400, detail="bad", instance="urn:x"
        )
        assert set(build_problem_details(params)) == {
            "type",
            "title",
            "status",
            "detail",
            "instance",
        }
