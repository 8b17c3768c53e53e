"""Unit tests for error codes and error helpers."""

import logging

from sqlfrags.common.exceptions import (
    ErrorCode,
    FragError,
    configuration_error,
    unsupported_fragment_error,
    validation_error,
)


class TestFragError:
    def test_str_includes_code(self):
        error = FragError("boom", error_code=ErrorCode.CONFIG_INVALID)
        assert str(error) == "[CONFIG_002] boom"

    def test_str_includes_cause(self):
        error = FragError("boom", cause=KeyError("k"))
        assert str(error) == "[VALIDATION_001] boom (caused by: KeyError: 'k')"

    def test_to_dict(self):
        error = FragError("boom", error_code=ErrorCode.UNKNOWN_SYNTAX, details={"field": "syntax"})
        assert error.to_dict() == {
            "type": "FragError",
            "message": "boom",
            "error_code": "VALIDATION_002",
            "error_name": "UNKNOWN_SYNTAX",
            "details": {"field": "syntax"},
        }

    def test_from_error_code(self):
        error = FragError.from_error_code(ErrorCode.UNSUPPORTED_FRAGMENT, "nope")
        assert error.error_code == ErrorCode.UNSUPPORTED_FRAGMENT
        assert error.message == "nope"

    def test_error_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="sqlfrags.common.exceptions"):
            FragError("logged failure", error_code=ErrorCode.CONFIG_ERROR)
        record = next(r for r in caplog.records if r.getMessage() == "logged failure")
        assert record.levelno == logging.ERROR
        assert record.error_code == "CONFIG_001"


class TestHelpers:
    def test_configuration_error(self):
        error = configuration_error("bad config", config_key="logging.level")
        assert error.error_code == ErrorCode.CONFIG_ERROR
        assert error.details == {"config_key": "logging.level"}

    def test_validation_error(self):
        error = validation_error("bad value", field="syntax", value=3)
        assert error.error_code == ErrorCode.VALIDATION_ERROR
        assert error.details == {"field": "syntax", "value": "3"}

    def test_validation_error_code_override(self):
        error = validation_error("bad", error_code=ErrorCode.UNKNOWN_SYNTAX)
        assert error.error_code == ErrorCode.UNKNOWN_SYNTAX

    def test_unsupported_fragment_error(self):
        error = unsupported_fragment_error(3.5, renderer="AnsiRenderer")
        assert error.error_code == ErrorCode.UNSUPPORTED_FRAGMENT
        assert error.details == {"value_type": "float", "renderer": "AnsiRenderer"}
        assert "as a fragment" in error.message

    def test_unsupported_condition_error(self):
        error = unsupported_fragment_error("x", error_code=ErrorCode.UNSUPPORTED_CONDITION)
        assert error.error_code == ErrorCode.UNSUPPORTED_CONDITION
        assert "as a condition" in error.message
