"""Tests for the treeconf error hierarchy."""

from __future__ import annotations

import pytest

from treeconf.errors import ErrorCodes, InvalidArgumentError, ParserRegistrationError, TreeConfError


class TestTreeConfError:
    def test_fields_and_str(self) -> None:
        cause = ValueError("boom")
        err = TreeConfError(code="X", message="went wrong", details={"k": 1}, cause=cause)
        assert err.code == "X"
        assert err.message == "went wrong"
        assert err.details == {"k": 1}
        assert err.cause is cause
        assert err.timestamp
        assert str(err) == "[X] went wrong"

    def test_details_default_to_empty(self) -> None:
        assert TreeConfError(code="X", message="m").details == {}


class TestInvalidArgumentError:
    def test_message_and_properties(self) -> None:
        err = InvalidArgumentError("key", "must be a non-empty string")
        assert err.code == ErrorCodes.INVALID_ARGUMENT
        assert err.argument == "key"
        assert err.reason == "must be a non-empty string"
        assert "key" in str(err)
        assert isinstance(err, TreeConfError)


class TestParserRegistrationError:
    def test_details(self) -> None:
        err = ParserRegistrationError("Port", "parser is not callable")
        assert err.code == ErrorCodes.PARSER_REGISTRATION_ERROR
        assert err.details == {"type_name": "Port", "reason": "parser is not callable"}


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().INVALID_ARGUMENT = "other"

    def test_instance_assignment_refused_for_new_names(self) -> None:
        codes = ErrorCodes()
        with pytest.raises(AttributeError, match="immutable"):
            codes.UNKNOWN = "UNKNOWN"

    def test_codes_match_raised_errors(self) -> None:
        assert InvalidArgumentError("key", "empty").code == ErrorCodes.INVALID_ARGUMENT == "INVALID_ARGUMENT"
        assert ParserRegistrationError("T", "bad").code == ErrorCodes.PARSER_REGISTRATION_ERROR
