"""Tests for domain value objects and status codes."""

import pytest

from roster_settings.domain.enums import Status
from roster_settings.domain.exceptions import InvalidTokenBufferException
from roster_settings.domain.value_objects import (
    PATH_NAME_LENGTH,
    EscapeState,
    QuotedState,
    SettingsLine,
    TokenBuffer,
    TokenResult,
    UnquotedState,
)


class TestTokenBuffer:
    def test_defaults(self):
        buffer = TokenBuffer()
        assert buffer.capacity == PATH_NAME_LENGTH
        assert buffer.value == ""
        assert len(buffer) == 0

    def test_append_and_terminate(self):
        buffer = TokenBuffer(8)
        for ch in "abcd":
            buffer.append(ch)
        buffer.terminate(2)
        assert buffer.value == "ab"
        assert str(buffer) == "ab"
        assert len(buffer) == 2

    def test_terminate_is_clamped(self):
        buffer = TokenBuffer(4)
        for ch in "abc":
            buffer.append(ch)
        buffer.terminate(10)
        assert buffer.value == "abc"

    def test_refuses_last_slot(self):
        buffer = TokenBuffer(3)
        buffer.append("a")
        buffer.append("b")
        with pytest.raises(InvalidTokenBufferException, match="full"):
            buffer.append("c")

    def test_clear(self):
        buffer = TokenBuffer(4)
        buffer.append("a")
        buffer.clear()
        assert buffer.value == ""

    @pytest.mark.parametrize("capacity", ["10", 1.5, True, None])
    def test_non_integer_capacity(self, capacity):
        with pytest.raises(InvalidTokenBufferException):
            TokenBuffer(capacity)


class TestScanStates:
    def test_quoted_carries_quote(self):
        assert QuotedState(quote="'") == QuotedState(quote="'")
        assert QuotedState(quote="'") != QuotedState(quote='"')

    def test_escape_carries_resume_state(self):
        state = EscapeState(resume=QuotedState(quote='"'))
        assert state.resume.quote == '"'
        assert EscapeState(resume=UnquotedState()).resume == UnquotedState()


class TestResults:
    def test_token_result_ok(self):
        assert TokenResult(Status.OK, "x").ok is True
        assert TokenResult(Status.END_OF_LINE).ok is False

    def test_settings_line_error(self):
        assert SettingsLine(number=1).has_error is False
        assert SettingsLine(number=1, status=Status.STRING_TOO_LONG).has_error is True


class TestStatus:
    @pytest.mark.parametrize("status", [Status.OK, Status.END_OF_LINE, Status.END_OF_STREAM])
    def test_non_errors(self, status):
        assert status.is_error is False

    @pytest.mark.parametrize(
        "status",
        [
            Status.INVALID_ESCAPE,
            Status.UNTERMINATED_QUOTED_STRING,
            Status.STRING_TOO_LONG,
            Status.INVALID_ARGUMENT,
            Status.UNEXPECTED_STATE,
            Status.NO_INIT,
        ],
    )
    def test_errors(self, status):
        assert status.is_error is True

    def test_every_status_has_display_name(self):
        for status in Status:
            assert status.get_display_name()
