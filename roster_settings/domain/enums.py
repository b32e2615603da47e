"""Status codes returned by the settings tokenizer."""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    OK = "ok"
    END_OF_LINE = "end_of_line"
    END_OF_STREAM = "end_of_stream"
    INVALID_ESCAPE = "invalid_escape"
    UNTERMINATED_QUOTED_STRING = "unterminated_quoted_string"
    COMMENT = "comment"  # resolved before read_token returns
    STRING_TOO_LONG = "string_too_long"
    INVALID_ARGUMENT = "invalid_argument"
    UNEXPECTED_STATE = "unexpected_state"
    NO_INIT = "no_init"

    @property
    def is_error(self) -> bool:
        return self not in _NON_ERRORS

    def get_display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_NON_ERRORS = frozenset({Status.OK, Status.END_OF_LINE, Status.END_OF_STREAM})

_DISPLAY_NAMES = {
    Status.OK: "OK",
    Status.END_OF_LINE: "End of line",
    Status.END_OF_STREAM: "End of stream",
    Status.INVALID_ESCAPE: "Invalid escape",
    Status.UNTERMINATED_QUOTED_STRING: "Unterminated quoted string",
    Status.COMMENT: "Comment",
    Status.STRING_TOO_LONG: "String too long",
    Status.INVALID_ARGUMENT: "Invalid argument",
    Status.UNEXPECTED_STATE: "Unexpected scanner state",
    Status.NO_INIT: "Stream not initialized",
}
