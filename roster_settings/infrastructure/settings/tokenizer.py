"""Tokenizer for the line-oriented roster settings file format.

The format is a sequence of whitespace-separated strings:

- Whitespace is spaces or tabs. Newlines separate lines and never appear
  inside a string.
- A string starting with an unescaped ``#`` is a comment running to the end
  of the line. A ``#`` anywhere later in a string is ordinary data.
- Quoted strings open with ``"`` or ``'`` and close with the same quote on
  the same line.
- Unquoted strings run until whitespace, a newline or the end of the stream.
- A backslash takes the next character literally, in and out of quotes.
  Newlines and the end of the stream cannot be escaped.
"""

from __future__ import annotations

import logging

from roster_settings.domain.enums import Status
from roster_settings.domain.value_objects import (
    PATH_NAME_LENGTH,
    EscapeState,
    QuotedState,
    ScanState,
    StartState,
    TokenBuffer,
    TokenResult,
    UnquotedState,
)

from .char_stream import END_OF_TEXT, CharStream

logger = logging.getLogger(__name__)

WHITESPACE = " \t"
QUOTES = "\"'"
NEWLINE = "\n"
ESCAPE = "\\"
COMMENT = "#"


class RosterSettingsTokenizer:
    """Reads one string at a time from a ``CharStream``."""

    def __init__(self, stream: CharStream, capacity: int = PATH_NAME_LENGTH) -> None:
        self._stream = stream
        self._capacity = capacity
        self._open_quote = False

    @property
    def stream(self) -> CharStream:
        return self._stream

    @property
    def open_quote(self) -> bool:
        """True when the last read hit the end of the stream inside quotes."""
        return self._open_quote

    def next_token(self) -> TokenResult:
        """Read into a fresh buffer of the configured capacity."""
        buffer = TokenBuffer(self._capacity)
        status = self.read_token(buffer)
        return TokenResult(status=status, value=buffer.value, open_quote=self._open_quote)

    def read_token(self, buffer: TokenBuffer | None) -> Status:
        """Read the next string into ``buffer`` and return the outcome.

        The buffer always ends up holding the longest prefix read, even when
        an error status is returned. On success the stream is left at the
        delimiter that follows the string, except that terminating
        whitespace and closing quotes are consumed.
        """
        self._open_quote = False
        if buffer is None or buffer.capacity < 1:
            return Status.INVALID_ARGUMENT
        status = self._stream.init_check()
        if status is not Status.OK:
            return status

        buffer.clear()
        stream = self._stream
        state: ScanState = StartState()
        length = 0

        while True:
            ch = stream.get()
            at_end = ch == END_OF_TEXT and stream.is_empty()
            literal: str | None = None

            if isinstance(state, StartState):
                if ch == COMMENT:
                    status = Status.COMMENT
                    break
                if ch in WHITESPACE:
                    continue
                if ch == NEWLINE:
                    status = Status.END_OF_LINE
                    break
                if ch == ESCAPE:
                    state = EscapeState(resume=UnquotedState())
                elif ch in QUOTES:
                    state = QuotedState(quote=ch)
                elif at_end:
                    status = Status.END_OF_STREAM
                    break
                else:
                    literal = ch
                    state = UnquotedState()

            elif isinstance(state, UnquotedState):
                if ch in WHITESPACE:
                    break
                if ch == NEWLINE:
                    status = Status.END_OF_LINE
                    break
                if ch == ESCAPE:
                    state = EscapeState(resume=state)
                elif at_end:
                    status = Status.END_OF_STREAM
                    break
                else:
                    literal = ch

            elif isinstance(state, QuotedState):
                if ch == state.quote:
                    break
                if ch == NEWLINE:
                    status = Status.UNTERMINATED_QUOTED_STRING
                    break
                if ch == ESCAPE:
                    state = EscapeState(resume=state)
                elif at_end:
                    status = Status.END_OF_STREAM
                    break
                else:
                    literal = ch

            elif isinstance(state, EscapeState):
                if ch == NEWLINE or at_end:
                    status = Status.INVALID_ESCAPE
                    break
                literal = ch
                state = state.resume

            else:
                status = Status.UNEXPECTED_STATE
                break

            if literal is None:
                continue
            if length >= buffer.capacity - 1:
                # No room left: the character stays in the stream.
                stream.unget()
                status = Status.STRING_TOO_LONG
                break
            buffer.append(literal)
            length += 1

        self._open_quote = isinstance(state, QuotedState) and status is Status.END_OF_STREAM

        if status is Status.COMMENT:
            status = self._discard_comment(unget_newline=isinstance(state, UnquotedState))

        if isinstance(state, UnquotedState) and status in (
            Status.END_OF_LINE,
            Status.END_OF_STREAM,
        ):
            # A bare string ended by the line or the stream: hand the
            # terminator back so the next call sees it.
            stream.unget()
            status = Status.OK

        buffer.terminate(length)
        logger.debug("read_token: status=%s value=%r", status.name, buffer.value)
        return status

    def skip_line(self) -> Status:
        """Discard the rest of the current line.

        Returns ``Status.OK`` with the stream at the start of the next line,
        or ``Status.END_OF_STREAM`` if no newline was left.
        """
        status = self._stream.init_check()
        if status is not Status.OK:
            return status
        while True:
            ch = self._stream.get()
            if ch == NEWLINE:
                return Status.OK
            if ch == END_OF_TEXT and self._stream.is_empty():
                return Status.END_OF_STREAM

    def _discard_comment(self, unget_newline: bool) -> Status:
        stream = self._stream
        while True:
            ch = stream.get()
            if ch == NEWLINE or (ch == END_OF_TEXT and stream.is_empty()):
                break
        if unget_newline:
            stream.unget()
        return Status.END_OF_LINE if ch == NEWLINE else Status.END_OF_STREAM
