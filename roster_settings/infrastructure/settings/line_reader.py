"""Groups tokenizer output into physical lines."""

from __future__ import annotations

import logging
from typing import Iterator

from roster_settings.domain.enums import Status
from roster_settings.domain.value_objects import SettingsLine

from .tokenizer import RosterSettingsTokenizer

logger = logging.getLogger(__name__)

# Errors after which reading the same stream cannot make progress.
_FATAL = frozenset({Status.INVALID_ARGUMENT, Status.NO_INIT, Status.UNEXPECTED_STATE})


class SettingsLineReader:
    """Reads a settings stream line by line.

    Blank and comment-only lines are skipped. A line cut short by an error
    is still yielded, carrying the error status, and reading resumes at the
    next line.
    """

    def __init__(self, tokenizer: RosterSettingsTokenizer) -> None:
        self._tokenizer = tokenizer

    def read_lines(self) -> Iterator[SettingsLine]:
        number = 1
        tokens: list[str] = []

        while True:
            result = self._tokenizer.next_token()
            status = result.status

            if status is Status.OK:
                tokens.append(result.value)
                continue

            if status is Status.END_OF_STREAM and result.open_quote:
                logger.warning(
                    "Line %d: quoted string not closed before end of stream (partial string %r)",
                    number,
                    result.value,
                )
                yield SettingsLine(
                    number=number,
                    tokens=tokens,
                    status=Status.UNTERMINATED_QUOTED_STRING,
                    partial=result.value,
                )
                return

            if status is Status.END_OF_LINE or status is Status.END_OF_STREAM:
                if tokens:
                    yield SettingsLine(number=number, tokens=tokens)
                if status is Status.END_OF_STREAM:
                    return
                tokens = []
                number += 1
                continue

            logger.warning(
                "Line %d: %s (partial string %r)",
                number,
                status.get_display_name(),
                result.value,
            )
            yield SettingsLine(number=number, tokens=tokens, status=status, partial=result.value)
            tokens = []

            if status in _FATAL:
                return
            if not self._resync(status):
                return
            number += 1

    def _resync(self, status: Status) -> bool:
        """Move to the start of the next line; False when the stream is done."""
        if status is Status.UNTERMINATED_QUOTED_STRING:
            # The newline that ended the quote is already consumed.
            return True
        if status is Status.INVALID_ESCAPE:
            return not self._tokenizer.stream.is_empty()
        return self._tokenizer.skip_line() is Status.OK
