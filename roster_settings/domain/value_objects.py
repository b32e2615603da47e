"""Scanner states, token buffer and read results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .enums import Status
from .exceptions import InvalidTokenBufferException

# Every string in a roster settings file is a path, a MIME signature,
# an integer or a fixed keyword, so no token may exceed a path name.
PATH_NAME_LENGTH = 1024


@dataclass(frozen=True)
class StartState:
    """Nothing accumulated yet; leading whitespace is skipped."""


@dataclass(frozen=True)
class UnquotedState:
    """Accumulating a bare token."""


@dataclass(frozen=True)
class QuotedState:
    """Accumulating a token opened by ``quote``."""

    quote: str


@dataclass(frozen=True)
class EscapeState:
    """A backslash was read; the next character is taken literally."""

    resume: Union[UnquotedState, QuotedState]


ScanState = Union[StartState, UnquotedState, QuotedState, EscapeState]


class TokenBuffer:
    """Caller-owned output buffer with a fixed capacity.

    Mirrors a NUL-terminated character array: at most ``capacity - 1``
    characters are ever held, and ``value`` is always a complete
    (possibly empty) string.
    """

    def __init__(self, capacity: int = PATH_NAME_LENGTH) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidTokenBufferException(
                f"Buffer capacity must be an integer, got {capacity!r}"
            )
        self._capacity = capacity
        self._chars: list[str] = []
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def value(self) -> str:
        return "".join(self._chars[: self._length])

    def clear(self) -> None:
        self._chars.clear()
        self._length = 0

    def append(self, ch: str) -> None:
        if len(self._chars) >= self._capacity - 1:
            raise InvalidTokenBufferException(
                f"Buffer of capacity {self._capacity} is full"
            )
        self._chars.append(ch)
        self._length = len(self._chars)

    def terminate(self, length: int) -> None:
        """Fix the visible value at ``length`` characters."""
        length = max(0, min(length, len(self._chars), self._capacity - 1))
        del self._chars[length:]
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"TokenBuffer(capacity={self._capacity}, value={self.value!r})"


@dataclass(frozen=True)
class TokenResult:
    status: Status
    value: str = ""
    open_quote: bool = False

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


@dataclass(frozen=True)
class SettingsLine:
    """Strings read from one physical line of a settings file.

    ``status`` is ``Status.OK`` for a cleanly terminated line, otherwise the
    error that cut the line short; ``partial`` then holds whatever the
    failing string had accumulated.
    """

    number: int
    tokens: list[str] = field(default_factory=list)
    status: Status = Status.OK
    partial: str = ""

    @property
    def has_error(self) -> bool:
        return self.status.is_error
