"""Pull-based character source with a single level of push-back."""

from __future__ import annotations

from roster_settings.domain.enums import Status

# Returned by get() once the text is exhausted (ASCII End-Of-Text).
END_OF_TEXT = "\x03"


class CharStream:
    """Character source consumed by the settings tokenizer.

    ``get()`` keeps returning ``END_OF_TEXT`` past the end of the text, so a
    caller must check ``is_empty()`` to tell a literal 0x03 from exhaustion.
    ``unget()`` holds back the most recently fetched character; only one
    level is kept.
    """

    def __init__(self, text: str | None = None) -> None:
        self._text = text
        self._pos = 0
        self._last: str | None = None
        self._last_was_end = False
        self._held: str | None = None
        self._held_is_end = False

    def init_check(self) -> Status:
        return Status.OK if self._text is not None else Status.NO_INIT

    def get(self) -> str:
        if self._held is not None:
            ch, at_end = self._held, self._held_is_end
            self._held = None
            self._held_is_end = False
        elif self._text is not None and self._pos < len(self._text):
            ch, at_end = self._text[self._pos], False
            self._pos += 1
        else:
            ch, at_end = END_OF_TEXT, True
        self._last = ch
        self._last_was_end = at_end
        return ch

    def unget(self) -> None:
        if self._last is None:
            return
        self._held = self._last
        self._held_is_end = self._last_was_end
        self._last = None

    def is_empty(self) -> bool:
        if self._held is not None:
            return self._held_is_end
        return self._text is None or self._pos >= len(self._text)

    @property
    def position(self) -> int:
        """Offset of the next character ``get()`` will return."""
        if self._held is not None and not self._held_is_end:
            return self._pos - 1
        return self._pos

    def __repr__(self) -> str:
        size = len(self._text) if self._text is not None else None
        return f"CharStream(position={self.position}, size={size})"
