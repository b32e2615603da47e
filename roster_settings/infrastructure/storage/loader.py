"""Settings file loader — reads a roster settings file into a CharStream."""

from __future__ import annotations

import logging
from pathlib import Path

from roster_settings.domain.exceptions import SettingsFileLoadException
from roster_settings.infrastructure.settings.char_stream import CharStream

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class SettingsFileLoader:
    """Locates and decodes a settings file."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self._encoding = encoding

    def load(self, path: Path) -> CharStream:
        """Load the file at ``path``; line endings are normalized to ``\\n``."""
        if not path.exists():
            logger.error("Settings file does not exist: %s", path)
            raise SettingsFileLoadException(f"Settings file '{path}' not found")
        if not path.is_file():
            logger.error("Settings path is not a file: %s", path)
            raise SettingsFileLoadException(f"Settings path '{path}' is not a file")

        try:
            text = path.read_bytes().decode(self._encoding, errors="replace")
        except (OSError, LookupError) as exc:
            raise SettingsFileLoadException(f"Cannot read settings file '{path}': {exc}") from exc

        text = text.replace("\r\n", "\n")
        logger.info("Loaded settings file %s (%d characters)", path, len(text))
        return CharStream(text)
