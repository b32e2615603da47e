"""Shared test fixtures for roster_settings tests."""

from __future__ import annotations

import pytest

from roster_settings.domain.value_objects import PATH_NAME_LENGTH
from roster_settings.infrastructure.settings.char_stream import CharStream
from roster_settings.infrastructure.settings.tokenizer import RosterSettingsTokenizer

SAMPLE_SETTINGS = (
    "# Recent documents\n"
    "RecentDoc /boot/home/notes.txt application/x-vnd.Haiku-StyledEdit\n"
    "\n"
    "RecentFolder '/boot/home/My Documents' application/x-vnd.Be-TRAK\n"
    "RecentApp \"application/x-vnd.Haiku-Terminal\"\t 3\n"
)


@pytest.fixture
def make_tokenizer():
    def _make(text: str | None, capacity: int = PATH_NAME_LENGTH) -> RosterSettingsTokenizer:
        return RosterSettingsTokenizer(CharStream(text), capacity=capacity)

    return _make


@pytest.fixture
def sample_settings() -> str:
    return SAMPLE_SETTINGS


@pytest.fixture
def settings_file(tmp_path, sample_settings):
    path = tmp_path / "RosterSettings"
    path.write_text(sample_settings, encoding="utf-8")
    return path
