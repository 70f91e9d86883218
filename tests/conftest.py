"""Shared fixtures for Beblia tests."""

from pathlib import Path

import pytest

from beblia.formats.markup import parse_string
from beblia.localization import reset_default_localization

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_XML = FIXTURES_DIR / "sample_bible.xml"
FRENCH_BOOKS = FIXTURES_DIR / "french_books.txt"


@pytest.fixture(autouse=True)
def default_localization():
    """Restore the built-in book table around every test."""
    reset_default_localization()
    yield
    reset_default_localization()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the user's own settings file out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("BEBLIA_CONFIG_PATH", raising=False)


@pytest.fixture
def sample_xml_path() -> Path:
    return SAMPLE_XML


@pytest.fixture
def sample_bible():
    """Bible parsed from the sample XML fixture."""
    return parse_string(SAMPLE_XML.read_bytes())
