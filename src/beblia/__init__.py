"""Beblia - Bible XML and compact binary (.beblia) reader/writer.

Public API:
    load(path_or_stream) -> Bible        auto-detects XML or binary
    load_markup(text) -> Bible           XML only
    save(bible, path_or_stream)          binary, current version
    query(bible, text) -> list[Verse]    quick references like "JN 3:16-18"
"""

__version__ = "0.1.0"

from beblia.errors import BebliaError, ConfigError, FormatError, NotFoundError
from beblia.loader import load, load_markup, save
from beblia.localization import Localization
from beblia.model import Bible, Book, Chapter, Testament, TestamentKind, Verse
from beblia.query import query

__all__ = [
    # Entry points
    "load",
    "load_markup",
    "save",
    "query",
    # Tree
    "Bible",
    "Testament",
    "TestamentKind",
    "Book",
    "Chapter",
    "Verse",
    "Localization",
    # Errors
    "BebliaError",
    "ConfigError",
    "FormatError",
    "NotFoundError",
]
