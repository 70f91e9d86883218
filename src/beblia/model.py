"""In-memory Bible tree: Bible -> Testament -> Book -> Chapter -> Verse.

Order at every level is the order the source was read in. Numbers are
not required to be unique; lookups return the first match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from beblia.localization import Localization, get_default_localization


class TestamentKind(IntEnum):
    """Testament tag. Values are the binary wire encoding."""

    OLD = 0
    NEW = 1

    @classmethod
    def from_name(cls, name: str | None) -> "TestamentKind":
        """Map an XML testament name to a kind: exactly "new" (any case) is NEW."""
        if name is not None and name.lower() == "new":
            return cls.NEW
        return cls.OLD

    @classmethod
    def from_display_name(cls, name: str) -> "TestamentKind":
        """Map a version 1 binary testament name ("New", "New Testament") to a kind."""
        if name.strip().lower() in ("new", "new testament"):
            return cls.NEW
        return cls.OLD

    @property
    def label(self) -> str:
        return "New" if self is TestamentKind.NEW else "Old"


@dataclass
class Verse:
    """A single verse."""

    number: int
    text: str = ""

    def to_dict(self) -> dict:
        return {"number": self.number, "text": self.text}


@dataclass
class Chapter:
    """A chapter and its verses."""

    number: int
    verses: list[Verse] = field(default_factory=list)

    def get_verse(self, number: int) -> Verse | None:
        return next((v for v in self.verses if v.number == number), None)


@dataclass
class Book:
    """A book and its chapters.

    Display names are not stored here; ask the owning Bible for them
    (Bible.book_name / Bible.book_abbreviation).
    """

    number: int
    chapters: list[Chapter] = field(default_factory=list)

    def get_chapter(self, number: int) -> Chapter | None:
        return next((c for c in self.chapters if c.number == number), None)


@dataclass
class Testament:
    """A testament grouping of books."""

    kind: TestamentKind = TestamentKind.OLD
    books: list[Book] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.kind.label


@dataclass
class Bible:
    """A whole translation.

    Attributes:
        translation: Translation name, e.g. "English KJV"
        status: Copyright status, e.g. "Public Domain"
        testaments: Testaments in source order
        localization: Book name table used by this Bible. Starts as a copy
            of the process-wide default; binary sources that carry their
            own table replace it.
    """

    translation: str | None = None
    status: str | None = None
    testaments: list[Testament] = field(default_factory=list)
    localization: Localization = field(
        default_factory=lambda: get_default_localization().copy(),
        repr=False,
        compare=False,
    )

    def books(self, kind: TestamentKind | None = None) -> list[Book]:
        """All books in order, optionally only those of one testament kind."""
        return [
            book
            for testament in self.testaments
            if kind is None or testament.kind == kind
            for book in testament.books
        ]

    @property
    def verse_count(self) -> int:
        return sum(
            len(chapter.verses) for book in self.books() for chapter in book.chapters
        )

    def _book_number(self, book: int | str) -> int | None:
        if isinstance(book, int):
            return book
        return self.localization.resolve(book)

    def get_book(self, book: int | str) -> Book | None:
        """Find a book by number, or by name/abbreviation via the localization."""
        number = self._book_number(book)
        if number is None:
            return None
        return next((b for b in self.books() if b.number == number), None)

    def get_chapter(self, book: int | str, chapter: int) -> Chapter | None:
        found = self.get_book(book)
        return found.get_chapter(chapter) if found else None

    def get_verse(self, book: int | str, chapter: int, verse: int) -> Verse | None:
        found = self.get_chapter(book, chapter)
        return found.get_verse(verse) if found else None

    def book_name(self, book: Book | int) -> str | None:
        """Localized full name of a book."""
        number = book.number if isinstance(book, Book) else book
        return self.localization.book_name(number)

    def book_abbreviation(self, book: Book | int) -> str | None:
        """Localized primary abbreviation of a book."""
        number = book.number if isinstance(book, Book) else book
        return self.localization.book_abbreviation(number)

    def query(self, reference: str) -> list[Verse]:
        """Resolve a quick reference like "JN 3:16-18" against this Bible."""
        from beblia.query import query

        return query(self, reference)
