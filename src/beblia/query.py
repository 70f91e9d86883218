"""Quick reference lookup: "JN 3:16", "John 3:1-2", "1 Samuel 3:1,4,5-6".

The book part is everything before the last space, so multi-word names
such as "1 Samuel" or "Song of Solomon" work. Malformed references and
unknown books yield no verses instead of raising.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field

from beblia.localization import Localization
from beblia.model import Bible, Chapter, Verse


@dataclass
class QuickReference:
    """A parsed quick reference.

    verse_ranges holds inclusive (start, end) pairs in request order; a
    single verse is (n, n).
    """

    book_number: int
    chapter: int
    verse_ranges: list[tuple[int, int]] = field(default_factory=list)
    input_ref: str = ""


def _parse_int(value: str) -> int | None:
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_verse_spec(spec: str) -> list[tuple[int, int]]:
    """Parse "1,4,5-6" into [(1, 1), (4, 4), (5, 6)].

    Items that are not integers or well-formed ranges are dropped, and so
    is a range whose start is greater than its end. Order and repeats are
    kept.
    """
    ranges: list[tuple[int, int]] = []
    for item in spec.split(","):
        item = item.strip()
        if "-" in item:
            bounds = item.split("-")
            if len(bounds) != 2:
                continue
            start, end = _parse_int(bounds[0]), _parse_int(bounds[1])
            if start is None or end is None or start > end:
                continue
            ranges.append((start, end))
        else:
            number = _parse_int(item)
            if number is not None:
                ranges.append((number, number))
    return ranges


def parse_reference(text: str, localization: Localization) -> QuickReference | None:
    """Parse a quick reference string.

    Args:
        text: Reference like "JN 3:16-18"
        localization: Table used to resolve the book part

    Returns:
        QuickReference, or None if the text is blank, malformed, or names an
        unknown book
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    book_part, space, locator = trimmed.rpartition(" ")
    if not space:
        return None

    book_number = localization.resolve(book_part.strip())
    if book_number is None:
        return None

    fields = locator.strip().split(":")
    if len(fields) != 2:
        return None

    chapter = _parse_int(fields[0])
    if chapter is None:
        return None

    return QuickReference(
        book_number=book_number,
        chapter=chapter,
        verse_ranges=parse_verse_spec(fields[1]),
        input_ref=text,
    )


def _verses_in_ranges(
    chapter: Chapter, ranges: list[tuple[int, int]]
) -> list[Verse]:
    """Collect existing verses for each range, never walking past the chapter."""
    by_number: dict[int, Verse] = {}
    for verse in chapter.verses:
        by_number.setdefault(verse.number, verse)
    numbers = sorted(by_number)

    verses = []
    for start, end in ranges:
        lo = bisect_left(numbers, start)
        hi = bisect_right(numbers, end)
        verses.extend(by_number[n] for n in numbers[lo:hi])
    return verses


def query(bible: Bible, text: str) -> list[Verse]:
    """Resolve a quick reference against a Bible.

    Book names are resolved with the Bible's own localization table.
    Verses that do not exist are skipped; request order is preserved and
    repeated numbers produce repeated verses.

    Examples:
        >>> [v.number for v in query(bible, "JN 3:1,4,5-6")]
        [1, 4, 5, 6]
        >>> query(bible, "Nonesuch 1:1")
        []
    """
    reference = parse_reference(text, bible.localization)
    if reference is None:
        return []

    chapter = bible.get_chapter(reference.book_number, reference.chapter)
    if chapter is None:
        return []

    return _verses_in_ranges(chapter, reference.verse_ranges)
