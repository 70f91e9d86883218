"""Book name localization: number <-> full name <-> abbreviations.

A Localization maps each book number to a canonical full name and an
ordered list of abbreviations (the first one is the display form).
Lookups by name or abbreviation are case-insensitive and also match
abbreviations with their periods removed ("Mt." and "Mt" both resolve).

Text table format, one book per line:

    <number> <full name> <first abbreviation>, <abbreviation>, ...

The full name and the first abbreviation are separated only by a space,
so the boundary between them is recovered heuristically; see
parse_table_line().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, NamedTuple

from beblia.errors import NotFoundError
from beblia.localization.defaults import DEFAULT_BOOKS

logger = logging.getLogger(__name__)

SERIALIZED_HEADER = (
    "# Beblia localization table",
    "# Format: <number> <full name> <abbreviation>, <abbreviation>, ...",
)

# Tokens that belong to the abbreviation when they precede its first dotted word
ORDINAL_TOKENS = frozenset({"1", "2", "3", "I", "II", "III", "IV", "V"})


@dataclass
class BookEntry:
    """One row of a localization table."""

    number: int
    name: str
    abbreviations: list[str] = field(default_factory=list)

    @property
    def abbreviation(self) -> str | None:
        """Primary (display) abbreviation."""
        return self.abbreviations[0] if self.abbreviations else None

    def to_line(self) -> str:
        """Render as a single text-table line."""
        parts = [f"{self.number} {self.name}"]
        if self.abbreviations:
            parts[0] += f" {self.abbreviations[0]}"
            parts.extend(self.abbreviations[1:])
        return ", ".join(parts)


class _Index(NamedTuple):
    """Immutable lookup state, swapped in as a whole on every reload."""

    entries: dict[int, BookEntry]
    by_name: dict[str, int]
    by_abbreviation: dict[str, int]


def _is_ordinal(word: str) -> bool:
    return word in ORDINAL_TOKENS


def split_name_and_abbreviation(run: str) -> tuple[str, str]:
    """Split the words before the first comma into full name and abbreviation.

    Priority order:
        1. A single word is both the name and the abbreviation.
        2. The first dotted word (from the second word on, with no dotted
           word before it) starts the abbreviation. An ordinal ("1", "II")
           right before it moves with it unless it is the first word.
        3. An even run whose halves are identical ("1 Kings 1 Kings")
           splits in the middle.
        4. Otherwise the last word is the abbreviation.

    Args:
        run: Words preceding the first comma, e.g. "1 Samuel 1 Sam."

    Returns:
        (full_name, first_abbreviation)
    """
    words = run.split()
    if len(words) == 1:
        return words[0], words[0]

    split_at: int | None = None
    if "." not in words[0]:
        for i in range(1, len(words)):
            if "." in words[i]:
                split_at = i
                break

    if split_at is not None:
        if split_at - 1 >= 1 and _is_ordinal(words[split_at - 1]):
            split_at -= 1
        return " ".join(words[:split_at]), " ".join(words[split_at:])

    half = len(words) // 2
    if len(words) % 2 == 0 and words[:half] == words[half:]:
        return " ".join(words[:half]), " ".join(words[half:])

    return " ".join(words[:-1]), words[-1]


def parse_table_line(line: str) -> BookEntry | None:
    """Parse one text-table line into a BookEntry.

    Returns None for blank lines, comments and malformed lines (no leading
    integer, or nothing after it).
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or stripped.startswith("//"):
        return None

    head, *rest = stripped.split(None, 1)
    remainder = rest[0] if rest else ""
    try:
        number = int(head)
    except ValueError:
        logger.debug(f"Skipping localization line without book number: {line!r}")
        return None

    segments = remainder.split(",")
    run = segments[0].strip()
    if not run:
        logger.debug(f"Skipping localization line without names: {line!r}")
        return None

    name, first_abbreviation = split_name_and_abbreviation(run)
    abbreviations = [first_abbreviation]
    abbreviations.extend(s.strip() for s in segments[1:] if s.strip())
    return BookEntry(number=number, name=name, abbreviations=abbreviations)


class Localization:
    """Replaceable book localization table.

    Every load_* call replaces the whole table. The lookup state is
    rebuilt off to the side and installed with a single assignment, so an
    individual lookup sees either the old or the new table.
    """

    def __init__(self, entries: Iterable[BookEntry] | None = None):
        """Initialize with the given entries, or the built-in table if None."""
        self._index = _Index({}, {}, {})
        if entries is None:
            self.load_default()
        else:
            self._install(entries)

    @classmethod
    def default(cls) -> "Localization":
        """Create a table holding the built-in 66-book localization."""
        return cls()

    @classmethod
    def from_text(cls, text: str | Iterable[str]) -> "Localization":
        """Create a table from text-table content."""
        table = cls(entries=[])
        table.load_from_text(text)
        return table

    @classmethod
    def from_file(cls, path: str | Path) -> "Localization":
        """Create a table from a text-table file."""
        table = cls(entries=[])
        table.load_from_file(path)
        return table

    def _install(self, entries: Iterable[BookEntry]) -> None:
        by_number: dict[int, BookEntry] = {}
        for entry in entries:
            by_number.setdefault(entry.number, entry)

        by_name: dict[str, int] = {}
        by_abbreviation: dict[str, int] = {}
        for number, entry in by_number.items():
            by_name.setdefault(entry.name.lower(), number)
            for abbreviation in entry.abbreviations:
                key = abbreviation.lower()
                by_abbreviation.setdefault(key, number)
                by_abbreviation.setdefault(key.replace(".", ""), number)

        self._index = _Index(by_number, by_name, by_abbreviation)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_default(self) -> None:
        """Replace the table with the built-in 66-book localization."""
        self._install(
            BookEntry(number, name, list(abbreviations))
            for number, name, abbreviations in DEFAULT_BOOKS
        )

    def load_from_text(self, text: str | Iterable[str]) -> None:
        """Replace the table with entries parsed from text-table lines.

        Args:
            text: Whole table as one string, or an iterable of lines
        """
        lines = text.splitlines() if isinstance(text, str) else text
        entries = [entry for entry in map(parse_table_line, lines) if entry]
        self._install(entries)
        logger.debug(f"Loaded localization table with {len(entries)} books")

    def load_from_file(self, path: str | Path) -> None:
        """Replace the table with the contents of a text-table file.

        Raises:
            NotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(path, what="Localization file")
        self.load_from_text(path.read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, name_or_abbreviation: str) -> int | None:
        """Resolve a full name or abbreviation to a book number."""
        index = self._index
        key = name_or_abbreviation.strip().lower()
        if key in index.by_name:
            return index.by_name[key]
        return index.by_abbreviation.get(key)

    def book_name(self, number: int) -> str | None:
        """Full name for a book number."""
        entry = self._index.entries.get(number)
        return entry.name if entry else None

    def book_abbreviation(self, number: int) -> str | None:
        """Primary abbreviation for a book number."""
        entry = self._index.entries.get(number)
        return entry.abbreviation if entry else None

    def abbreviations(self, number: int) -> list[str]:
        """All abbreviations registered for a book number, in order."""
        entry = self._index.entries.get(number)
        return list(entry.abbreviations) if entry else []

    @property
    def entries(self) -> list[BookEntry]:
        """Entries sorted by book number."""
        return [self._index.entries[n] for n in sorted(self._index.entries)]

    def __len__(self) -> int:
        return len(self._index.entries)

    def __contains__(self, number: object) -> bool:
        return number in self._index.entries

    def copy(self) -> "Localization":
        """Independent copy of this table."""
        return Localization(
            BookEntry(e.number, e.name, list(e.abbreviations)) for e in self.entries
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """Render the table in text-table form, inverse of load_from_text()."""
        lines = list(SERIALIZED_HEADER)
        lines.extend(entry.to_line() for entry in self.entries)
        return "\n".join(lines) + "\n"


# ----------------------------------------------------------------------
# Process-wide default table
# ----------------------------------------------------------------------

_default_table: Localization | None = None


def get_default_localization() -> Localization:
    """Process-wide default table that new Bibles copy from."""
    global _default_table
    if _default_table is None:
        _default_table = Localization()
    return _default_table


def set_default_localization(table: Localization) -> None:
    """Replace the process-wide default table.

    Callers loading concurrently must serialize calls to this themselves.
    """
    global _default_table
    _default_table = table


def reset_default_localization() -> None:
    """Restore the built-in table as the process-wide default."""
    set_default_localization(Localization())
