"""Book name localization.

Public API:
    Localization: replaceable number <-> name/abbreviation table
    BookEntry: one row of a table
    parse_table_line(line) -> BookEntry | None
    get_default_localization() / set_default_localization(table)
"""

from beblia.localization.table import (
    BookEntry,
    Localization,
    get_default_localization,
    parse_table_line,
    reset_default_localization,
    set_default_localization,
    split_name_and_abbreviation,
)

__all__ = [
    "BookEntry",
    "Localization",
    "get_default_localization",
    "parse_table_line",
    "reset_default_localization",
    "set_default_localization",
    "split_name_and_abbreviation",
]
