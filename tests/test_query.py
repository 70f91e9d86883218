"""Tests for quick reference lookup."""

from __future__ import annotations

import pytest

from beblia import query
from beblia.localization import Localization
from beblia.query import parse_reference, parse_verse_spec


class TestParseVerseSpec:
    """Tests for parse_verse_spec()."""

    def test_single(self):
        assert parse_verse_spec("16") == [(16, 16)]

    def test_range(self):
        assert parse_verse_spec("16-18") == [(16, 18)]

    def test_mixed_list_keeps_order(self):
        assert parse_verse_spec("5,1,3-4") == [(5, 5), (1, 1), (3, 4)]

    def test_duplicates_kept(self):
        assert parse_verse_spec("1,1-2") == [(1, 1), (1, 2)]

    def test_reversed_range_is_dropped(self):
        assert parse_verse_spec("6-5") == []
        assert parse_verse_spec("6-5,1") == [(1, 1)]

    def test_junk_items_skipped(self):
        assert parse_verse_spec("a,2,1-b,1-2-3, 4 ") == [(2, 2), (4, 4)]

    def test_huge_range_is_not_expanded(self):
        assert parse_verse_spec("1-20000000") == [(1, 20000000)]


class TestParseReference:
    """Tests for parse_reference()."""

    def test_multi_word_book(self):
        ref = parse_reference("1 Samuel 3:10", Localization())
        assert ref.book_number == 9
        assert ref.chapter == 3
        assert ref.verse_ranges == [(10, 10)]

    def test_song_of_solomon(self):
        ref = parse_reference("Song of Solomon 2:1-2", Localization())
        assert ref.book_number == 22
        assert ref.verse_ranges == [(1, 2)]

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "John",
            "John3:16",
            "Nonesuch 1:1",
            "John 3",
            "John 3:16:1",
            "John x:16",
        ],
    )
    def test_invalid_references(self, text):
        assert parse_reference(text, Localization()) is None


class TestQuery:
    """Tests for query() against the sample Bible."""

    def test_single_verse(self, sample_bible):
        verses = query(sample_bible, "JN 3:16")
        assert len(verses) == 1
        assert verses[0].text == "For God so loved the world."

    def test_list_and_range(self, sample_bible):
        verses = query(sample_bible, "JN 3:1,4,5-6")
        assert [v.number for v in verses] == [1, 4, 5, 6]

    def test_full_name_case_insensitive(self, sample_bible):
        verses = query(sample_bible, "john 3:1-2")
        assert [v.number for v in verses] == [1, 2]

    def test_surrounding_whitespace(self, sample_bible):
        assert len(query(sample_bible, "  Jn. 3:16  ")) == 1

    def test_numbered_book(self, sample_bible):
        verses = query(sample_bible, "1 Sam. 3:10")
        assert verses[0].text == "Speak; for thy servant heareth."

    def test_unknown_book(self, sample_bible):
        assert query(sample_bible, "Nonesuch 1:1") == []

    def test_blank(self, sample_bible):
        assert query(sample_bible, "") == []

    def test_missing_verses_skipped(self, sample_bible):
        verses = query(sample_bible, "JN 3:5-8,16")
        assert [v.number for v in verses] == [5, 6, 16]

    def test_missing_chapter(self, sample_bible):
        assert query(sample_bible, "JN 4:1") == []

    def test_book_not_in_bible(self, sample_bible):
        assert query(sample_bible, "Revelation 1:1") == []

    def test_duplicates_preserved(self, sample_bible):
        verses = query(sample_bible, "JN 3:16,16")
        assert [v.number for v in verses] == [16, 16]

    def test_uses_bible_localization(self, sample_bible):
        sample_bible.localization = Localization.from_text("43 Jean Jn.")
        assert [v.number for v in query(sample_bible, "Jean 3:16")] == [16]
        assert query(sample_bible, "John 3:16") == []

    def test_bible_query_method(self, sample_bible):
        assert sample_bible.query("Mt 1:1")[0].number == 1

    def test_huge_range_end(self, sample_bible):
        verses = query(sample_bible, "JN 3:1-20000000")
        assert [v.number for v in verses] == [1, 2, 3, 4, 5, 6, 16, 17, 18]

    def test_range_past_chapter_end(self, sample_bible):
        verses = query(sample_bible, "JN 3:17-2147483647,16")
        assert [v.number for v in verses] == [17, 18, 16]

    def test_overlapping_ranges_repeat_verses(self, sample_bible):
        verses = query(sample_bible, "JN 3:5-6,6-16")
        assert [v.number for v in verses] == [5, 6, 6, 16]
