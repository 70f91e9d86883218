"""Parse Bible XML documents into the in-memory tree.

Expected format:
    <bible translation="English KJV" status="Public Domain">
      <testament name="Old">
        <book number="1">
          <chapter number="1">
            <verse number="1">In the beginning ...</verse>
          </chapter>
        </book>
      </testament>
    </bible>

Numeric attributes that are missing, not plain integers, or outside the
int32 range read as 0. Verse text is taken verbatim, without trimming.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import BinaryIO

from beblia.errors import FormatError
from beblia.model import Bible, Book, Chapter, Testament, TestamentKind, Verse

ROOT_ELEMENT = "bible"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+\Z")


def _local_name(tag: str) -> str:
    """Strip a "{namespace}" prefix from an element tag."""
    return tag.rpartition("}")[2]


def _number(element: ET.Element) -> int:
    value = element.get("number", "").strip()
    if not _INTEGER.match(value):
        return 0
    number = int(value)
    return number if INT32_MIN <= number <= INT32_MAX else 0


def parse_element(root: ET.Element) -> Bible:
    """Build a Bible from a parsed <bible> element.

    Raises:
        FormatError: If the root element is not <bible>
    """
    if _local_name(root.tag) != ROOT_ELEMENT:
        raise FormatError(
            f"XML root element is not <{ROOT_ELEMENT}>: found <{_local_name(root.tag)}>"
        )

    bible = Bible(translation=root.get("translation"), status=root.get("status"))

    for testament_elem in root.findall("testament"):
        testament = Testament(kind=TestamentKind.from_name(testament_elem.get("name")))

        for book_elem in testament_elem.findall("book"):
            book = Book(number=_number(book_elem))

            for chapter_elem in book_elem.findall("chapter"):
                chapter = Chapter(number=_number(chapter_elem))

                for verse_elem in chapter_elem.findall("verse"):
                    chapter.verses.append(
                        Verse(
                            number=_number(verse_elem),
                            text="".join(verse_elem.itertext()),
                        )
                    )
                book.chapters.append(chapter)
            testament.books.append(book)
        bible.testaments.append(testament)

    return bible


def parse_string(content: str | bytes) -> Bible:
    """Parse a Bible from an XML string.

    Raises:
        FormatError: If the content is not well-formed or has the wrong root
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise FormatError(f"Failed to parse Bible XML: {e}") from e
    return parse_element(root)


def parse_stream(stream: BinaryIO) -> Bible:
    """Parse a Bible from a binary stream holding XML.

    Raises:
        FormatError: If the content is not well-formed or has the wrong root
    """
    try:
        tree = ET.parse(stream)
    except ET.ParseError as e:
        raise FormatError(
            f"Failed to parse stream as XML or binary Bible: {e}"
        ) from e
    return parse_element(tree.getroot())
