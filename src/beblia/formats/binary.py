"""Binary .beblia codec.

Wire layout (integers little-endian int32, strings as a 7-bit
variable-length byte count followed by UTF-8 bytes):

    "BEBLIA"                    string (the 0x06 prefix is part of the magic)
    version                     byte, 1 or 2
    translation                 string ("" when absent)
    status                      string ("" when absent)
    localization                string, version 2 only (text-table form)
    testament count             int32
      testament                 version 2: kind int32 (Old=0, New=1)
                                version 1: display name string
      book count                int32
        number, chapter count   int32, int32
          number, verse count   int32, int32
            number, text        int32, string

Reading accepts both versions; writing always emits CURRENT_VERSION.
"""

from __future__ import annotations

import io
import logging
import struct
from typing import BinaryIO

from beblia.errors import FormatError
from beblia.formats.detect import CURRENT_VERSION, MAGIC, SUPPORTED_VERSIONS
from beblia.model import Bible, Book, Chapter, Testament, TestamentKind, Verse

logger = logging.getLogger(__name__)

_INT32 = struct.Struct("<i")


class BinaryReader:
    """Primitive reads over a byte stream, failing on truncation."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def read_exact(self, size: int) -> bytes:
        data = self._stream.read(size)
        if len(data) != size:
            raise FormatError(
                f"Unexpected end of binary data: wanted {size} bytes, got {len(data)}"
            )
        return data

    def read_byte(self) -> int:
        return self.read_exact(1)[0]

    def read_int32(self) -> int:
        return _INT32.unpack(self.read_exact(4))[0]

    def read_count(self, what: str) -> int:
        count = self.read_int32()
        if count < 0:
            raise FormatError(f"Negative {what} count in binary data: {count}")
        return count

    def read_length(self) -> int:
        """Read a 7-bit encoded length prefix (at most 5 bytes)."""
        result = 0
        for shift in range(0, 35, 7):
            byte = self.read_byte()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
        raise FormatError("Malformed string length prefix in binary data")

    def read_string(self) -> str:
        raw = self.read_exact(self.read_length())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"Invalid UTF-8 string in binary data: {e}") from e


class BinaryWriter:
    """Primitive writes matching BinaryReader."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def write_byte(self, value: int) -> None:
        self._stream.write(bytes((value,)))

    def write_int32(self, value: int) -> None:
        try:
            self._stream.write(_INT32.pack(value))
        except struct.error as e:
            raise FormatError(f"Value does not fit in int32: {value!r}") from e

    def write_length(self, value: int) -> None:
        while value >= 0x80:
            self.write_byte((value & 0x7F) | 0x80)
            value >>= 7
        self.write_byte(value)

    def write_string(self, value: str) -> None:
        raw = value.encode("utf-8")
        self.write_length(len(raw))
        self._stream.write(raw)


def _read_testament(reader: BinaryReader, version: int) -> Testament:
    if version == 1:
        kind = TestamentKind.from_display_name(reader.read_string())
    else:
        raw_kind = reader.read_int32()
        try:
            kind = TestamentKind(raw_kind)
        except ValueError:
            raise FormatError(f"Unknown testament kind in binary data: {raw_kind}")

    testament = Testament(kind=kind)
    for _ in range(reader.read_count("book")):
        book = Book(number=reader.read_int32())
        for _ in range(reader.read_count("chapter")):
            chapter = Chapter(number=reader.read_int32())
            for _ in range(reader.read_count("verse")):
                number = reader.read_int32()
                chapter.verses.append(Verse(number=number, text=reader.read_string()))
            book.chapters.append(chapter)
        testament.books.append(book)
    return testament


def decode(stream: BinaryIO) -> Bible:
    """Decode a binary Bible from a stream positioned at the magic header.

    Raises:
        FormatError: On a bad header, unsupported version or truncated data
    """
    reader = BinaryReader(stream)

    magic = reader.read_string()
    if magic != MAGIC:
        raise FormatError(f"Invalid binary format: missing {MAGIC} header")

    version = reader.read_byte()
    if version not in SUPPORTED_VERSIONS:
        raise FormatError(
            f"Unsupported binary format version: {version}", version=version
        )

    bible = Bible(translation=reader.read_string(), status=reader.read_string())

    # Install the embedded table before anything can ask for a book name
    if version >= 2:
        localization_text = reader.read_string()
        if localization_text:
            bible.localization.load_from_text(localization_text)
            logger.debug(
                f"Installed embedded localization ({len(bible.localization)} books)"
            )

    for _ in range(reader.read_count("testament")):
        bible.testaments.append(_read_testament(reader, version))

    logger.debug(
        f"Decoded binary v{version}: {len(bible.books())} books, "
        f"{bible.verse_count} verses"
    )
    return bible


def encode(bible: Bible, stream: BinaryIO) -> None:
    """Write a Bible to a stream in the current binary layout."""
    writer = BinaryWriter(stream)

    writer.write_string(MAGIC)
    writer.write_byte(CURRENT_VERSION)
    writer.write_string(bible.translation or "")
    writer.write_string(bible.status or "")
    writer.write_string(bible.localization.serialize())

    writer.write_int32(len(bible.testaments))
    for testament in bible.testaments:
        writer.write_int32(int(testament.kind))
        writer.write_int32(len(testament.books))
        for book in testament.books:
            writer.write_int32(book.number)
            writer.write_int32(len(book.chapters))
            for chapter in book.chapters:
                writer.write_int32(chapter.number)
                writer.write_int32(len(chapter.verses))
                for verse in chapter.verses:
                    writer.write_int32(verse.number)
                    writer.write_string(verse.text or "")


def dumps(bible: Bible) -> bytes:
    """Encode a Bible to bytes."""
    buffer = io.BytesIO()
    encode(bible, buffer)
    return buffer.getvalue()


def loads(data: bytes) -> Bible:
    """Decode a Bible from bytes."""
    return decode(io.BytesIO(data))
