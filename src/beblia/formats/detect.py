"""Format sniffing for Bible sources.

A binary .beblia file starts with an 8-byte header:

    0x06 'B' 'E' 'B' 'L' 'I' 'A' <version>

The first byte is the length prefix of the string "BEBLIA". Anything
that does not carry this header is treated as markup.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import BinaryIO

from beblia.errors import FormatError

logger = logging.getLogger(__name__)

MAGIC = "BEBLIA"
HEADER_SIZE = 8
SUPPORTED_VERSIONS = (1, 2)
CURRENT_VERSION = 2


class SourceFormat(Enum):
    """Detected source format."""

    BINARY = "binary"
    MARKUP = "markup"


def detect(header: bytes) -> SourceFormat:
    """Classify a source by its leading bytes.

    Args:
        header: At least the first 8 bytes of the source (shorter input is
            never binary)

    Returns:
        SourceFormat.BINARY if the magic header and a supported version tag
        are present, SourceFormat.MARKUP otherwise
    """
    if (
        len(header) >= HEADER_SIZE
        and header[0] == len(MAGIC)
        and header[1:7] == MAGIC.encode("ascii")
        and header[7] in SUPPORTED_VERSIONS
    ):
        return SourceFormat.BINARY
    return SourceFormat.MARKUP


def peek_header(stream: BinaryIO) -> bytes:
    """Read the header bytes and restore the stream position.

    Raises:
        FormatError: If the stream cannot seek back
    """
    if not stream.seekable():
        raise FormatError("Cannot detect format: stream must be seekable")
    position = stream.tell()
    try:
        return stream.read(HEADER_SIZE)
    finally:
        stream.seek(position)


def detect_stream(stream: BinaryIO) -> SourceFormat:
    """Detect the format of a seekable stream without consuming it."""
    source_format = detect(peek_header(stream))
    logger.debug(f"Detected source format: {source_format.value}")
    return source_format
