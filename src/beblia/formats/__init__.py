"""Bible source formats.

Public API:
    Detection:
        detect(header) -> SourceFormat
        detect_stream(stream) -> SourceFormat

    Binary (.beblia):
        decode(stream) -> Bible
        encode(bible, stream)

    Markup (XML):
        parse_string(content) -> Bible
        parse_stream(stream) -> Bible
"""

from beblia.formats.detect import (
    CURRENT_VERSION,
    HEADER_SIZE,
    MAGIC,
    SUPPORTED_VERSIONS,
    SourceFormat,
    detect,
    detect_stream,
)
from beblia.formats.binary import decode, encode, dumps, loads
from beblia.formats.markup import parse_stream, parse_string

__all__ = [
    # Detection
    "CURRENT_VERSION",
    "HEADER_SIZE",
    "MAGIC",
    "SUPPORTED_VERSIONS",
    "SourceFormat",
    "detect",
    "detect_stream",
    # Binary
    "decode",
    "encode",
    "dumps",
    "loads",
    # Markup
    "parse_stream",
    "parse_string",
]
