"""Load and save Bibles.

load() sniffs the first bytes of the source and dispatches to the binary
decoder or the XML parser. save() always writes the current binary
version.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from beblia.errors import NotFoundError
from beblia.formats import binary, markup
from beblia.formats.detect import SourceFormat, detect_stream
from beblia.model import Bible

logger = logging.getLogger(__name__)

PathOrStream = Union[str, Path, BinaryIO]


def _is_path(source: PathOrStream) -> bool:
    return isinstance(source, (str, Path))


def load_stream(stream: BinaryIO) -> Bible:
    """Load a Bible from a seekable binary stream, detecting the format.

    Raises:
        FormatError: If the stream is neither valid binary nor valid XML,
            or cannot seek
    """
    if detect_stream(stream) is SourceFormat.BINARY:
        return binary.decode(stream)
    return markup.parse_stream(stream)


def load(source: PathOrStream) -> Bible:
    """Load a Bible from a file path or stream, detecting the format.

    Args:
        source: Path to a .xml or .beblia file, or a seekable binary stream

    Returns:
        Fully populated Bible

    Raises:
        NotFoundError: If a path does not exist
        FormatError: If the content cannot be decoded
    """
    if not _is_path(source):
        return load_stream(source)

    path = Path(source)
    if not path.is_file():
        raise NotFoundError(path)

    with path.open("rb") as f:
        bible = load_stream(f)

    logger.info(
        f"Loaded {path}: {len(bible.books())} books, {bible.verse_count} verses"
    )
    return bible


def load_markup(content: str | bytes) -> Bible:
    """Load a Bible from an XML string.

    Raises:
        FormatError: If the content is not a well-formed <bible> document
    """
    return markup.parse_string(content)


def save(bible: Bible, target: PathOrStream) -> None:
    """Save a Bible in binary form to a file path or writable stream.

    Args:
        bible: Bible to write; its localization table is embedded
        target: Destination path (parent directories must exist) or stream
    """
    if not _is_path(target):
        binary.encode(bible, target)
        return

    path = Path(target)
    # Encode fully before touching the file so a failure leaves no partial output
    buffer = io.BytesIO()
    binary.encode(bible, buffer)
    with path.open("wb") as f:
        f.write(buffer.getvalue())

    logger.info(f"Saved {path} ({len(bible.books())} books)")
