"""Error types raised by Beblia loaders and codecs."""

from __future__ import annotations

from pathlib import Path


class BebliaError(Exception):
    """Base class for all Beblia errors."""

    pass


class NotFoundError(BebliaError, FileNotFoundError):
    """Raised when a source file does not exist."""

    def __init__(self, path: str | Path, what: str = "Bible file"):
        self.path = Path(path)
        super().__init__(f"{what} not found: {self.path}")


class FormatError(BebliaError, ValueError):
    """Raised when a source cannot be decoded as markup or binary.

    Attributes:
        version: Version tag found in a binary header, if that was the problem
    """

    def __init__(self, message: str, version: int | None = None):
        self.version = version
        super().__init__(message)


class ConfigError(BebliaError):
    """Raised when a settings file is invalid."""

    pass
