"""Errors raised while parsing strings catalogs.

Every fatal error carries the path of the catalog it was raised for. The
comment scan pass has no error type: its failures are reported as an
``OperationResult`` and absorbed before entries are merged.
"""

from os import PathLike
from pathlib import Path
from typing import Union


class ParserError(Exception):
    """Base class for fatal catalog parsing errors.

    Attributes:
        path: Path of the catalog that failed to parse.
        reason: Human-friendly description of the failure.
    """

    def __init__(self, path: Union[str, PathLike], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class CatalogLoadError(ParserError):
    """The catalog file could not be read."""

    def __init__(self, path: Union[str, PathLike], reason: str = "unable to read file"):
        super().__init__(path, reason)


class CatalogDecodeError(ParserError):
    """The catalog bytes are not a string-to-string property list."""


class InvalidEntryError(ParserError):
    """A decoded key/translation pair could not be turned into an entry."""

    def __init__(self, path: Union[str, PathLike], key: str, reason: str):
        self.key = key
        super().__init__(path, f"invalid entry {key!r}: {reason}")


class InvalidPlaceholderError(ValueError):
    """A translation mixes placeholder types at the same position."""

    def __init__(self, position: int, first: str, second: str):
        self.position = position
        super().__init__(
            f"placeholder {position} is used as both {first!r} and {second!r}"
        )
