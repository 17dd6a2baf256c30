"""Strings catalog models.

Defines the entries extracted from a `.strings` catalog and the file-level
catalog that groups them.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from modules.strings.placeholders import PlaceholderType, parse_placeholders


def split_key(key: str, separator: str) -> tuple[str, ...]:
    """Split a flat key into its structured path.

    Empty segments are dropped, so ``"alert..title"`` and ``".alert.title"``
    both give ``("alert", "title")``.

    Args:
        key: Flat translation key.
        separator: Key-structure separator. An empty separator disables
            splitting.

    Returns:
        Tuple of path segments; ``(key,)`` if nothing is left after splitting.
    """
    if not separator:
        return (key,)
    segments = tuple(part for part in key.split(separator) if part)
    return segments or (key,)


@dataclass(frozen=True)
class Entry:
    """One localization key and its metadata.

    Attributes:
        key: Translation key, unique within its catalog.
        translation: Raw translated text.
        comment: Developer comment recovered from the catalog text, if any.
        key_structure: Key split on the key-structure separator.
        placeholders: Placeholder types found in the translation.
    """

    key: str
    translation: str
    comment: Optional[str] = None
    key_structure: tuple[str, ...] = ()
    placeholders: tuple[PlaceholderType, ...] = ()

    def __post_init__(self):
        if not self.key:
            raise ValueError("Translation key must not be empty")

    @classmethod
    def create(
        cls,
        key: str,
        translation: str,
        key_structure_separator: str,
        comment: Optional[str] = None,
    ) -> "Entry":
        """Build an entry, deriving its key structure and placeholders.

        Args:
            key: Translation key.
            translation: Translated text.
            key_structure_separator: Separator for the structured key path.
            comment: Optional developer comment.

        Returns:
            Entry instance.

        Raises:
            ValueError: If the key is empty.
            InvalidPlaceholderError: If the translation mixes placeholder types.
        """
        return cls(
            key=key,
            translation=translation,
            comment=comment,
            key_structure=split_key(key, key_structure_separator),
            placeholders=parse_placeholders(translation),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the entry to JSON-compatible data."""
        return {
            "key": self.key,
            "translation": self.translation,
            "comment": self.comment,
            "key_structure": list(self.key_structure),
            "placeholders": [placeholder.value for placeholder in self.placeholders],
        }


@dataclass(frozen=True)
class Catalog:
    """Entries parsed from one catalog file.

    Attributes:
        path: Path of the catalog file.
        entries: One entry per decoded key, in no particular order unless
            ``sorted()`` was applied.
    """

    path: Path
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        """Table name of the catalog (e.g. "Localizable")."""
        return self.path.stem

    @property
    def keys(self) -> frozenset[str]:
        """Set of keys present in the catalog."""
        return frozenset(entry.key for entry in self.entries)

    def get(self, key: str) -> Optional[Entry]:
        """Return the entry for ``key``, or None if the catalog lacks it."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def sorted(self) -> "Catalog":
        """Return a copy of the catalog with entries ordered by key."""
        return Catalog(
            path=self.path,
            entries=tuple(sorted(self.entries, key=lambda entry: entry.key)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the catalog to JSON-compatible data."""
        return {
            "table": self.name,
            "path": str(self.path),
            "entries": [entry.to_dict() for entry in self.entries],
        }
