"""Parser options consumed from configuration."""

from dataclasses import dataclass
from typing import Optional

from infrastructure.configuration.features import StringsSettings
from infrastructure.services.providers import get_settings


@dataclass(frozen=True)
class ParserOptions:
    """Options passed to the strings file parser.

    Attributes:
        separator: Key-structure separator handed to entry construction.
    """

    separator: str = "."

    @classmethod
    def from_settings(cls, settings: Optional[StringsSettings] = None) -> "ParserOptions":
        """Build options from the strings feature settings.

        Args:
            settings: Settings to read; defaults to the application settings.

        Returns:
            ParserOptions instance.
        """
        if settings is None:
            settings = get_settings().strings
        return cls(separator=settings.key_separator)
