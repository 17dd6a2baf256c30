"""Feature module settings."""

from infrastructure.configuration.features.strings import StringsSettings

__all__ = ["StringsSettings"]
