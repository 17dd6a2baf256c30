"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the strings
catalog tooling using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    StringsSettings: Strings feature settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    separator = settings.strings.key_separator
    extensions = settings.strings.file_extensions
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import StringsSettings

__all__ = ["Settings", "StringsSettings", "settings"]
