"""Strings catalog feature settings."""

import json
from typing import Any, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class StringsSettings(FeatureSettings):
    """Configuration for parsing `.strings` catalogs.

    Environment Variables:
        STRINGS_KEY_SEPARATOR: Separator used to split a flat key into its
            hierarchical path (default: ".")
        STRINGS_FILE_EXTENSIONS: JSON list of file
            extensions picked up when a directory is scanned
            (default: [".strings"])

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        separator = settings.strings.key_separator
        ```
    """

    key_separator: str = Field(
        default=".",
        alias="STRINGS_KEY_SEPARATOR",
        description="Separator splitting a key into its structured path",
    )
    file_extensions: list[str] = Field(
        default_factory=lambda: [".strings"],
        alias="STRINGS_FILE_EXTENSIONS",
        description="File extensions treated as strings catalogs",
    )

    @field_validator("file_extensions", mode="before")
    @classmethod
    def _parse_extensions(cls, v: Optional[Any]) -> Any:
        """Parse STRINGS_FILE_EXTENSIONS from JSON, CSV, or list."""
        if v is None:
            return [".strings"]
        if isinstance(v, str):
            value = v.strip()
            if value.startswith("["):
                v = json.loads(value)
            else:
                v = [part.strip() for part in value.split(",") if part.strip()]
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]
