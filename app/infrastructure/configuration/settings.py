"""Strings catalog configuration settings - main aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import StringsSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: Log renderer, 'console' or 'json'

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        separator = settings.strings.key_separator
        if settings.is_json_logging:
            ...
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="console", pattern="^(console|json)$")

    # Feature settings
    strings: StringsSettings

    @property
    def is_json_logging(self) -> bool:
        """Check whether logs are rendered as JSON lines.

        Returns:
            True if LOG_FORMAT is 'json', False otherwise.
        """
        return self.LOG_FORMAT == "json"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "strings": StringsSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
