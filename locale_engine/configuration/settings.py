"""locale-engine configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from locale_engine.configuration.i18n import TranslationSettings


class Settings(BaseSettings):
    """locale-engine configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name; "production" switches
            logging to JSON output

    Example:
        ```python
        from locale_engine.configuration import settings

        directory = settings.i18n.translations_dir

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: TranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": TranslationSettings,
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
