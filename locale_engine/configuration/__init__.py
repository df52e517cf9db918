"""Configuration module - public API.

Centralized configuration for locale-engine using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Translation lookup settings class

Example:
    ```python
    from locale_engine.configuration import settings

    directory = settings.i18n.translations_dir
    fallback = settings.i18n.fallback_language

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from locale_engine.configuration.i18n import TranslationSettings
from locale_engine.configuration.settings import Settings, settings

__all__ = ["Settings", "TranslationSettings", "settings"]
