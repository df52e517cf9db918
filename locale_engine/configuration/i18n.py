"""Translation lookup settings."""

from typing import Optional

from pydantic import Field, field_validator

from locale_engine.configuration.base import SectionSettings


class TranslationSettings(SectionSettings):
    """Translation lookup configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding one resource file per language
        I18N_FALLBACK_LANGUAGE: Language consulted when a lookup fails (default: en)
        I18N_NOT_FOUND_MESSAGE: Text returned when nothing resolves
            (default: unset, the requested key is returned)
        I18N_DEBUG: Report every successful resolution (default: False)

    Example:
        ```python
        from locale_engine.configuration import settings

        translator = Translator(
            directory=settings.i18n.translations_dir,
            fallback_language=settings.i18n.fallback_language,
        )
        ```
    """

    translations_dir: str = Field(
        default="./locales",
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing <language>.<ext> resource files",
    )
    fallback_language: str = Field(
        default="en",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Language consulted once when a lookup fails",
    )
    not_found_message: Optional[str] = Field(
        default=None,
        alias="I18N_NOT_FOUND_MESSAGE",
        description="Text returned when neither language resolves the key",
    )
    debug: bool = Field(
        default=False,
        alias="I18N_DEBUG",
        description="Report every successful resolution to the diagnostic sink",
    )

    @field_validator("fallback_language")
    @classmethod
    def validate_fallback_language(cls, value: str) -> str:
        """Reject a blank fallback language."""
        value = value.strip()
        if not value:
            raise ValueError("I18N_FALLBACK_LANGUAGE must not be empty")
        return value
