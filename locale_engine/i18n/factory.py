"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from the
application settings.
"""

from pathlib import Path
from typing import Optional, Union

from locale_engine.configuration import settings
from locale_engine.i18n.grouped import GroupedTranslator
from locale_engine.i18n.models import LanguageCode
from locale_engine.i18n.reporting import DiagnosticReporter
from locale_engine.i18n.translator import Translator
from locale_engine.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Union[str, Path]] = None,
    fallback_language: Optional[LanguageCode] = None,
    not_found_message: Optional[str] = None,
    debug: Optional[bool] = None,
    preload: bool = True,
    reporter: Optional[DiagnosticReporter] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are taken from settings.i18n.

    Args:
        translations_dir: Directory of resource files (default: I18N_TRANSLATIONS_DIR)
        fallback_language: Fallback language (default: I18N_FALLBACK_LANGUAGE)
        not_found_message: Not-found text (default: I18N_NOT_FOUND_MESSAGE)
        debug: Report successful resolutions (default: I18N_DEBUG)
        preload: Whether to load the directory immediately (default: True)
        reporter: Diagnostic sink (default: StructlogReporter)

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use settings
        translator = create_translator()

        # Custom directory
        translator = create_translator(translations_dir=Path("/custom/locales"))

        # Load later
        translator = create_translator(preload=False)
        translator.set_directory("/custom/locales")
    """
    config = settings.i18n
    translations_dir = translations_dir or config.translations_dir

    translator = Translator(
        fallback_language=fallback_language or config.fallback_language,
        not_found_message=(
            not_found_message
            if not_found_message is not None
            else config.not_found_message
        ),
        debug=debug if debug is not None else config.debug,
        reporter=reporter,
    )

    if preload:
        translator.set_directory(translations_dir)
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            language_count=len(translator.get_available_languages()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator


def create_grouped_translator(
    language: LanguageCode,
    group: Optional[str] = None,
    translations_dir: Optional[Union[str, Path]] = None,
    fallback_language: Optional[LanguageCode] = None,
    not_found_message: Optional[str] = None,
    debug: Optional[bool] = None,
    reporter: Optional[DiagnosticReporter] = None,
) -> GroupedTranslator:
    """Create a GroupedTranslator for one language and group.

    Arguments left as None are taken from settings.i18n.

    Args:
        language: Active language code
        group: Active translation group (default: unset)
        translations_dir: Directory of resource files (default: I18N_TRANSLATIONS_DIR)
        fallback_language: Fallback language (default: I18N_FALLBACK_LANGUAGE)
        not_found_message: Not-found text (default: I18N_NOT_FOUND_MESSAGE)
        debug: Report successful resolutions (default: I18N_DEBUG)
        reporter: Diagnostic sink (default: StructlogReporter)

    Returns:
        GroupedTranslator: Configured translator instance
    """
    config = settings.i18n
    return GroupedTranslator(
        language,
        fallback_language=fallback_language or config.fallback_language,
        directory=translations_dir or config.translations_dir,
        group=group,
        not_found_message=(
            not_found_message
            if not_found_message is not None
            else config.not_found_message
        ),
        debug=debug if debug is not None else config.debug,
        reporter=reporter,
    )
