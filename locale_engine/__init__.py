"""locale-engine - localization lookup with fallback and interpolation."""

from locale_engine.i18n import (
    GroupedTranslator,
    ResolutionResult,
    ResolutionStatus,
    ResourceStore,
    Translator,
    create_grouped_translator,
    create_translator,
    interpolate,
)

__version__ = "0.1.0"

__all__ = [
    "GroupedTranslator",
    "ResolutionResult",
    "ResolutionStatus",
    "ResourceStore",
    "Translator",
    "create_grouped_translator",
    "create_translator",
    "interpolate",
]
