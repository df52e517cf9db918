"""i18n system - translation lookup with fallback and interpolation.

Loads per-language resource files, resolves dotted keys against them,
falls back to a single fallback language, and interpolates {name}
placeholders.

Main components:
- models: LanguageCode, ResourceTree, ResourceStore, KeyPath
- loader: ResourceLoader (eager load_all, lazy load_group)
- resolver: navigate() and Resolver with single-hop fallback
- interpolation: interpolate()
- translator: Translator over all languages of a directory
- grouped: GroupedTranslator scoped to one language and group
- negotiation: Accept-Language parsing and LanguageNegotiator
"""

from locale_engine.i18n.errors import FailureReason, I18nError, LoadFailure
from locale_engine.i18n.factory import create_grouped_translator, create_translator
from locale_engine.i18n.grouped import GroupedTranslator
from locale_engine.i18n.interpolation import interpolate
from locale_engine.i18n.loader import ResourceLoader
from locale_engine.i18n.models import KeyPath, LanguageCode, ResourceStore, ResourceTree
from locale_engine.i18n.negotiation import LanguageNegotiator, parse_accept_language
from locale_engine.i18n.reporting import DiagnosticReporter, StructlogReporter
from locale_engine.i18n.resolver import Resolver, navigate
from locale_engine.i18n.result import ResolutionResult, ResolutionStatus
from locale_engine.i18n.sources import DirectorySource, ResourceSource
from locale_engine.i18n.translator import Translator

__all__ = [
    "DiagnosticReporter",
    "DirectorySource",
    "FailureReason",
    "GroupedTranslator",
    "I18nError",
    "KeyPath",
    "LanguageCode",
    "LanguageNegotiator",
    "LoadFailure",
    "ResolutionResult",
    "ResolutionStatus",
    "ResourceLoader",
    "ResourceSource",
    "ResourceStore",
    "ResourceTree",
    "Resolver",
    "StructlogReporter",
    "Translator",
    "create_grouped_translator",
    "create_translator",
    "interpolate",
    "navigate",
    "parse_accept_language",
]
