"""Translation service over eagerly loaded languages.

Loads every resource file in a directory at once and resolves keys for any
of the loaded languages, with a single fallback language.
"""

from pathlib import Path
from typing import Any, FrozenSet, Mapping, Optional, Union

from locale_engine.i18n.loader import ResourceLoader
from locale_engine.i18n.models import LanguageCode, ResourceStore, ResourceTree
from locale_engine.i18n.negotiation import LanguageNegotiator, parse_accept_language
from locale_engine.i18n.reporting import DiagnosticReporter, StructlogReporter
from locale_engine.i18n.resolver import DEFAULT_FALLBACK_LANGUAGE, Resolver
from locale_engine.i18n.result import ResolutionResult
from locale_engine.i18n.sources import DirectorySource, ResourceSource
from locale_engine.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating keys across all loaded languages.

    Every reconfiguration builds a new ResourceStore and/or Resolver and
    swaps it in whole; lookups always see one consistent snapshot. The
    translator does no locking, so callers that share one across threads
    must serialize reconfiguration against lookups.

    Attributes:
        source: ResourceSource the store was loaded from (None until set).
        fallback_language: Language consulted when a lookup fails.
        reporter: DiagnosticReporter receiving load/miss/fallback events.
    """

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        fallback_language: LanguageCode = DEFAULT_FALLBACK_LANGUAGE,
        not_found_message: Optional[str] = None,
        debug: bool = False,
        reporter: Optional[DiagnosticReporter] = None,
        source: Optional[ResourceSource] = None,
    ):
        """Initialize Translator.

        Args:
            directory: Directory of resource files; loaded immediately.
            fallback_language: Fallback language code (default: "en").
            not_found_message: Text returned when nothing resolves
                (default: the requested key).
            debug: Report every successful resolution (default: False).
            reporter: Diagnostic sink (default: StructlogReporter).
            source: ResourceSource to load instead of a directory.
        """
        self.fallback_language = fallback_language
        self.reporter = reporter or StructlogReporter()
        self._not_found_message = not_found_message
        self._debug = debug
        self.source: Optional[ResourceSource] = None
        self._store = ResourceStore.empty()
        self._resolver = self._build_resolver()

        if source is not None:
            self.set_source(source)
        elif directory is not None:
            self.set_directory(directory)

    @property
    def store(self) -> ResourceStore:
        """Current ResourceStore snapshot."""
        return self._store

    @property
    def resolver(self) -> Resolver:
        """Current Resolver."""
        return self._resolver

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def not_found_message(self) -> Optional[str]:
        return self._not_found_message

    def set_directory(self, directory: Union[str, Path]) -> None:
        """Load every resource file in a directory, replacing the store.

        Args:
            directory: Directory of <language>.<ext> files.
        """
        self.set_source(DirectorySource(directory))

    def set_source(self, source: ResourceSource) -> None:
        """Load every entry of a ResourceSource, replacing the store.

        Args:
            source: Storage to load from.
        """
        self.source = source
        self.reload()

    def reload(self) -> None:
        """Reload all languages from the current source.

        The previous store is discarded, never merged.
        """
        if self.source is None:
            self._store = ResourceStore.empty()
        else:
            self._store = ResourceLoader(self.source, self.reporter).load_all()
        self._resolver = self._build_resolver()
        logger.info(
            "reloaded_all_translations",
            source=repr(self.source),
            languages=sorted(self._store.languages),
        )

    def set_not_found_message(self, text: Optional[str]) -> None:
        """Set the text returned when nothing resolves.

        Args:
            text: Not-found text, may use {key} and {language}. None
                restores the default of returning the requested key.
        """
        self._not_found_message = text
        self._resolver = self._build_resolver()

    def set_debug_mode(self, enabled: bool) -> None:
        """Enable or disable reporting of every successful resolution."""
        self._debug = bool(enabled)
        self._resolver = self._build_resolver()

    def get_available_languages(self) -> FrozenSet[LanguageCode]:
        """Get the language codes that loaded successfully."""
        return self._store.languages

    def translate(
        self,
        language: LanguageCode,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        group: Optional[str] = None,
    ) -> str:
        """Translate a key into a language.

        Args:
            language: Requested language code.
            key: Dotted key (e.g. "errors.notFound").
            params: Placeholder values for {name} placeholders.
            group: Optional top-level group narrowing the lookup.

        Returns:
            The translated string, the fallback language's string, or the
            not-found text. Never raises.
        """
        return self._resolver.translate(language, key, params, group)

    def resolve(
        self,
        language: LanguageCode,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        group: Optional[str] = None,
    ) -> ResolutionResult:
        """Resolve a key, keeping the outcome detail.

        Returns:
            ResolutionResult with RESOLVED, FALLBACK or NOT_FOUND status.
        """
        return self._resolver.resolve(language, key, params, group)

    def has_message(
        self, language: LanguageCode, key: str, group: Optional[str] = None
    ) -> bool:
        """Check if a key resolves in a language, without fallback.

        Args:
            language: Language code to check.
            key: Dotted key.
            group: Optional top-level group.

        Returns:
            True if the key resolves to a string in that language.
        """
        quiet = Resolver(self._store, self.fallback_language, DiagnosticReporter())
        value, _ = quiet.lookup(language, key, group)
        return value is not None

    def get_resource_tree(self, language: LanguageCode) -> Optional[ResourceTree]:
        """Get the complete resource tree for a language.

        Returns:
            ResourceTree or None if the language is not loaded.
        """
        return self._store.get_tree(language)

    def negotiate(self, accept_language: Optional[str]) -> LanguageCode:
        """Pick the best loaded language for an Accept-Language header.

        Args:
            accept_language: Header value (e.g. "fr-CA,fr;q=0.9,en;q=0.5").

        Returns:
            Best matching loaded language, or the fallback language.
        """
        return LanguageNegotiator.find_best_match(
            parse_accept_language(accept_language),
            self._store.languages,
            default=self.fallback_language,
        )

    def _build_resolver(self) -> Resolver:
        return Resolver(
            self._store,
            fallback_language=self.fallback_language,
            reporter=self.reporter,
            not_found_message=self._not_found_message,
            debug=self._debug,
        )
