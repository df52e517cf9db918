"""Translation service scoped to one language and one translation group.

Loads lazily: only the active language's file is read, and only the active
group's subtree is kept. The fallback language's group is read on demand
the first time a lookup needs it.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from locale_engine.i18n.errors import FailureReason
from locale_engine.i18n.loader import ResourceLoader
from locale_engine.i18n.models import LanguageCode, ResourceStore, ResourceTree, freeze_tree
from locale_engine.i18n.reporting import DiagnosticReporter, StructlogReporter
from locale_engine.i18n.resolver import DEFAULT_FALLBACK_LANGUAGE, Resolver
from locale_engine.i18n.result import ResolutionResult
from locale_engine.i18n.sources import DirectorySource, ResourceSource
from locale_engine.logging import get_module_logger

logger = get_module_logger()

DEFAULT_DIRECTORY = "./locales"


class GroupedTranslator:
    """Translates keys within one group of the active language.

    No translations are available until a group is set; until then every
    lookup returns the not-found text. An empty group name counts as unset. Changing the language, group or
    directory reloads.

    Attributes:
        fallback_language: Language consulted when a lookup fails.
        reporter: DiagnosticReporter receiving load/miss/fallback events.
    """

    def __init__(
        self,
        language: LanguageCode,
        fallback_language: LanguageCode = DEFAULT_FALLBACK_LANGUAGE,
        directory: Union[str, Path] = DEFAULT_DIRECTORY,
        group: Optional[str] = None,
        not_found_message: Optional[str] = None,
        debug: bool = False,
        reporter: Optional[DiagnosticReporter] = None,
        source: Optional[ResourceSource] = None,
    ):
        """Initialize GroupedTranslator.

        Args:
            language: Active language code.
            fallback_language: Fallback language code (default: "en").
            directory: Directory of resource files (default: ./locales).
            group: Active translation group (default: unset).
            not_found_message: Text returned when nothing resolves
                (default: the requested key).
            debug: Report every successful resolution (default: False).
            reporter: Diagnostic sink (default: StructlogReporter).
            source: ResourceSource to read instead of the directory.
        """
        self.fallback_language = fallback_language
        self.reporter = reporter or StructlogReporter()
        self._language = language
        self._group = group
        self._source = source or DirectorySource(directory)
        self._not_found_message = not_found_message
        self._debug = debug
        self._fallback_trees: Dict[LanguageCode, Optional[ResourceTree]] = {}
        self._store = ResourceStore.empty()
        self._resolver = self._build_resolver()
        self._reload()

    @property
    def language(self) -> LanguageCode:
        return self._language

    @property
    def group(self) -> Optional[str]:
        return self._group

    @property
    def source(self) -> ResourceSource:
        return self._source

    @property
    def store(self) -> ResourceStore:
        """Current ResourceStore snapshot (at most the active language)."""
        return self._store

    def set_directory(self, directory: Union[str, Path]) -> None:
        """Read resource files from a new directory and reload."""
        self.set_source(DirectorySource(directory))

    def set_source(self, source: ResourceSource) -> None:
        """Read resource files from a new ResourceSource and reload."""
        self._source = source
        self._reload()

    def set_group(self, group: Optional[str]) -> None:
        """Set the active translation group and reload."""
        self._group = group
        self._reload()

    def set_language(self, language: LanguageCode) -> None:
        """Set the active language and reload."""
        self._language = language
        self._reload()

    def set_not_found_message(self, text: Optional[str]) -> None:
        """Set the text returned when nothing resolves ({key}, {language} allowed)."""
        self._not_found_message = text
        self._resolver = self._build_resolver()

    def set_debug_mode(self, enabled: bool) -> None:
        """Enable or disable reporting of every successful resolution."""
        self._debug = bool(enabled)
        self._resolver = self._build_resolver()

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a key within the active group and language.

        Args:
            key: Dotted key inside the group (e.g. "errors.notFound").
            params: Placeholder values for {name} placeholders.

        Returns:
            The translated string, the fallback language's string, or the
            not-found text. Never raises.
        """
        result = self.resolve(key, params)
        if result.is_found:
            return result.value
        return self._resolver.not_found_text(self._language, result.key)

    def resolve(
        self, key: str, params: Optional[Mapping[str, Any]] = None
    ) -> ResolutionResult:
        """Resolve a key within the active group, keeping the outcome detail.

        Returns:
            ResolutionResult; NOT_FOUND with GROUP_MISSING while no group
            (or an empty one) is set.
        """
        if not self._group:
            self.reporter.group_missing(self._language, None)
            return ResolutionResult.not_found(
                str(key), self._language, FailureReason.GROUP_MISSING
            )
        return self._resolver.resolve(self._language, key, params, self._group)

    def _reload(self) -> None:
        self._fallback_trees = {}
        if not self._group:
            self._store = ResourceStore.empty()
        else:
            loader = ResourceLoader(self._source, self.reporter)
            self._store = loader.load_group(self._language, self._group)
        self._resolver = self._build_resolver()
        logger.info(
            "reloaded_translation_group",
            language=self._language,
            group=self._group,
            source=repr(self._source),
        )

    def _load_fallback_tree(self, language: LanguageCode) -> Optional[ResourceTree]:
        if language not in self._fallback_trees:
            loader = ResourceLoader(self._source, self.reporter)
            tree = loader.load_group_tree(language, self._group)
            self._fallback_trees[language] = (
                freeze_tree(tree) if tree is not None else None
            )
        return self._fallback_trees[language]

    def _build_resolver(self) -> Resolver:
        return Resolver(
            self._store,
            fallback_language=self.fallback_language,
            reporter=self.reporter,
            not_found_message=self._not_found_message,
            debug=self._debug,
            fallback_loader=self._load_fallback_tree,
        )
