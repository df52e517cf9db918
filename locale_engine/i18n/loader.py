"""Resource loading.

Builds ResourceStore snapshots from a ResourceSource, either eagerly for
every language or lazily for a single language narrowed to one group.
"""

from typing import Any, Dict, Mapping, Optional

from locale_engine.i18n.errors import LoadFailure
from locale_engine.i18n.models import LanguageCode, ResourceStore
from locale_engine.i18n.parsers import build_tree, get_parser, split_entry
from locale_engine.i18n.reporting import DiagnosticReporter, StructlogReporter
from locale_engine.i18n.sources import ResourceSource
from locale_engine.logging import get_module_logger

logger = get_module_logger()


class ResourceLoader:
    """Loads resource files into ResourceStore snapshots.

    Each entry's base name is its language code ("fr.json" -> "fr").
    Entries with an unsupported extension are ignored.

    Attributes:
        source: ResourceSource to read entries from.
        reporter: DiagnosticReporter receiving load errors.
    """

    def __init__(
        self,
        source: ResourceSource,
        reporter: Optional[DiagnosticReporter] = None,
    ):
        """Initialize loader.

        Args:
            source: Storage to read resource entries from.
            reporter: Receives load_error events (default: StructlogReporter).
        """
        self.source = source
        self.reporter = reporter or StructlogReporter()

    def entries(self) -> Dict[LanguageCode, str]:
        """Map each available language code to its resource entry.

        When two entries share a language code (e.g. "en.json" and
        "en.yml"), the first in sorted order wins.

        Returns:
            Dict of language code -> entry name.

        Raises:
            LoadFailure: If the source cannot be listed.
        """
        found: Dict[LanguageCode, str] = {}
        for entry in sorted(self.source.list_entries()):
            if get_parser(entry) is None:
                logger.debug("unsupported_resource_file", entry=entry)
                continue
            language, _ = split_entry(entry)
            if language in found:
                logger.warning(
                    "duplicate_language_file",
                    language=language,
                    kept=found[language],
                    ignored=entry,
                )
                continue
            found[language] = entry
        return found

    def load_tree(
        self, language: LanguageCode, entry: Optional[str] = None
    ) -> Dict[str, Any]:
        """Load and parse one language's resource tree.

        Args:
            language: Language code to load.
            entry: Entry name, if already known.

        Returns:
            Resource tree as nested dicts.

        Raises:
            LoadFailure: If the entry is missing, unreadable or unparsable.
        """
        if entry is None:
            entry = self.entries().get(language)
            if entry is None:
                raise LoadFailure(language, "no resource file")

        parser = get_parser(entry)
        if parser is None:
            raise LoadFailure(language, f"unsupported resource file {entry}")

        text = self.source.read_text(entry)
        try:
            return build_tree(parser(text))
        except (ValueError, RecursionError) as e:
            raise LoadFailure(language, f"Failed to parse {entry}: {e}") from e

    def load_all(self) -> ResourceStore:
        """Load every language in the source into a new store.

        Failures are reported and the failing language omitted; the
        remaining languages still load.

        Returns:
            ResourceStore with one entry per successfully parsed file.
        """
        try:
            entries = self.entries()
        except LoadFailure as e:
            self.reporter.load_error(e.language, e.detail)
            return ResourceStore.empty()

        trees: Dict[LanguageCode, Mapping[str, Any]] = {}
        for language, entry in entries.items():
            try:
                trees[language] = self.load_tree(language, entry)
            except LoadFailure as e:
                self.reporter.load_error(e.language, e.detail)

        logger.info(
            "loaded_translations",
            source=repr(self.source),
            language_count=len(trees),
            failed_count=len(entries) - len(trees),
        )
        return ResourceStore(trees)

    def load_group_tree(
        self, language: LanguageCode, group: str
    ) -> Optional[Dict[str, Any]]:
        """Load one language and keep only the named group.

        Args:
            language: Language code to load.
            group: Top-level group to keep.

        Returns:
            {group: subtree} if the group exists, {} if it does not, or
            None if the language failed to load. Load failures are
            reported; a missing group is left for the resolver to report
            when a lookup hits it.
        """
        try:
            tree = self.load_tree(language)
        except LoadFailure as e:
            self.reporter.load_error(e.language, e.detail)
            return None

        subtree = tree.get(group)
        if not isinstance(subtree, dict):
            logger.debug("translation_group_absent", language=language, group=group)
            return {}
        return {group: subtree}

    def load_group(self, language: LanguageCode, group: str) -> ResourceStore:
        """Load one language narrowed to a group into a new store.

        The rest of the file is discarded.

        Args:
            language: Language code to load.
            group: Top-level group to keep.

        Returns:
            ResourceStore holding at most the one language. Load failure
            gives an empty store; a missing group gives an empty tree.
        """
        tree = self.load_group_tree(language, group)
        if tree is None:
            return ResourceStore.empty()

        logger.info("loaded_translation_group", language=language, group=group)
        return ResourceStore({language: tree})
