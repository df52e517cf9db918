"""Key resolution over a ResourceStore snapshot.

The resolver walks a language's resource tree along a dotted key path,
consults the fallback language once when that fails, and interpolates the
value it finds. Every failure is absorbed: callers of translate() always
get a string.
"""

from typing import Any, Callable, Mapping, Optional, Tuple

from locale_engine.i18n.errors import FailureReason
from locale_engine.i18n.interpolation import interpolate
from locale_engine.i18n.models import (
    KeyPath,
    LanguageCode,
    ResourceStore,
    ResourceTree,
)
from locale_engine.i18n.reporting import DiagnosticReporter, StructlogReporter
from locale_engine.i18n.result import ResolutionResult

DEFAULT_FALLBACK_LANGUAGE = "en"

FallbackLoader = Callable[[LanguageCode], Optional[ResourceTree]]


def navigate(tree: Any, key_path: KeyPath) -> Optional[str]:
    """Descend a resource tree one segment at a time.

    Args:
        tree: Resource tree (or subtree) to search.
        key_path: Path to the leaf.

    Returns:
        The string leaf, or None if any segment is missing, a segment
        lands on a non-mapping, or the final node is not a string.
    """
    node = tree
    for segment in key_path.segments:
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node if isinstance(node, str) else None


class Resolver:
    """Resolves translation keys against one ResourceStore snapshot.

    A resolver is never reconfigured; changing the store, fallback
    language, not-found message or debug flag means building a new one.

    Attributes:
        store: ResourceStore snapshot searched by this resolver.
        fallback_language: Language consulted once when a lookup fails.
        reporter: DiagnosticReporter receiving miss/fallback events.
        not_found_message: Text returned when nothing resolves; it may use
            {key} and {language}. None returns the requested key.
        debug: Report every successful resolution.
    """

    def __init__(
        self,
        store: ResourceStore,
        fallback_language: LanguageCode = DEFAULT_FALLBACK_LANGUAGE,
        reporter: Optional[DiagnosticReporter] = None,
        not_found_message: Optional[str] = None,
        debug: bool = False,
        fallback_loader: Optional[FallbackLoader] = None,
    ):
        """Initialize Resolver.

        Args:
            store: ResourceStore snapshot to search.
            fallback_language: Fallback language code (default: "en").
            reporter: Diagnostic sink (default: StructlogReporter).
            not_found_message: Not-found indicator text (default: the key).
            debug: Report successful resolutions (default: False).
            fallback_loader: Supplies the fallback tree when it is not in
                the store (used by lazily loaded translators).
        """
        self.store = store
        self.fallback_language = fallback_language
        self.reporter = reporter or StructlogReporter()
        self.not_found_message = not_found_message
        self.debug = debug
        self._fallback_loader = fallback_loader

    def lookup(
        self,
        language: LanguageCode,
        key: str,
        group: Optional[str] = None,
        tree: Optional[ResourceTree] = None,
    ) -> Tuple[Optional[str], Optional[FailureReason]]:
        """Look a key up in a single language, without fallback.

        Misses are reported to the reporter.

        Args:
            language: Language code.
            key: Dotted key.
            group: Optional top-level group narrowing the tree.
            tree: Tree to search instead of the store's tree for language.

        Returns:
            (raw value, None) on success, (None, FailureReason) on failure.
        """
        if tree is None:
            tree = self.store.get_tree(language)
        if tree is None:
            self.reporter.language_missing(language)
            return None, FailureReason.LANGUAGE_MISSING

        if group is not None:
            tree = tree.get(group)
            if not isinstance(tree, Mapping):
                self.reporter.group_missing(language, group)
                return None, FailureReason.GROUP_MISSING

        value = navigate(tree, KeyPath.from_string(key))
        if value is None:
            self.reporter.key_missing(language, key)
            return None, FailureReason.KEY_MISSING
        return value, None

    def resolve(
        self,
        language: LanguageCode,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        group: Optional[str] = None,
    ) -> ResolutionResult:
        """Resolve a key, falling back to the fallback language once.

        Args:
            language: Requested language code.
            key: Dotted key (e.g. "errors.notFound").
            params: Placeholder values.
            group: Optional top-level group narrowing each tree.

        Returns:
            ResolutionResult with RESOLVED, FALLBACK or NOT_FOUND status.
        """
        key = str(key)
        language = str(language)
        if not isinstance(params, Mapping):
            params = {}

        value, reason = self.lookup(language, key, group)
        if value is not None:
            text = interpolate(value, params)
            if self.debug:
                self.reporter.resolved(language, key, text)
            return ResolutionResult.resolved(key, language, text)

        if language != self.fallback_language:
            fallback_value, _ = self.lookup(
                self.fallback_language,
                key,
                group,
                tree=self._fallback_tree(),
            )
            if fallback_value is not None:
                self.reporter.fallback_used(key, language, self.fallback_language)
                text = interpolate(fallback_value, params)
                if self.debug:
                    self.reporter.resolved(self.fallback_language, key, text)
                return ResolutionResult.fallback(
                    key, language, text, self.fallback_language, reason
                )

        self.reporter.not_found(language, key)
        return ResolutionResult.not_found(key, language, reason)

    def translate(
        self,
        language: LanguageCode,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        group: Optional[str] = None,
    ) -> str:
        """Resolve a key and return the string to show.

        Returns:
            The resolved value, the fallback value, or the not-found text.
        """
        result = self.resolve(language, key, params, group)
        if result.is_found:
            return result.value
        return self.not_found_text(language, result.key)

    def not_found_text(self, language: LanguageCode, key: str) -> str:
        """Build the not-found indicator for a key."""
        if self.not_found_message is None:
            return str(key)
        return interpolate(self.not_found_message, {"key": key, "language": language})

    def _fallback_tree(self) -> Optional[ResourceTree]:
        tree = self.store.get_tree(self.fallback_language)
        if tree is None and self._fallback_loader is not None:
            tree = self._fallback_loader(self.fallback_language)
        return tree
