"""Diagnostic reporting for translation loading and lookups.

Reporters receive structured events describing load failures, misses and
fallbacks. They are observers only: nothing they do changes what a lookup
returns.
"""

from typing import Any, Optional

from structlog.stdlib import BoundLogger

from locale_engine.logging import get_module_logger

logger = get_module_logger()


class DiagnosticReporter:
    """Sink for i18n diagnostic events.

    The base class ignores every event. Subclasses override the events they
    care about.
    """

    def load_error(self, language: Optional[str], detail: str) -> None:
        """A resource file could not be listed, read or parsed."""

    def language_missing(self, language: str) -> None:
        """The requested language is not loaded."""

    def group_missing(self, language: str, group: Optional[str]) -> None:
        """The translation group is absent from the language, or unset."""

    def key_missing(self, language: str, key: str) -> None:
        """The key path does not resolve to a string in the language."""

    def fallback_used(self, key: str, language: str, fallback_language: str) -> None:
        """The fallback language supplied the value."""

    def not_found(self, language: str, key: str) -> None:
        """Neither the requested nor the fallback language resolved the key."""

    def resolved(self, language: str, key: str, value: str) -> None:
        """A key resolved successfully (debug mode only)."""


class StructlogReporter(DiagnosticReporter):
    """Reporter that routes events to a structlog logger.

    Attributes:
        log: Bound logger receiving the events.
    """

    def __init__(self, log: Optional[BoundLogger] = None):
        """Initialize reporter.

        Args:
            log: Logger to use (default: this module's logger bound to i18n).
        """
        self.log = log or logger.bind(subsystem="i18n")

    def _emit(self, level: str, event: str, **context: Any) -> None:
        getattr(self.log, level)(event, **context)

    def load_error(self, language: Optional[str], detail: str) -> None:
        self._emit("error", "translation_load_error", language=language, detail=detail)

    def language_missing(self, language: str) -> None:
        self._emit("warning", "language_missing", language=language)

    def group_missing(self, language: str, group: Optional[str]) -> None:
        self._emit("warning", "group_missing", language=language, group=group)

    def key_missing(self, language: str, key: str) -> None:
        self._emit("warning", "key_missing", language=language, key=key)

    def fallback_used(self, key: str, language: str, fallback_language: str) -> None:
        self._emit(
            "info",
            "used_fallback_translation",
            key=key,
            requested_language=language,
            fallback_language=fallback_language,
        )

    def not_found(self, language: str, key: str) -> None:
        self._emit("error", "translation_not_found", language=language, key=key)

    def resolved(self, language: str, key: str, value: str) -> None:
        self._emit("debug", "translation_resolved", language=language, key=key, value=value)
