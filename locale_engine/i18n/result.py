"""Resolution result dataclass.

Uniform result type returned by the resolver, carrying the outcome of a
lookup (resolved, resolved via fallback, or not found) before it is
collapsed to a plain string at the public boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from locale_engine.i18n.errors import FailureReason


class ResolutionStatus(Enum):
    """Outcome of a translation lookup.

    Attributes:
        RESOLVED: Requested language supplied the value
        FALLBACK: Fallback language supplied the value
        NOT_FOUND: Neither language resolved the key
    """

    RESOLVED = "resolved"
    FALLBACK = "fallback"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolutionResult:
    """Result of resolving a key.

    Attributes:
        status: ResolutionStatus -- high-level outcome
        key: str -- requested dotted key
        language: str -- requested language
        value: Optional[str] -- interpolated value (None when not found)
        source_language: Optional[str] -- language that supplied the value
        reason: Optional[FailureReason] -- why the requested language failed
    """

    status: ResolutionStatus
    key: str
    language: str
    value: Optional[str] = None
    source_language: Optional[str] = None
    reason: Optional[FailureReason] = None

    @property
    def is_found(self) -> bool:
        """True if a value was resolved, directly or via fallback."""
        return self.status != ResolutionStatus.NOT_FOUND

    @property
    def used_fallback(self) -> bool:
        """True if the fallback language supplied the value."""
        return self.status == ResolutionStatus.FALLBACK

    @classmethod
    def resolved(cls, key: str, language: str, value: str) -> "ResolutionResult":
        """Create a RESOLVED result.

        Args:
            key: Requested key
            language: Requested language, which supplied the value
            value: Interpolated value

        Returns:
            ResolutionResult with RESOLVED status
        """
        return cls(
            status=ResolutionStatus.RESOLVED,
            key=key,
            language=language,
            value=value,
            source_language=language,
        )

    @classmethod
    def fallback(
        cls,
        key: str,
        language: str,
        value: str,
        fallback_language: str,
        reason: FailureReason,
    ) -> "ResolutionResult":
        """Create a FALLBACK result.

        Args:
            key: Requested key
            language: Requested language
            value: Interpolated fallback value
            fallback_language: Language that supplied the value
            reason: Why the requested language failed

        Returns:
            ResolutionResult with FALLBACK status
        """
        return cls(
            status=ResolutionStatus.FALLBACK,
            key=key,
            language=language,
            value=value,
            source_language=fallback_language,
            reason=reason,
        )

    @classmethod
    def not_found(
        cls, key: str, language: str, reason: Optional[FailureReason]
    ) -> "ResolutionResult":
        """Create a NOT_FOUND result.

        Args:
            key: Requested key
            language: Requested language
            reason: Why the requested language failed

        Returns:
            ResolutionResult with NOT_FOUND status
        """
        return cls(
            status=ResolutionStatus.NOT_FOUND,
            key=key,
            language=language,
            reason=reason,
        )
