"""Error taxonomy for the i18n system.

Only load failures are raised, and only inside the loading layer: the
loader absorbs them per entry. Resolution failures are never raised; they
are carried as FailureReason values on a ResolutionResult.
"""

from enum import Enum
from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            tree = loader.load_tree("fr")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class LoadFailure(I18nError):
    """Raised when a resource file cannot be listed, read or parsed.

    Attributes:
        language: Language whose resources failed to load (None when the
            directory itself could not be listed)
        detail: Human-readable description of the failure

    Example:
        >>> loader.load_tree("xx")
        Traceback (most recent call last):
        ...
        LoadFailure: Failed to load translations for language 'xx': no resource file
    """

    def __init__(self, language: Optional[str], detail: str):
        """Initialize with the failing language and detail.

        Args:
            language: Language code, or None for directory-level failures
            detail: Failure description
        """
        self.language = language
        self.detail = detail
        if language is None:
            message = f"Failed to load translations: {detail}"
        else:
            message = f"Failed to load translations for language '{language}': {detail}"
        super().__init__(message)


class FailureReason(Enum):
    """Why a single-language lookup failed.

    Attributes:
        LANGUAGE_MISSING: Requested language is not in the store
        GROUP_MISSING: Requested translation group is absent or unset
        KEY_MISSING: Key path does not fully resolve to a string leaf
    """

    LANGUAGE_MISSING = "language_missing"
    GROUP_MISSING = "group_missing"
    KEY_MISSING = "key_missing"
