"""Language negotiation for picking among available languages.

Parses Accept-Language style preference lists and matches them against the
languages actually loaded (e.g. a request for "fr-CA" can be served by "fr").
"""

from typing import Iterable, List, Optional

from locale_engine.logging import get_module_logger

logger = get_module_logger()


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into language tags by preference.

    "en-US,en;q=0.9,fr-FR;q=0.8" -> ["en-US", "en", "fr-FR"]

    Entries with an unparsable quality keep the default quality of 1.0;
    the wildcard "*" and entries with quality 0 are dropped.

    Args:
        header: Accept-Language header value.

    Returns:
        Language tags ordered by descending quality (stable for ties).
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue
        quality = 1.0

        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        if quality <= 0:
            continue
        preferences.append((lang_range, quality))

    return [tag for tag, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


class LanguageNegotiator:
    """Performs language negotiation against available languages.

    Implements RFC 4647 style matching: exact tags first, then a match on
    the primary language subtag (e.g. "pt-BR" matches "pt").
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows
                primary-subtag match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.replace("_", "-").split("-")[0].lower()
        available_lang = available.replace("_", "-").split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Iterable[str],
        available: Iterable[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Returned if nothing matches.

        Returns:
            Best matching language from available, or default.
        """
        requested = list(requested)
        candidates = sorted(available)
        for req_lang in requested:
            for avail_lang in candidates:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            for avail_lang in candidates:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        logger.debug("no_matching_language", requested=requested, default=default)
        return default
