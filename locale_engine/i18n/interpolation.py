"""Placeholder interpolation for translated messages."""

import re
from typing import Any, Mapping, Optional

from locale_engine.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def interpolate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Replace {name} placeholders with values from params.

    Every occurrence of a placeholder is replaced in a single pass, so
    substituted values are never scanned for further placeholders.
    Placeholders whose name is absent from params, or maps to None, are
    left verbatim. Any other value is stringified, including "", 0 and
    False. A value whose str() raises also leaves its placeholder verbatim.

    Args:
        template: Message with {name} placeholders.
        params: Placeholder values.

    Returns:
        Interpolated message. Never raises.

    Example:
        >>> interpolate("Hello {user}", {"user": "Ana"})
        'Hello Ana'
        >>> interpolate("Hi {name}", {})
        'Hi {name}'
    """
    if not params:
        return template

    def _substitute(match: "re.Match[str]") -> str:
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        try:
            return str(value)
        except Exception as e:
            logger.warning(
                "unprintable_interpolation_value",
                placeholder=match.group(1),
                value_type=type(value).__name__,
                error=str(e),
            )
            return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)
