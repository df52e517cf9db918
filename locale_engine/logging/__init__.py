"""Structured logging for locale-engine (structlog).

Public API:
    - configure_logging(): (re)configure structlog and the root level
    - get_module_logger(): logger bound to the calling module
"""

from locale_engine.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
