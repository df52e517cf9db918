"""Structlog setup for locale-engine.

Log level and output format come from configuration: LOG_LEVEL and
ENVIRONMENT pick the level and the renderer, and I18N_DEBUG lowers the
level to DEBUG so that per-resolution events (translation_resolved) are
actually emitted. Everything is silenced while pytest is running.

Usage:
    from locale_engine.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("loaded_translations", language_count=2)
"""

import inspect
import logging
import sys
from types import MappingProxyType
from typing import Any, Dict, Optional

import structlog
from structlog.stdlib import BoundLogger

from locale_engine.configuration import settings


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _thaw(value: Any) -> Any:
    if isinstance(value, MappingProxyType):
        return {key: _thaw(item) for key, item in value.items()}
    return value


def thaw_resource_trees(
    _logger: Any, _method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Processor turning frozen resource trees into plain dicts.

    Stored trees are MappingProxyType instances, which JSONRenderer
    cannot serialize.
    """
    return {key: _thaw(value) for key, value in event_dict.items()}


def resolve_log_level(
    log_level: Optional[str] = None, debug: Optional[bool] = None
) -> int:
    """Work out the numeric level for the root logger.

    An explicit log_level wins. Otherwise translation debug mode means
    DEBUG, and settings.LOG_LEVEL applies when it is off.

    Args:
        log_level: Level name override (DEBUG, INFO, WARNING, ...).
        debug: Translation debug mode (default: settings.i18n.debug).

    Returns:
        A logging level constant. Unknown names give logging.INFO.
    """
    if log_level:
        return getattr(logging, log_level.upper(), logging.INFO)
    debug_mode = debug if debug is not None else settings.i18n.debug
    if debug_mode:
        return logging.DEBUG
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    debug: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the root logger.

    Safe to call more than once; the command line calls it again after
    parsing --debug.

    Args:
        log_level: Level name override. Defaults to DEBUG in translation
            debug mode, else settings.LOG_LEVEL.
        is_production: JSON output instead of console output. Defaults to
            settings.is_production.
        debug: Translation debug mode. Defaults to settings.i18n.debug.

    Returns:
        Configured logger instance.
    """
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if prod_mode:
        processors.append(thaw_resource_trees)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # force: the import-time call has already installed a root handler
    logging.basicConfig(
        format="%(message)s",
        level=resolve_log_level(log_level, debug),
        force=True,
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds component (last dotted part of the module name) and module_path.

    Example:
        # In locale_engine/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "locale_engine.i18n.loader"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        return logger.bind(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return logger.bind(component="unknown")
