"""Structlog configuration for the strings catalog tooling.

Log records go to stderr so the JSON printed by the command line stays
parseable on stdout. Under pytest nothing is emitted at all.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.debug("catalog_parsed", entry_count=12)

Dependencies:
    - infrastructure.configuration.Settings
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(json_logs: bool) -> List[Processor]:
    """Processor chain: catalog context, level, time, callsite, renderer."""
    processors: List[Processor] = [
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
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def _resolve_level(log_level: Optional[str]) -> int:
    name = (log_level or settings.LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library root logger.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        json_logs: Renderer override; defaults to settings.is_json_logging.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        # Calls must still work, they just never reach a handler.
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT
        stream = None
    else:
        use_json = settings.is_json_logging if json_logs is None else json_logs
        processors = _build_processors(use_json)
        level = _resolve_level(log_level)
        stream = sys.stderr

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=stream, level=level, force=True)
    logging.root.setLevel(level)
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    The caller's ``__name__`` is read from its globals; the last dotted
    segment becomes ``component``.

    Example:
        # In modules/strings/parser.py
        logger = get_module_logger()
        # context: {"component": "parser", "module_path": "modules.strings.parser"}
    """
    frame = sys._getframe(1)
    module_name = frame.f_globals.get("__name__")
    if not module_name:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
