"""Structlog configuration and logger setup.

Library modules only ask for loggers; the host (or ``create_i18n`` with
``configure_logs=True``) decides how they are rendered.

Usage:
    from portable_i18n.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("locale_loaded", locale="es")
"""

import inspect
import logging
import sys
from typing import Any, Callable, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, Processor

from portable_i18n.settings import get_settings

LOGGER_NAME = "portable_i18n"
LOG_TAG = "[I18N]"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def add_library_tag(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mark every event with the library namespace and the ``[I18N]`` tag."""
    event_dict.setdefault("library", LOGGER_NAME)
    event_dict.setdefault("tag", LOG_TAG)
    return event_dict


def build_processors(prod_mode: bool) -> List[Processor]:
    """Processor chain for I18N events, ending in a JSON or console renderer."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_library_tag,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the ``portable_i18n`` logger namespace.

    The level is applied to the ``portable_i18n`` stdlib logger only, so a
    host can keep its own levels for everything else.

    Args:
        log_level: Level for I18N events (DEBUG shows ``i18n_trace`` lines).
            Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True, console output otherwise.
            Defaults to settings.is_production.

    Returns:
        The ``portable_i18n`` logger.
    """
    settings = get_settings()
    library_logger = logging.getLogger(LOGGER_NAME)

    # Silence I18N events under pytest
    if _is_test_environment():
        library_logger.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                add_library_tag,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        return structlog.stdlib.get_logger(LOGGER_NAME)

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    library_logger.setLevel(getattr(logging, effective_log_level.upper(), logging.INFO))
    if not logging.root.handlers:
        logging.basicConfig(format="%(message)s")

    return structlog.stdlib.get_logger(LOGGER_NAME)


def get_module_logger() -> BoundLogger:
    """Get a ``portable_i18n`` logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path`` so that
    ``portable_i18n.translator`` logs with ``component="translator"``.

    Returns:
        Logger instance with module context
    """
    logger = structlog.stdlib.get_logger(LOGGER_NAME)

    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return logger.bind(component=parts[-1], module_path=module_name)

    return logger.bind(component="unknown")


class I18NLog:
    """Log sink used by the I18N facade.

    Every message goes to the structlog logger as a debug event and, when a
    callback is set, to the callback as a single ``[I18N] ...`` line.
    """

    def __init__(self, logger: BoundLogger, callback: Optional[Callable[[str], None]] = None):
        self.logger = logger
        self.callback = callback

    def __call__(self, message: str) -> None:
        self.logger.debug("i18n_trace", message=message)
        if self.callback is not None:
            self.callback(f"{LOG_TAG} {message}")
