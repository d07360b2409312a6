"""structlog configuration for bodax notify.

configure_logging() is called once from the application lifespan. Output
is rendered for humans (ConsoleRenderer) outside production and as JSON
lines in production. Under pytest every log entry is dropped.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("discord_bot_ready", bot_user_id="80351110224678912")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "bodax-notify"
SILENT = logging.CRITICAL + 1

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "stripe")


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _silence_for_tests() -> BoundLogger:
    logging.root.setLevel(SILENT)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT, force=True)
    return structlog.stdlib.get_logger()


def _processors(settings: "Settings", prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
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
        add_app_info(APP_NAME, settings.GIT_SHA),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings instance; loaded with get_settings() when omitted.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console).

    Returns:
        A logger bound to the configured pipeline.
    """
    if _is_test_environment():
        return _silence_for_tests()

    if settings is None:
        # Import here to avoid circular dependency at module level
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Logger for the calling module.

    Binds ``component`` (last segment of the module name) and
    ``module_path``, e.g. ``dispatcher`` and
    ``infrastructure.notifications.dispatcher``.
    """
    logger = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.split(".")[-1], module_path=module_name)
